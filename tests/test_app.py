import logging

import pytest
from pydantic import ValidationError

from app.errors import ErrorCode, ServiceError
from app.log_config import setup_logging
from app.settings import Settings
from product.schemas import ProductBody
from product.use_cases import to_price


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///products.db")
    monkeypatch.setenv("DB_CREATE_TABLES", "true")

    settings = Settings()

    assert settings.DB_URL == "sqlite+aiosqlite:///products.db"
    assert settings.DB_CREATE_TABLES is True
    assert settings.LOG_LEVEL == "INFO"


def test_setup_logging_levels():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    try:
        setup_logging("warning")
        assert root.level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

        setup_logging("warning", debug=True)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_to_price_is_exact():
    assert str(to_price(10)) == "10.00"
    assert to_price(0) == 0


def test_to_price_rejects_negative():
    error = to_price(-3)
    assert isinstance(error, ServiceError)
    assert error.code == ErrorCode.BAD_REQUEST
    assert error.is_client_error


def test_empty_description_is_absent():
    assert ProductBody(name="a", description="", price=1).normalized_description() is None
    assert ProductBody(name="a", price=1).normalized_description() is None
    assert ProductBody(name="a", description="x", price=1).normalized_description() == "x"


@pytest.mark.parametrize("price", ["true", "\"7\"", "7.5"])
def test_body_price_must_be_a_json_integer(price):
    with pytest.raises(ValidationError):
        ProductBody.model_validate_json(f'{{"name": "a", "price": {price}}}')

    assert ProductBody.model_validate_json('{"name": "a", "price": 7}').price == 7
