"""Shared fixtures: an in-memory SQLite database behind the real client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from app.db.pg_client import DatabaseClient, get_database_client
from main import app
from product.pg_repository import ProductRepository
from product.use_cases import ProductUseCases

TEST_DB_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def db_client():
    """Database client with the schema created, dropped after the test."""
    client = DatabaseClient(TEST_DB_URL, poolclass=StaticPool, connect_args={"check_same_thread": False})
    await client.create_all()
    yield client
    await client.dispose()


@pytest_asyncio.fixture
async def session(db_client):
    async with db_client.session() as session:
        yield session


@pytest.fixture
def use_cases():
    return ProductUseCases(product_repo=ProductRepository())


@pytest_asyncio.fixture
async def client(db_client):
    """HTTP client talking to the app with the test database injected."""
    app.dependency_overrides[get_database_client] = lambda: db_client
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
