import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", debug: bool = False, echo_sql: bool = False) -> None:
    """Configure the root logger for the API process.

    Args:
        level: Level name used when ``debug`` is off
        debug: Force DEBUG level
        echo_sql: Leave SQLAlchemy loggers alone so engine echo output shows up
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else level.upper())

    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    if not echo_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
