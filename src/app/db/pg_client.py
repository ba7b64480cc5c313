import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.settings import settings

logger = logging.getLogger(__name__)


class DatabaseClient:
    def __init__(self, url: str, echo: bool = False, **engine_options: Any) -> None:
        self._engine = create_async_engine(url, pool_pre_ping=True, echo=echo, **engine_options)
        self._session_factory = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False, autocommit=False, autoflush=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session: AsyncSession = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def dispose(self) -> None:
        await self._engine.dispose()


@lru_cache
def get_database_client() -> DatabaseClient:
    return DatabaseClient(
        settings.DB_URL,
        settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
    )


async def get_session(db_client: DatabaseClient = Depends(get_database_client)) -> AsyncGenerator[AsyncSession, None]:
    async with db_client.session() as session:
        yield session


class Base(DeclarativeBase):
    pass
