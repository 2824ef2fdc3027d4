"""Database engine and session management."""

import logging
import typing as t

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import SETTINGS

LOGGER: logging.Logger = logging.getLogger(__name__)


class Base(DeclarativeBase):  # pylint: disable=too-few-public-methods
    """Base class for all database models."""


ENGINE: AsyncEngine = create_async_engine(
    SETTINGS.database_url,
    echo=SETTINGS.debug,
)

ASYNC_SESSION_MAKER: async_sessionmaker[AsyncSession] = async_sessionmaker(
    ENGINE,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> t.AsyncGenerator[AsyncSession, None]:
    """Dependency providing a session committed at the end of the request.

    Yields:
        AsyncSession: An asynchronous database session.
    """
    async with ASYNC_SESSION_MAKER() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create any missing tables."""
    async with ENGINE.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    LOGGER.debug("Schema ensured on %s", ENGINE.url.render_as_string())


async def reset_db() -> None:
    """Drop and recreate every table."""
    async with ENGINE.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the connection pool."""
    await ENGINE.dispose()
