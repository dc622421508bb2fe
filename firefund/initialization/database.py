"""Async engine and session maker creation."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from firefund.config.settings import Settings


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create async engine from settings.

    Args:
        settings: Application settings

    Returns:
        Async engine (asyncpg driver)
    """
    return create_async_engine(
        settings.async_database_url,
        echo=settings.database_echo,
        poolclass=NullPool,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session maker bound to engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
