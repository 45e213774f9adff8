"""Async Postgres engine and sessions for the users and oauth_accounts tables."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from spoon.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine from DATABASE__* settings.

    SQL is echoed when DEBUG is set.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory behind the per-request session.

    Objects stay usable after commit because repositories map rows to
    frozen domain models straight away.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
