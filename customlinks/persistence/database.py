"""Async engine and session factory for the links database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from customlinks.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg engine; SQL is echoed when ``debug`` is on."""
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Records stay readable after commit, mappers build domain models from them
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
