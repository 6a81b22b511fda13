"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from customlinks.config import Settings
from customlinks.domain.repository import LinkRepository, UserRepository
from customlinks.persistence.database import create_engine, create_session_factory
from customlinks.persistence.repository import (
    PostgresLinkRepository,
    PostgresUserRepository,
)
from customlinks.util.di.base import ProviderBase
from customlinks.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Link and user storage; swapped for in-memory repositories in tests."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One session per request: commit on success, roll back on error."""
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Rolling back link store session", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_link_repository(self, session: AsyncSession) -> LinkRepository:
        return PostgresLinkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)
