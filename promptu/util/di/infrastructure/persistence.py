"""Persistence component: repositories and the unit of work."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from promptu.config import Settings
from promptu.domain.repository import (
    ItemRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from promptu.persistence.database import create_engine, create_session_factory
from promptu.persistence.repository import (
    PostgresItemRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from promptu.persistence.unit_of_work import SqlAlchemyUnitOfWork
from promptu.util.di.base import ProviderBase
from promptu.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable persistence component."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories sharing one session per request."""

    __is_mock__ = False

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Committed when the request scope closes normally, rolled back when
        it closes with an exception.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    unit_of_work = provide(SqlAlchemyUnitOfWork, provides=UnitOfWork)
    user_repository = provide(PostgresUserRepository, provides=UserRepository)
    item_repository = provide(PostgresItemRepository, provides=ItemRepository)
    vote_repository = provide(PostgresVoteRepository, provides=VoteRepository)
