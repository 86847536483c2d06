"""Async PostgreSQL engine and sessions (SQLAlchemy + asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from promptu.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the engine for ``settings.database``.

    Each connection carries a server-side statement timeout so a stuck
    aggregate cannot hold a pooled connection forever.
    """
    database = settings.database
    server_settings = {"application_name": "promptu-core"}
    if database.statement_timeout_ms:
        server_settings["statement_timeout"] = str(database.statement_timeout_ms)

    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle,
        connect_args={"server_settings": server_settings},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows are mapped to frozen domain models, so nothing needs refreshing
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
