"""Async engine and session factory for PostgreSQL.

SQL statement logging goes through the ``sqlalchemy.engine`` logger, whose
level is set in ``toolhub.util.logging``.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from toolhub.config import DatabaseSettings


def create_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Pooled asyncpg engine; stale connections are detected before use."""
    return create_async_engine(
        settings.url,
        pool_pre_ping=True,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_recycle=settings.pool_recycle,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped units of work.

    Objects stay readable after commit, and nothing is flushed until the
    repositories execute their statements.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
