"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from toolhub.config import Settings
from toolhub.domain.repository import (
    AggregatedScoreRepository,
    CommentRepository,
    EditorialScoreRepository,
    StructuredReviewRepository,
    ThreadRepository,
    ToolRepository,
    UserRepository,
    VoteRepository,
)
from toolhub.persistence.database import create_engine, create_session_factory
from toolhub.persistence.repository import (
    PostgresAggregatedScoreRepository,
    PostgresCommentRepository,
    PostgresEditorialScoreRepository,
    PostgresStructuredReviewRepository,
    PostgresThreadRepository,
    PostgresToolRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from toolhub.util.di.base import ProviderBase
from toolhub.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings.database)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Vote rows and the
        counters they drive therefore change together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        """Provide Thread repository."""
        return PostgresThreadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tool_repository(self, session: AsyncSession) -> ToolRepository:
        """Provide Tool repository."""
        return PostgresToolRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_review_repository(
        self, session: AsyncSession
    ) -> StructuredReviewRepository:
        """Provide StructuredReview repository."""
        return PostgresStructuredReviewRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_aggregated_score_repository(
        self, session: AsyncSession
    ) -> AggregatedScoreRepository:
        """Provide AggregatedScore repository."""
        return PostgresAggregatedScoreRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_editorial_score_repository(
        self, session: AsyncSession
    ) -> EditorialScoreRepository:
        """Provide EditorialScore repository."""
        return PostgresEditorialScoreRepository(session)
