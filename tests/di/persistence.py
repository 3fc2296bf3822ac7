"""Mock persistence provider for testing."""

from dishka import Scope, provide

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
from toolhub.persistence.repository.inmemory import (
    InMemoryAggregatedScoreRepository,
    InMemoryCommentRepository,
    InMemoryEditorialScoreRepository,
    InMemoryStructuredReviewRepository,
    InMemoryThreadRepository,
    InMemoryToolRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from toolhub.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across the separate request scopes of
    an HTTP test client. Each test builds its own container, so tests stay
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        return InMemoryThreadRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_tool_repository(self) -> ToolRepository:
        return InMemoryToolRepository()

    @provide(scope=Scope.APP)
    def get_review_repository(self) -> StructuredReviewRepository:
        return InMemoryStructuredReviewRepository()

    @provide(scope=Scope.APP)
    def get_aggregated_score_repository(self) -> AggregatedScoreRepository:
        return InMemoryAggregatedScoreRepository()

    @provide(scope=Scope.APP)
    def get_editorial_score_repository(self) -> EditorialScoreRepository:
        return InMemoryEditorialScoreRepository()
