"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .review import InMemoryStructuredReviewRepository
from .score import InMemoryAggregatedScoreRepository, InMemoryEditorialScoreRepository
from .thread import InMemoryThreadRepository
from .tool import InMemoryToolRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAggregatedScoreRepository",
    "InMemoryCommentRepository",
    "InMemoryEditorialScoreRepository",
    "InMemoryStructuredReviewRepository",
    "InMemoryThreadRepository",
    "InMemoryToolRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
