"""Repository interfaces for Toolhub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from toolhub.domain.repository.comment import CommentRepository
from toolhub.domain.repository.review import StructuredReviewRepository
from toolhub.domain.repository.score import (
    AggregatedScoreRepository,
    EditorialScoreRepository,
)
from toolhub.domain.repository.thread import ThreadRepository, ThreadSortOrder
from toolhub.domain.repository.tool import ToolRepository
from toolhub.domain.repository.user import UserRepository
from toolhub.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "ThreadRepository",
    "ThreadSortOrder",
    "CommentRepository",
    "VoteRepository",
    "ToolRepository",
    "StructuredReviewRepository",
    "AggregatedScoreRepository",
    "EditorialScoreRepository",
]
