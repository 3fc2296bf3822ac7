"""PostgreSQL repository implementations."""

from toolhub.persistence.repository.comment import PostgresCommentRepository
from toolhub.persistence.repository.review import PostgresStructuredReviewRepository
from toolhub.persistence.repository.score import (
    PostgresAggregatedScoreRepository,
    PostgresEditorialScoreRepository,
)
from toolhub.persistence.repository.thread import PostgresThreadRepository
from toolhub.persistence.repository.tool import PostgresToolRepository
from toolhub.persistence.repository.user import PostgresUserRepository
from toolhub.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresToolRepository",
    "PostgresStructuredReviewRepository",
    "PostgresAggregatedScoreRepository",
    "PostgresEditorialScoreRepository",
]
