"""Domain value objects for Toolhub."""

from toolhub.domain.value.identifiers import (
    CommentId,
    EditorialScoreId,
    ReviewId,
    ThreadId,
    ToolId,
    UserId,
    VoteId,
)
from toolhub.domain.value.types import (
    Category,
    ConfidenceBand,
    ContentStatus,
    ReviewerType,
    ReviewStatus,
    ScoreSource,
    UserRole,
    VotableType,
    VoteAction,
    VoteType,
)
from toolhub.domain.value.viewer import ANONYMOUS, Anonymous, Authenticated, Viewer

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    "VoteId",
    "ToolId",
    "ReviewId",
    "EditorialScoreId",
    # Types
    "Category",
    "ConfidenceBand",
    "ContentStatus",
    "ReviewerType",
    "ReviewStatus",
    "ScoreSource",
    "UserRole",
    "VotableType",
    "VoteAction",
    "VoteType",
    # Viewer
    "ANONYMOUS",
    "Anonymous",
    "Authenticated",
    "Viewer",
]
