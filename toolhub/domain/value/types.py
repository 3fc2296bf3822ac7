"""Domain value objects for Toolhub.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from toolhub.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Direction of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @property
    def opposite(self) -> "VoteType":
        """The other vote direction."""
        return VoteType.DOWNVOTE if self is VoteType.UPVOTE else VoteType.UPVOTE


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    THREAD = "thread"
    COMMENT = "comment"


class VoteAction(str, Enum):
    """Outcome of casting a vote."""

    ADDED = "vote_added"
    REMOVED = "vote_removed"
    CHANGED = "vote_changed"


class ContentStatus(str, Enum):
    """Lifecycle status of threads and comments.

    Content is never physically deleted; deletion flips the status.
    """

    ACTIVE = "active"
    DELETED = "deleted"


class UserRole(str, Enum):
    """Role of a user."""

    USER = "user"
    ADMIN = "admin"


class ReviewStatus(str, Enum):
    """Moderation status of a structured review."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ReviewerType(str, Enum):
    """Who wrote a structured review."""

    USER = "user"
    VERIFIED = "verified"
    EDITORIAL = "editorial"
    EDITOR = "editor"

    @property
    def is_editorial(self) -> bool:
        return self in (ReviewerType.EDITORIAL, ReviewerType.EDITOR)


class ScoreSource(str, Enum):
    """Where displayed spider-chart values come from."""

    AGGREGATED = "aggregated"
    EDITORIAL = "editorial"
    DEFAULT = "default"


class ConfidenceBand(str, Enum):
    """Three-tier confidence badge."""

    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class Category(RootValueObject[str]):
    """Free-form category label for threads and tools.

    Stored trimmed, 1-50 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_category(cls, v: str) -> str:
        """Trim and validate category length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Category must be 1-50 characters")
        return v
