"""Thread aggregate root.

Threads are top-level community discussions. Vote and comment counters are
a denormalized cache of the vote rows and active top-level comments.
"""

from typing import Optional

from pydantic import Field

from toolhub.domain.model.common import EditableModel
from toolhub.domain.value import Category, ContentStatus, ThreadId, UserId


class Thread(EditableModel):
    """Thread aggregate root."""

    id: ThreadId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=10000)
    category: Optional[Category] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    is_pinned: bool = False
    status: ContentStatus = ContentStatus.ACTIVE

    @property
    def score(self) -> int:
        """Net score (upvotes minus downvotes)."""
        return self.upvotes - self.downvotes

    @property
    def is_active(self) -> bool:
        return self.status == ContentStatus.ACTIVE
