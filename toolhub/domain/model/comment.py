"""Comment entity.

Comments belong to a thread and may reply to another comment of the same
thread, forming a tree. New replies are refused past
``CommunitySettings.max_comment_depth`` levels.
"""

from typing import Optional

from pydantic import Field

from toolhub.domain.model.common import EditableModel
from toolhub.domain.value import CommentId, ContentStatus, ThreadId, UserId


class Comment(EditableModel):
    """Comment entity.

    Threading is managed through ``parent_comment_id`` (None for top-level).
    ``reply_count`` tracks the number of active direct replies.
    """

    id: CommentId
    thread_id: ThreadId
    parent_comment_id: Optional[CommentId] = None
    author_id: UserId
    content: str = Field(min_length=1, max_length=2000)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    status: ContentStatus = ContentStatus.ACTIVE

    @property
    def is_reply(self) -> bool:
        return self.parent_comment_id is not None

    @property
    def is_active(self) -> bool:
        return self.status == ContentStatus.ACTIVE
