"""In-memory comment repository for testing."""

from typing import List, Optional

from toolhub.domain.model.comment import Comment
from toolhub.domain.repository.comment import CommentRepository
from toolhub.domain.value import CommentId, ContentStatus, ThreadId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        comments = [c for c in self._comments.values() if c.thread_id == thread_id]
        return sorted(comments, key=lambda c: (c.created_at, str(c.id)))

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None or not comment.is_active:
            return None
        updated = comment.touched(content=content)
        self._comments[comment_id] = updated
        return updated

    async def mark_deleted(self, comment_id: CommentId) -> bool:
        comment = self._comments.get(comment_id)
        if comment is None or not comment.is_active:
            return False
        self._comments[comment_id] = comment.touched(status=ContentStatus.DELETED)
        return True

    async def adjust_counters(
        self,
        comment_id: CommentId,
        upvotes: int = 0,
        downvotes: int = 0,
        reply_count: int = 0,
    ) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={
                "upvotes": max(comment.upvotes + upvotes, 0),
                "downvotes": max(comment.downvotes + downvotes, 0),
                "reply_count": max(comment.reply_count + reply_count, 0),
            }
        )
        self._comments[comment_id] = updated
        return updated
