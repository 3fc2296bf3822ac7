"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from toolhub.domain.model.comment import Comment
from toolhub.domain.value import CommentId, ThreadId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, regardless of status.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        """Find every comment of a thread in a single query.

        Deleted comments are included so callers can resolve the parent
        linkage of replies whose parent was removed.

        Args:
            thread_id: The thread's ID

        Returns:
            All comments of the thread, in creation order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of an active comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment, or None if missing or deleted
        """
        pass

    @abstractmethod
    async def mark_deleted(self, comment_id: CommentId) -> bool:
        """Flip an active comment's status to deleted.

        Args:
            comment_id: Comment ID

        Returns:
            True if the status changed, False if missing or already deleted
        """
        pass

    @abstractmethod
    async def adjust_counters(
        self,
        comment_id: CommentId,
        upvotes: int = 0,
        downvotes: int = 0,
        reply_count: int = 0,
    ) -> Optional[Comment]:
        """Atomically add deltas to the comment's counters.

        Each counter is floored at zero.

        Args:
            comment_id: Comment ID
            upvotes: Delta for upvotes
            downvotes: Delta for downvotes
            reply_count: Delta for reply_count

        Returns:
            Comment with updated counters, or None if not found
        """
        pass
