"""Denormalized counter maintenance.

Every mutation that changes a vote row or a comment's active status goes
through this service, so the cached counters on threads and comments keep
tracking the underlying rows.
"""

from uuid import UUID

import logfire

from toolhub.domain.error import NotFoundError
from toolhub.domain.model import Comment
from toolhub.domain.repository import CommentRepository, ThreadRepository
from toolhub.domain.value import CommentId, ThreadId, VotableType, VoteType

from .base import Service


class CounterService(Service):
    """Applies counter deltas with SQL-level increments floored at zero."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize counter service.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def apply_vote_transition(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        previous: VoteType | None,
        current: VoteType | None,
    ) -> tuple[int, int]:
        """Move an item's vote counters from one vote state to another.

        Args:
            votable_type: Thread or comment
            votable_id: Item ID
            previous: The user's vote before the change (None for no vote)
            current: The user's vote after the change (None for no vote)

        Returns:
            (upvotes, downvotes) after the adjustment

        Raises:
            NotFoundError: If the item no longer exists
        """
        deltas = {VoteType.UPVOTE: 0, VoteType.DOWNVOTE: 0}
        if previous is not None:
            deltas[previous] -= 1
        if current is not None:
            deltas[current] += 1

        with logfire.span(
            "counter_service.apply_vote_transition",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            upvotes_delta=deltas[VoteType.UPVOTE],
            downvotes_delta=deltas[VoteType.DOWNVOTE],
        ):
            if votable_type == VotableType.THREAD:
                item = await self.thread_repository.adjust_counters(
                    ThreadId(votable_id),
                    upvotes=deltas[VoteType.UPVOTE],
                    downvotes=deltas[VoteType.DOWNVOTE],
                )
            else:
                item = await self.comment_repository.adjust_counters(
                    CommentId(votable_id),
                    upvotes=deltas[VoteType.UPVOTE],
                    downvotes=deltas[VoteType.DOWNVOTE],
                )

            if item is None:
                raise NotFoundError(votable_type.value.capitalize(), str(votable_id))

            return item.upvotes, item.downvotes

    async def comment_added(self, comment: Comment) -> None:
        """Count a newly created active comment.

        A reply bumps its parent's ``reply_count``; a top-level comment
        bumps the thread's ``comment_count``.
        """
        await self._comment_delta(comment, 1)

    async def comment_removed(self, comment: Comment) -> None:
        """Uncount a comment that was just soft-deleted (floored at zero)."""
        await self._comment_delta(comment, -1)

    async def _comment_delta(self, comment: Comment, delta: int) -> None:
        with logfire.span(
            "counter_service.comment_delta",
            comment_id=str(comment.id),
            is_reply=comment.is_reply,
            delta=delta,
        ):
            if comment.parent_comment_id is not None:
                await self.comment_repository.adjust_counters(
                    comment.parent_comment_id, reply_count=delta
                )
            else:
                await self.thread_repository.adjust_counters(
                    comment.thread_id, comment_count=delta
                )
