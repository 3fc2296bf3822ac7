"""Vote domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from toolhub.domain.error import ConflictError, NotFoundError
from toolhub.domain.model import Vote
from toolhub.domain.repository import (
    CommentRepository,
    ThreadRepository,
    VoteRepository,
)
from toolhub.domain.value import (
    Authenticated,
    CommentId,
    ThreadId,
    Viewer,
    VotableType,
    VoteAction,
    VoteId,
    VoteType,
)

from .base import Service
from .counter_service import CounterService


@dataclass(frozen=True)
class VoteResult:
    """Outcome of casting a vote on an item."""

    votable_type: VotableType
    votable_id: UUID
    user_vote: VoteType | None
    upvotes: int
    downvotes: int
    action: VoteAction


class VoteService(Service):
    """Domain service for the vote ledger.

    A user holds at most one vote per item. Voting the same direction twice
    removes the vote; voting the other direction flips it.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        counter_service: CounterService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            thread_repository: Thread repository
            comment_repository: Comment repository
            counter_service: Counter maintenance service
        """
        self.vote_repository = vote_repository
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.counter_service = counter_service

    async def cast_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        viewer: Viewer,
        vote_type: VoteType,
    ) -> VoteResult:
        """Cast, toggle off, or flip the viewer's vote on an item.

        The vote row change and the counter adjustment run in the same
        request-scoped transaction.

        Args:
            votable_type: Thread or comment
            votable_id: Item ID
            viewer: Requesting viewer
            vote_type: Requested direction

        Returns:
            Counters after the change and the viewer's resulting vote

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            NotFoundError: If the item is missing or deleted
            ConflictError: If a concurrent request recorded the same vote
        """
        user = self.require_authenticated(viewer, "vote")

        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user.user_id),
            vote_type=vote_type.value,
        ):
            await self._ensure_votable(votable_type, votable_id)

            existing = await self.vote_repository.find_by_user_and_votable(
                user.user_id, votable_type, votable_id
            )

            previous: VoteType | None
            current: VoteType | None
            if existing is None:
                await self._insert_vote(user, votable_type, votable_id, vote_type)
                previous, current, action = None, vote_type, VoteAction.ADDED
            elif existing.vote_type == vote_type:
                removed = await self.vote_repository.delete(existing.id)
                # A concurrent toggle may have removed it already
                previous = vote_type if removed else None
                current, action = None, VoteAction.REMOVED
            else:
                updated = await self.vote_repository.update_vote_type(
                    existing.id, vote_type, existing.vote_type
                )
                if updated is None:
                    raise ConflictError(
                        "Vote was modified concurrently, retry", "VOTE_CONFLICT"
                    )
                previous, current = existing.vote_type, vote_type
                action = VoteAction.CHANGED

            upvotes, downvotes = await self.counter_service.apply_vote_transition(
                votable_type, votable_id, previous, current
            )

            logfire.info(
                "Vote cast",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                action=action.value,
                upvotes=upvotes,
                downvotes=downvotes,
            )
            return VoteResult(
                votable_type=votable_type,
                votable_id=votable_id,
                user_vote=current,
                upvotes=upvotes,
                downvotes=downvotes,
                action=action,
            )

    async def _insert_vote(
        self,
        user: Authenticated,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> Vote:
        now = datetime.now()
        vote = Vote(
            id=VoteId(uuid4()),
            user_id=user.user_id,
            votable_type=votable_type,
            votable_id=votable_id,
            vote_type=vote_type,
            created_at=now,
            updated_at=now,
        )
        try:
            return await self.vote_repository.save(vote)
        except IntegrityError as e:
            logfire.warn(
                "Duplicate vote attempt",
                user_id=str(user.user_id),
                votable_id=str(votable_id),
            )
            raise ConflictError(
                "A vote on this item was already recorded", "DUPLICATE_VOTE"
            ) from e

    async def _ensure_votable(self, votable_type: VotableType, votable_id: UUID) -> None:
        if votable_type == VotableType.THREAD:
            thread = await self.thread_repository.find_by_id(ThreadId(votable_id))
            if thread is None or not thread.is_active:
                logfire.warn("Vote on missing thread", thread_id=str(votable_id))
                raise NotFoundError("Thread", str(votable_id))
        else:
            comment = await self.comment_repository.find_by_id(CommentId(votable_id))
            if comment is None or not comment.is_active:
                logfire.warn("Vote on missing comment", comment_id=str(votable_id))
                raise NotFoundError("Comment", str(votable_id))

    async def get_viewer_votes(
        self,
        viewer: Viewer,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> dict[UUID, VoteType]:
        """Look up the viewer's votes on many items at once.

        Args:
            viewer: Requesting viewer
            votable_type: Type of the items
            votable_ids: Item IDs

        Returns:
            Mapping of voted item IDs to the vote direction. Empty for
            anonymous viewers.
        """
        if not isinstance(viewer, Authenticated) or not votable_ids:
            return {}

        # Batch query to avoid N+1
        votes = await self.vote_repository.find_by_user_and_votables(
            user_id=viewer.user_id,
            votable_type=votable_type,
            votable_ids=votable_ids,
        )
        return {vote.votable_id: vote.vote_type for vote in votes}

    async def list_user_votes(self, viewer: Viewer) -> list[Vote]:
        """All votes cast by the viewer, newest first.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
        """
        user = self.require_authenticated(viewer, "view votes")
        with logfire.span("vote_service.list_user_votes", user_id=str(user.user_id)):
            return await self.vote_repository.find_by_user(user.user_id)
