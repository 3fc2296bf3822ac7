"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from toolhub.domain.model.vote import Vote
from toolhub.domain.value import UserId, VotableType, VoteId, VoteType


class VoteRepository(ABC):
    """The vote ledger: at most one row per (user, votable type, votable id).

    Counters on threads and comments are maintained by the caller, inside
    the same unit of work as the ledger change.
    """

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """The user's current vote on one item, if any."""

    @abstractmethod
    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """The user's votes on a page of items, in one query.

        Args:
            user_id: Voter
            votable_type: Kind shared by every id in ``votable_ids``
            votable_ids: Items on the page; may be empty

        Returns:
            Votes that exist, in no particular order
        """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Every vote the user holds, newest first."""

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Raises:
            IntegrityError: If the user already holds a vote on the item.
                Concurrent casts race on this constraint.
        """

    @abstractmethod
    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType, previous: VoteType
    ) -> Optional[Vote]:
        """Flip a vote's direction from ``previous`` to ``vote_type``.

        Returns:
            The updated vote, or None when the row is gone or no longer
            points the ``previous`` way
        """

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Remove a vote. False when the row is gone."""

    @abstractmethod
    async def count_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> int:
        """Number of ``vote_type`` votes on an item, for recounting counters."""
