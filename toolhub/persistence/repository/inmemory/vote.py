"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from toolhub.domain.model.vote import Vote
from toolhub.domain.repository.vote import VoteRepository
from toolhub.domain.value import UserId, VotableType, VoteId, VoteType

VoteKey = tuple[UserId, VotableType, UUID]


def _key(vote: Vote) -> VoteKey:
    return (vote.user_id, vote.votable_type, vote.votable_id)


class InMemoryVoteRepository(VoteRepository):
    """Votes keyed the way the ``unique_vote`` constraint keys them."""

    def __init__(self) -> None:
        self._votes: dict[VoteKey, Vote] = {}

    def _find_key(self, vote_id: VoteId) -> Optional[VoteKey]:
        return next((k for k, v in self._votes.items() if v.id == vote_id), None)

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        return self._votes.get((user_id, votable_type, votable_id))

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        found = (self._votes.get((user_id, votable_type, vid)) for vid in votable_ids)
        return [vote for vote in found if vote is not None]

    async def find_by_user(self, user_id: UserId) -> list[Vote]:
        """Newest first."""
        votes = [v for v in self._votes.values() if v.user_id == user_id]
        return sorted(votes, key=lambda v: v.created_at, reverse=True)

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: If the user already voted on the item
        """
        if _key(vote) in self._votes:
            raise IntegrityError("Duplicate vote", None, Exception())
        self._votes[_key(vote)] = vote
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType, previous: VoteType
    ) -> Optional[Vote]:
        key = self._find_key(vote_id)
        if key is None or self._votes[key].vote_type != previous:
            return None
        self._votes[key] = self._votes[key].touched(vote_type=vote_type)
        return self._votes[key]

    async def delete(self, vote_id: VoteId) -> bool:
        key = self._find_key(vote_id)
        if key is None:
            return False
        del self._votes[key]
        return True

    async def count_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> int:
        return sum(
            1
            for (_, kind, target), vote in self._votes.items()
            if kind == votable_type
            and target == votable_id
            and vote.vote_type == vote_type
        )
