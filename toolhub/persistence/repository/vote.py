"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from toolhub.domain.model import Vote
from toolhub.domain.repository import VoteRepository
from toolhub.domain.value import UserId, VotableType, VoteId, VoteType
from toolhub.persistence.mappers import row_to_vote, vote_to_dict
from toolhub.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user, newest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.user_id == user_id)
            .order_by(desc(votes_table.c.created_at), votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote. The unique constraint rejects a second vote."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType, previous: VoteType
    ) -> Optional[Vote]:
        """Flip the direction of a vote still pointing the ``previous`` way."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .where(votes_table.c.vote_type == previous.value)
            .values(vote_type=vote_type.value, updated_at=func.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> int:
        """Count the vote rows of one direction on an item."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                and_(
                    votes_table.c.votable_type == votable_type.value,
                    votes_table.c.votable_id == votable_id,
                    votes_table.c.vote_type == vote_type.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
