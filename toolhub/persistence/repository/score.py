"""PostgreSQL implementations of the tool score repositories."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from toolhub.domain.model import AggregatedScore, EditorialScore
from toolhub.domain.repository import (
    AggregatedScoreRepository,
    EditorialScoreRepository,
)
from toolhub.domain.value import EditorialScoreId, ToolId
from toolhub.persistence.mappers import (
    aggregated_score_to_dict,
    editorial_score_to_dict,
    row_to_aggregated_score,
    row_to_editorial_score,
)
from toolhub.persistence.tables import aggregated_scores_table, editorial_scores_table


class PostgresAggregatedScoreRepository(AggregatedScoreRepository):
    """PostgreSQL implementation of AggregatedScoreRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_tool(self, tool_id: ToolId) -> Optional[AggregatedScore]:
        """Find the aggregate of a tool."""
        stmt = select(aggregated_scores_table).where(
            aggregated_scores_table.c.tool_id == tool_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_aggregated_score(row._asdict()) if row else None

    async def save(self, score: AggregatedScore) -> AggregatedScore:
        """Insert or replace the aggregate of a tool."""
        score_dict = aggregated_score_to_dict(score)
        stmt = pg_insert(aggregated_scores_table).values(**score_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[aggregated_scores_table.c.tool_id],
            set_={k: v for k, v in score_dict.items() if k != "tool_id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return score

    async def delete_by_tool(self, tool_id: ToolId) -> bool:
        """Remove the aggregate of a tool."""
        stmt = delete(aggregated_scores_table).where(
            aggregated_scores_table.c.tool_id == tool_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]


class PostgresEditorialScoreRepository(EditorialScoreRepository):
    """PostgreSQL implementation of EditorialScoreRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, editorial_score_id: EditorialScoreId
    ) -> Optional[EditorialScore]:
        """Find an editorial score by ID."""
        stmt = select(editorial_scores_table).where(
            editorial_scores_table.c.id == editorial_score_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_editorial_score(row._asdict()) if row else None

    async def find_active_by_tool(self, tool_id: ToolId) -> Optional[EditorialScore]:
        """Find the active editorial score of a tool."""
        stmt = select(editorial_scores_table).where(
            and_(
                editorial_scores_table.c.tool_id == tool_id,
                editorial_scores_table.c.is_active.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_editorial_score(row._asdict()) if row else None

    async def save(self, score: EditorialScore) -> EditorialScore:
        """Insert an editorial score.

        The partial unique index rejects a second active score per tool.
        """
        stmt = insert(editorial_scores_table).values(**editorial_score_to_dict(score))
        await self.session.execute(stmt)
        await self.session.flush()
        return score

    async def deactivate(
        self, editorial_score_id: EditorialScoreId
    ) -> Optional[EditorialScore]:
        """Mark an editorial score inactive."""
        stmt = (
            update(editorial_scores_table)
            .where(editorial_scores_table.c.id == editorial_score_id)
            .values(is_active=False, updated_at=func.now())
            .returning(editorial_scores_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_editorial_score(row._asdict()) if row else None
