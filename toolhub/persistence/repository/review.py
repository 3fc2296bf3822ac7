"""PostgreSQL implementation of StructuredReview repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from toolhub.domain.model import StructuredReview
from toolhub.domain.repository import StructuredReviewRepository
from toolhub.domain.value import ReviewerType, ReviewId, ReviewStatus, ToolId, UserId
from toolhub.persistence.mappers import review_to_dict, row_to_review
from toolhub.persistence.tables import structured_reviews_table as reviews_table


class PostgresStructuredReviewRepository(StructuredReviewRepository):
    """PostgreSQL implementation of StructuredReviewRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, review_id: ReviewId) -> Optional[StructuredReview]:
        """Find a review by ID."""
        stmt = select(reviews_table).where(reviews_table.c.id == review_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_review(row._asdict()) if row else None

    async def find_by_user_and_tool(
        self, user_id: UserId, tool_id: ToolId
    ) -> Optional[StructuredReview]:
        """Find a user's review of a tool."""
        stmt = select(reviews_table).where(
            and_(
                reviews_table.c.user_id == user_id,
                reviews_table.c.tool_id == tool_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_review(row._asdict()) if row else None

    async def find_by_tool(
        self, tool_id: ToolId, status: ReviewStatus
    ) -> List[StructuredReview]:
        """Find every review of a tool in one status, oldest first."""
        stmt = (
            select(reviews_table)
            .where(
                and_(
                    reviews_table.c.tool_id == tool_id,
                    reviews_table.c.status == status.value,
                )
            )
            .order_by(reviews_table.c.created_at, reviews_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_review(row._asdict()) for row in result.fetchall()]

    async def find_all(
        self,
        tool_id: Optional[ToolId] = None,
        status: Optional[ReviewStatus] = None,
        reviewer_type: Optional[ReviewerType] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[StructuredReview]:
        """Find reviews matching the filters, newest first."""
        with logfire.span(
            "review_repository.find_all",
            tool_id=str(tool_id) if tool_id else None,
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(reviews_table)
            if tool_id:
                stmt = stmt.where(reviews_table.c.tool_id == tool_id)
            if status:
                stmt = stmt.where(reviews_table.c.status == status.value)
            if reviewer_type:
                stmt = stmt.where(reviews_table.c.reviewer_type == reviewer_type.value)
            stmt = (
                stmt.order_by(desc(reviews_table.c.created_at), reviews_table.c.id)
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_review(row._asdict()) for row in result.fetchall()]

    async def save(self, review: StructuredReview) -> StructuredReview:
        """Insert a review. The unique constraint rejects a second review."""
        stmt = insert(reviews_table).values(**review_to_dict(review))
        await self.session.execute(stmt)
        await self.session.flush()
        return review

    async def update_status(
        self, review_id: ReviewId, status: ReviewStatus
    ) -> Optional[StructuredReview]:
        """Set the moderation status of a review."""
        stmt = (
            update(reviews_table)
            .where(reviews_table.c.id == review_id)
            .values(status=status.value, updated_at=func.now())
            .returning(reviews_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_review(row._asdict()) if row else None
