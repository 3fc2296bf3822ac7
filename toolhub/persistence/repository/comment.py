"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from toolhub.domain.model import Comment
from toolhub.domain.repository import CommentRepository
from toolhub.domain.value import CommentId, ContentStatus, ThreadId
from toolhub.persistence.mappers import comment_to_dict, row_to_comment
from toolhub.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        """Find every comment of a thread in one query, in creation order."""
        with logfire.span("comment_repository.find_by_thread", thread_id=str(thread_id)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.thread_id == thread_id)
                .order_by(comments_table.c.created_at, comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment, or overwrite every column of an existing one."""
        values = comment_to_dict(comment)
        stmt = insert(comments_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of an active comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.status == ContentStatus.ACTIVE.value)
            .values(content=content, updated_at=func.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def mark_deleted(self, comment_id: CommentId) -> bool:
        """Flip an active comment to deleted."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.status == ContentStatus.ACTIVE.value)
            .values(status=ContentStatus.DELETED.value, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_counters(
        self,
        comment_id: CommentId,
        upvotes: int = 0,
        downvotes: int = 0,
        reply_count: int = 0,
    ) -> Optional[Comment]:
        """Atomically add deltas to the counters, flooring each at zero."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                upvotes=func.greatest(comments_table.c.upvotes + upvotes, 0),
                downvotes=func.greatest(comments_table.c.downvotes + downvotes, 0),
                reply_count=func.greatest(
                    comments_table.c.reply_count + reply_count, 0
                ),
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None
