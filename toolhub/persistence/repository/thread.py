"""PostgreSQL implementation of Thread repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from toolhub.domain.model import Thread
from toolhub.domain.repository import ThreadRepository, ThreadSortOrder
from toolhub.domain.value import Category, ContentStatus, ThreadId
from toolhub.persistence.mappers import row_to_thread, thread_to_dict
from toolhub.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_active(
        self,
        sort: ThreadSortOrder = ThreadSortOrder.HOT,
        category: Optional[Category] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Thread]:
        """Find active threads with filtering and pagination."""
        with logfire.span(
            "thread_repository.find_active",
            sort=sort.value,
            category=category.root if category else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(threads_table).where(
                threads_table.c.status == ContentStatus.ACTIVE.value
            )
            if category:
                stmt = stmt.where(threads_table.c.category == category.root)

            net_score = threads_table.c.upvotes - threads_table.c.downvotes
            stmt = stmt.order_by(desc(threads_table.c.is_pinned))
            if sort == ThreadSortOrder.NEW:
                stmt = stmt.order_by(desc(threads_table.c.created_at))
            elif sort == ThreadSortOrder.TOP:
                stmt = stmt.order_by(desc(net_score), desc(threads_table.c.upvotes))
            else:
                stmt = stmt.order_by(desc(net_score), desc(threads_table.c.created_at))
            # Stable pagination
            stmt = stmt.order_by(threads_table.c.id).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            threads = [row_to_thread(row._asdict()) for row in result.fetchall()]
            logfire.info("Found threads", count=len(threads))
            return threads

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        with logfire.span("thread_repository.save", thread_id=str(thread.id)):
            existing = await self.find_by_id(thread.id)
            thread_dict = thread_to_dict(thread)

            if existing:
                stmt = (
                    threads_table.update()
                    .where(threads_table.c.id == thread.id)
                    .values(**thread_dict)
                )
            else:
                stmt = threads_table.insert().values(**thread_dict)
            await self.session.execute(stmt)
            await self.session.flush()
            return thread

    async def update_content(
        self,
        thread_id: ThreadId,
        title: str,
        content: str,
        category: Optional[Category],
    ) -> Optional[Thread]:
        """Update the editable fields of an active thread."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .where(threads_table.c.status == ContentStatus.ACTIVE.value)
            .values(
                title=title,
                content=content,
                category=category.root if category else None,
                updated_at=func.now(),
            )
            .returning(threads_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def mark_deleted(self, thread_id: ThreadId) -> bool:
        """Flip an active thread to deleted."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .where(threads_table.c.status == ContentStatus.ACTIVE.value)
            .values(status=ContentStatus.DELETED.value, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_counters(
        self,
        thread_id: ThreadId,
        upvotes: int = 0,
        downvotes: int = 0,
        comment_count: int = 0,
    ) -> Optional[Thread]:
        """Atomically add deltas to the counters, flooring each at zero."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(
                upvotes=func.greatest(threads_table.c.upvotes + upvotes, 0),
                downvotes=func.greatest(threads_table.c.downvotes + downvotes, 0),
                comment_count=func.greatest(
                    threads_table.c.comment_count + comment_count, 0
                ),
            )
            .returning(threads_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None
