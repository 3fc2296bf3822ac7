"""In-memory thread repository for testing."""

from typing import List, Optional

from toolhub.domain.model.thread import Thread
from toolhub.domain.repository.thread import ThreadRepository, ThreadSortOrder
from toolhub.domain.value import Category, ContentStatus, ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        return self._threads.get(thread_id)

    async def find_active(
        self,
        sort: ThreadSortOrder = ThreadSortOrder.HOT,
        category: Optional[Category] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Thread]:
        threads = [t for t in self._threads.values() if t.is_active]
        if category:
            threads = [t for t in threads if t.category == category]

        # Mirror the SQL ordering: pinned, sort keys, then id
        threads.sort(key=lambda t: str(t.id))
        if sort == ThreadSortOrder.NEW:
            threads.sort(key=lambda t: t.created_at, reverse=True)
        elif sort == ThreadSortOrder.TOP:
            threads.sort(key=lambda t: (t.score, t.upvotes), reverse=True)
        else:
            threads.sort(key=lambda t: (t.score, t.created_at), reverse=True)
        threads.sort(key=lambda t: t.is_pinned, reverse=True)

        return threads[offset : offset + limit]

    async def save(self, thread: Thread) -> Thread:
        self._threads[thread.id] = thread
        return thread

    async def update_content(
        self,
        thread_id: ThreadId,
        title: str,
        content: str,
        category: Optional[Category],
    ) -> Optional[Thread]:
        thread = self._threads.get(thread_id)
        if thread is None or not thread.is_active:
            return None
        updated = thread.touched(title=title, content=content, category=category)
        self._threads[thread_id] = updated
        return updated

    async def mark_deleted(self, thread_id: ThreadId) -> bool:
        thread = self._threads.get(thread_id)
        if thread is None or not thread.is_active:
            return False
        self._threads[thread_id] = thread.touched(status=ContentStatus.DELETED)
        return True

    async def adjust_counters(
        self,
        thread_id: ThreadId,
        upvotes: int = 0,
        downvotes: int = 0,
        comment_count: int = 0,
    ) -> Optional[Thread]:
        thread = self._threads.get(thread_id)
        if thread is None:
            return None
        updated = thread.model_copy(
            update={
                "upvotes": max(thread.upvotes + upvotes, 0),
                "downvotes": max(thread.downvotes + downvotes, 0),
                "comment_count": max(thread.comment_count + comment_count, 0),
            }
        )
        self._threads[thread_id] = updated
        return updated
