"""Thread repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from toolhub.domain.model.thread import Thread
from toolhub.domain.value import Category, ThreadId


class ThreadSortOrder(str, Enum):
    """Sort order for thread listings.

    Pinned threads always come first.
    """

    HOT = "hot"  # Net score, then most recent
    NEW = "new"  # created_at DESC
    TOP = "top"  # Net score DESC


class ThreadRepository(ABC):
    """Repository for Thread aggregate.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID, regardless of status.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(
        self,
        sort: ThreadSortOrder = ThreadSortOrder.HOT,
        category: Optional[Category] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Thread]:
        """Find active threads with filtering and pagination.

        Args:
            sort: Sort order (hot, new or top)
            category: Filter by category (None for all)
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            Threads matching the criteria, pinned first
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        thread_id: ThreadId,
        title: str,
        content: str,
        category: Optional[Category],
    ) -> Optional[Thread]:
        """Update the editable fields of an active thread.

        Returns:
            Updated thread, or None if missing or deleted
        """
        pass

    @abstractmethod
    async def mark_deleted(self, thread_id: ThreadId) -> bool:
        """Flip an active thread's status to deleted.

        Args:
            thread_id: Thread ID

        Returns:
            True if the status changed, False if missing or already deleted
        """
        pass

    @abstractmethod
    async def adjust_counters(
        self,
        thread_id: ThreadId,
        upvotes: int = 0,
        downvotes: int = 0,
        comment_count: int = 0,
    ) -> Optional[Thread]:
        """Atomically add deltas to the thread's counters.

        Each counter is floored at zero.

        Args:
            thread_id: Thread ID
            upvotes: Delta for upvotes
            downvotes: Delta for downvotes
            comment_count: Delta for comment_count

        Returns:
            Thread with updated counters, or None if not found
        """
        pass
