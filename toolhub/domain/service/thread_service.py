"""Thread domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from toolhub.config import CommunitySettings
from toolhub.domain.error import ForbiddenError, NotFoundError, ValidationError
from toolhub.domain.model import Thread
from toolhub.domain.repository import ThreadRepository, ThreadSortOrder
from toolhub.domain.value import Category, ThreadId, Viewer

from .base import Service
from .validation import normalize_text


def parse_category(category: str | None) -> Category | None:
    """Parse an optional category label; blank means no category."""
    if category is None or not category.strip():
        return None
    try:
        return Category(category)
    except ValueError as e:
        raise ValidationError(
            "Category must be 1-50 characters", "INVALID_CATEGORY"
        ) from e


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(
        self, thread_repository: ThreadRepository, settings: CommunitySettings
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            settings: Community limits
        """
        self.thread_repository = thread_repository
        self.settings = settings

    def _normalize(
        self, title: str | None, content: str | None, category: str | None
    ) -> tuple[str, str, Category | None]:
        title = normalize_text(
            title, field="title", max_length=self.settings.max_title_length
        )
        content = normalize_text(
            content,
            field="content",
            min_length=self.settings.min_thread_content_length,
            max_length=self.settings.max_thread_content_length,
        )
        return title, content, parse_category(category)

    async def create_thread(
        self,
        viewer: Viewer,
        title: str,
        content: str,
        category: str | None = None,
    ) -> Thread:
        """Create a thread authored by the viewer.

        Args:
            viewer: Requesting viewer
            title: Thread title (1-300 characters after trimming)
            content: Thread body (10-10000 characters after trimming)
            category: Optional category label

        Returns:
            Created thread

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ValidationError: If any field is out of bounds
        """
        user = self.require_authenticated(viewer, "create threads")
        title, content, parsed_category = self._normalize(title, content, category)

        with logfire.span("thread_service.create_thread", author_id=str(user.user_id)):
            now = datetime.now()
            thread = Thread(
                id=ThreadId(uuid4()),
                author_id=user.user_id,
                title=title,
                content=content,
                category=parsed_category,
                created_at=now,
                updated_at=now,
            )
            saved = await self.thread_repository.save(thread)
            logfire.info("Thread created", thread_id=str(saved.id))
            return saved

    async def get_active_thread(self, thread_id: ThreadId) -> Thread:
        """Get an active thread.

        Raises:
            NotFoundError: If the thread is missing or deleted
        """
        with logfire.span("thread_service.get_active_thread", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if thread is None or not thread.is_active:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))
            return thread

    def page_size(self, limit: int | None) -> int:
        """Requested page size, defaulted and clamped to the configured maximum."""
        limit = limit or self.settings.default_page_size
        return max(1, min(limit, self.settings.max_page_size))

    async def list_threads(
        self,
        sort: ThreadSortOrder = ThreadSortOrder.HOT,
        category: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Thread], bool]:
        """List active threads, pinned first.

        Args:
            sort: Sort order
            category: Optional category filter
            limit: Page size (clamped to the configured maximum)
            offset: Number of threads to skip

        Returns:
            (threads, has_more)
        """
        limit = self.page_size(limit)
        offset = max(0, offset)
        category_filter = parse_category(category)

        with logfire.span(
            "thread_service.list_threads", sort=sort.value, limit=limit, offset=offset
        ):
            # Fetch one extra row to learn whether another page exists
            threads = await self.thread_repository.find_active(
                sort=sort, category=category_filter, limit=limit + 1, offset=offset
            )
            return threads[:limit], len(threads) > limit

    async def update_thread(
        self,
        thread_id: ThreadId,
        viewer: Viewer,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
    ) -> Thread:
        """Edit a thread. Only the author or an admin may edit.

        Omitted fields keep their current value.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            NotFoundError: If the thread is missing or deleted
            ForbiddenError: If the viewer neither authored nor moderates it
            ValidationError: If any field is out of bounds
        """
        user = self.require_authenticated(viewer, "edit threads")
        thread = await self.get_active_thread(thread_id)
        if not user.can_manage(thread.author_id):
            raise ForbiddenError("thread", str(thread_id), str(user.user_id))

        if category is None and thread.category is not None:
            category = thread.category.root
        new_title, new_content, new_category = self._normalize(
            title if title is not None else thread.title,
            content if content is not None else thread.content,
            category,
        )

        with logfire.span("thread_service.update_thread", thread_id=str(thread_id)):
            updated = await self.thread_repository.update_content(
                thread_id, new_title, new_content, new_category
            )
            if updated is None:
                raise NotFoundError("Thread", str(thread_id))
            logfire.info("Thread updated", thread_id=str(thread_id))
            return updated
