"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from toolhub.config import CommunitySettings
from toolhub.domain.error import ForbiddenError, NotFoundError, ValidationError
from toolhub.domain.model import Comment
from toolhub.domain.repository import CommentRepository, ThreadRepository
from toolhub.domain.value import CommentId, ThreadId, UserId, Viewer

from .base import Service
from .counter_service import CounterService
from .validation import normalize_text


class CommentService(Service):
    """Domain service for creating and editing comments."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
        counter_service: CounterService,
        settings: CommunitySettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository
            counter_service: Counter maintenance service
            settings: Community limits
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository
        self.counter_service = counter_service
        self.settings = settings

    def _normalize_content(self, content: str | None) -> str:
        return normalize_text(
            content, field="content", max_length=self.settings.max_comment_length
        )

    async def get_active_comment(self, comment_id: CommentId) -> Comment:
        """Get an active comment.

        Raises:
            NotFoundError: If the comment is missing or deleted
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or not comment.is_active:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def create_comment(
        self, thread_id: ThreadId, viewer: Viewer, content: str
    ) -> Comment:
        """Create a top-level comment on a thread.

        Increments the thread's ``comment_count``.

        Args:
            thread_id: Thread ID
            viewer: Requesting viewer
            content: Comment text (trimmed, 1-2000 characters)

        Returns:
            Created comment

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ValidationError: If content is empty or too long
            NotFoundError: If the thread is missing or deleted
        """
        user = self.require_authenticated(viewer, "comment")
        content = self._normalize_content(content)

        with logfire.span(
            "comment_service.create_comment",
            thread_id=str(thread_id),
            author_id=str(user.user_id),
        ):
            thread = await self.thread_repository.find_by_id(thread_id)
            if thread is None or not thread.is_active:
                logfire.warn("Comment on missing thread", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))

            return await self._save_new(thread_id, None, user.user_id, content)

    async def create_reply(
        self, parent_comment_id: CommentId, viewer: Viewer, content: str
    ) -> Comment:
        """Reply to a comment.

        The reply joins the parent's thread and increments the parent's
        ``reply_count``. The thread's ``comment_count`` is unchanged.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ValidationError: If content is empty or too long, or the reply
                would nest deeper than ``max_comment_depth``
            NotFoundError: If the parent comment or its thread is missing or
                deleted
        """
        user = self.require_authenticated(viewer, "reply")
        content = self._normalize_content(content)

        with logfire.span(
            "comment_service.create_reply",
            parent_comment_id=str(parent_comment_id),
            author_id=str(user.user_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_comment_id)
            if parent is None or not parent.is_active:
                logfire.warn(
                    "Reply to missing comment",
                    parent_comment_id=str(parent_comment_id),
                )
                raise NotFoundError(
                    "Parent comment", str(parent_comment_id), "PARENT_COMMENT_NOT_FOUND"
                )

            thread = await self.thread_repository.find_by_id(parent.thread_id)
            if thread is None or not thread.is_active:
                raise NotFoundError("Thread", str(parent.thread_id))

            parent_depth = await self._depth_of(parent)
            if parent_depth + 1 >= self.settings.max_comment_depth:
                logfire.warn(
                    "Reply nesting limit reached",
                    parent_comment_id=str(parent_comment_id),
                    parent_depth=parent_depth,
                )
                raise ValidationError(
                    f"Replies cannot nest deeper than "
                    f"{self.settings.max_comment_depth} levels",
                    "REPLY_DEPTH_EXCEEDED",
                )

            return await self._save_new(
                parent.thread_id, parent.id, user.user_id, content
            )

    async def _depth_of(self, comment: Comment) -> int:
        """Number of ancestors above a comment, deleted ones included."""
        comments = await self.comment_repository.find_by_thread(comment.thread_id)
        by_id = {c.id: c for c in comments}
        depth = 0
        parent_id = comment.parent_comment_id
        while parent_id is not None and parent_id in by_id and depth < len(by_id):
            depth += 1
            parent_id = by_id[parent_id].parent_comment_id
        return depth

    async def _save_new(
        self,
        thread_id: ThreadId,
        parent_comment_id: CommentId | None,
        author_id: UserId,
        content: str,
    ) -> Comment:
        now = datetime.now()
        comment = Comment(
            id=CommentId(uuid4()),
            thread_id=thread_id,
            parent_comment_id=parent_comment_id,
            author_id=author_id,
            content=content,
            created_at=now,
            updated_at=now,
        )
        saved = await self.comment_repository.save(comment)
        await self.counter_service.comment_added(saved)
        logfire.info(
            "Comment created",
            comment_id=str(saved.id),
            thread_id=str(thread_id),
            is_reply=saved.is_reply,
        )
        return saved

    async def update_comment(
        self, comment_id: CommentId, viewer: Viewer, content: str
    ) -> Comment:
        """Edit a comment's content. Only the author or an admin may edit.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ValidationError: If content is empty or too long
            NotFoundError: If the comment is missing or deleted
            ForbiddenError: If the viewer neither authored nor moderates it
        """
        user = self.require_authenticated(viewer, "edit comments")
        content = self._normalize_content(content)

        with logfire.span("comment_service.update_comment", comment_id=str(comment_id)):
            comment = await self.get_active_comment(comment_id)
            if not user.can_manage(comment.author_id):
                raise ForbiddenError("comment", str(comment_id), str(user.user_id))

            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment updated", comment_id=str(comment_id))
            return updated
