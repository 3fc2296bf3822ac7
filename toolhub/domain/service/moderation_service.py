"""Thread and comment moderation."""

import logfire

from toolhub.domain.error import ForbiddenError, NotFoundError
from toolhub.domain.repository import CommentRepository, ThreadRepository
from toolhub.domain.value import CommentId, ThreadId, Viewer

from .base import Service
from .counter_service import CounterService


class ModerationService(Service):
    """Soft-deletes threads and comments.

    Content is never physically removed: replies and votes keep pointing
    at the deleted row.
    """

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        counter_service: CounterService,
    ) -> None:
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.counter_service = counter_service

    async def delete_comment(self, comment_id: CommentId, viewer: Viewer) -> None:
        """Soft-delete a comment.

        Deleting a reply decrements the parent's ``reply_count``; deleting a
        top-level comment decrements the thread's ``comment_count``. Both
        floor at zero.

        Args:
            comment_id: Comment ID
            viewer: Requesting viewer (author or admin)

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            NotFoundError: If the comment is missing or already deleted
            ForbiddenError: If the viewer neither authored nor moderates it
        """
        user = self.require_authenticated(viewer, "delete comments")

        with logfire.span(
            "moderation_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user.user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None or not comment.is_active:
                raise NotFoundError("Comment", str(comment_id))

            if not user.can_manage(comment.author_id):
                logfire.warn(
                    "Forbidden comment delete",
                    comment_id=str(comment_id),
                    user_id=str(user.user_id),
                )
                raise ForbiddenError("comment", str(comment_id), str(user.user_id))

            # Guards against a concurrent delete double-decrementing
            if not await self.comment_repository.mark_deleted(comment_id):
                raise NotFoundError("Comment", str(comment_id))

            await self.counter_service.comment_removed(comment)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                is_reply=comment.is_reply,
                by_admin=user.user_id != comment.author_id,
            )

    async def delete_thread(self, thread_id: ThreadId, viewer: Viewer) -> None:
        """Soft-delete a thread. Its comments and votes are left untouched.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            NotFoundError: If the thread is missing or already deleted
            ForbiddenError: If the viewer neither authored nor moderates it
        """
        user = self.require_authenticated(viewer, "delete threads")

        with logfire.span(
            "moderation_service.delete_thread",
            thread_id=str(thread_id),
            user_id=str(user.user_id),
        ):
            thread = await self.thread_repository.find_by_id(thread_id)
            if thread is None or not thread.is_active:
                raise NotFoundError("Thread", str(thread_id))

            if not user.can_manage(thread.author_id):
                logfire.warn(
                    "Forbidden thread delete",
                    thread_id=str(thread_id),
                    user_id=str(user.user_id),
                )
                raise ForbiddenError("thread", str(thread_id), str(user.user_id))

            if not await self.thread_repository.mark_deleted(thread_id):
                raise NotFoundError("Thread", str(thread_id))

            logfire.info("Thread deleted", thread_id=str(thread_id))
