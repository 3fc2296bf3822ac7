"""Create comment use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.application.usecase.common import CommentItem
from toolhub.domain.service import CommentService, UserService
from toolhub.domain.value import ThreadId, Viewer


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    thread_id: str  # UUID string
    content: str
    viewer: Viewer


class CreateCommentUseCase:
    """Use case for commenting at the top level of a thread."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for the author projection
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        The comment service increments the thread's comment count in the same
        transaction.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ValidationError: If the ID or content is invalid
            NotFoundError: If the thread is missing or deleted
        """
        thread_id = ThreadId(parse_id(request.thread_id, "thread_id"))
        comment = await self.comment_service.create_comment(
            thread_id, request.viewer, request.content
        )
        authors = await self.user_service.get_author_summaries([comment.author_id])
        return CommentItem.build(comment, authors[comment.author_id])
