"""Create reply use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.application.usecase.common import CommentItem
from toolhub.domain.service import CommentService, UserService
from toolhub.domain.value import CommentId, Viewer


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    parent_comment_id: str  # UUID string
    content: str
    viewer: Viewer


class CreateReplyUseCase:
    """Use case for replying to a comment."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateReplyRequest) -> CommentItem:
        """Execute create reply flow.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ValidationError: If the ID or content is invalid
            NotFoundError: If the parent comment or its thread is gone
        """
        parent_id = CommentId(parse_id(request.parent_comment_id, "comment_id"))
        reply = await self.comment_service.create_reply(
            parent_id, request.viewer, request.content
        )
        authors = await self.user_service.get_author_summaries([reply.author_id])
        return CommentItem.build(reply, authors[reply.author_id])
