"""Delete comment use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.service import ModerationService
from toolhub.domain.value import CommentId, Viewer


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    viewer: Viewer


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool = True


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        comment_id = CommentId(parse_id(request.comment_id, "comment_id"))
        await self.moderation_service.delete_comment(comment_id, request.viewer)
        return DeleteCommentResponse(comment_id=str(comment_id))
