"""Update comment use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.application.usecase.common import CommentItem
from toolhub.domain.service import CommentService, UserService, VoteService
from toolhub.domain.value import CommentId, VotableType, Viewer


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    content: str
    viewer: Viewer


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for the author projection
            vote_service: Vote service for the viewer's vote
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is neither the author nor an admin
            NotFoundError: If the comment is missing or deleted
            ValidationError: If the ID or content is invalid
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment_id"))
        comment = await self.comment_service.update_comment(
            comment_id, request.viewer, request.content
        )
        authors = await self.user_service.get_author_summaries([comment.author_id])
        user_votes = await self.vote_service.get_viewer_votes(
            request.viewer, VotableType.COMMENT, [comment.id]
        )
        return CommentItem.build(
            comment, authors[comment.author_id], user_votes.get(comment.id)
        )
