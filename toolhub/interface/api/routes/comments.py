"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, ConfigDict

from toolhub.application.usecase.comment import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from toolhub.application.usecase.common import CommentItem
from toolhub.domain.service import ViewerService

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CommentContentAPIRequest(BaseModel):
    """API request carrying comment content (reply or edit)."""

    model_config = ConfigDict(extra="forbid")

    content: str


@router.post(
    "/{comment_id}/replies",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: str,
    request: CommentContentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Reply to a comment.

    Requires authentication. The reply joins the parent's thread and
    increments the parent's reply count.

    Args:
        comment_id: Parent comment UUID
        request: Reply content
        create_reply_use_case: Create reply use case from DI
        viewer_service: Viewer resolution from DI
        auth_token: JWT token from cookie

    Returns:
        Created reply
    """
    viewer = await viewer_service.resolve(auth_token)
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            parent_comment_id=comment_id, content=request.content, viewer=viewer
        )
    )


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: CommentContentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit a comment. Only the author or an admin may edit."""
    viewer = await viewer_service.resolve(auth_token)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, content=request.content, viewer=viewer
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Soft-delete a comment.

    Only the author or an admin may delete. The parent counter (thread
    comment count or parent reply count) is decremented, never below zero.
    """
    viewer = await viewer_service.resolve(auth_token)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, viewer=viewer)
    )
