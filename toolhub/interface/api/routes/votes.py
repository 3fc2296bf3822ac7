"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, ConfigDict

from toolhub.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from toolhub.domain.service import ViewerService
from toolhub.domain.value import VotableType

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    model_config = ConfigDict(extra="forbid")

    # Checked by the use case so an unknown value gets INVALID_VOTE_TYPE
    vote_type: str


@router.post("/threads/{thread_id}/vote", response_model=CastVoteResponse)
async def vote_on_thread(
    thread_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a thread.

    Requires authentication. Repeating the same vote removes it; voting the
    other way flips it.

    Args:
        thread_id: Thread UUID
        request: Vote direction
        cast_vote_use_case: Cast vote use case from DI
        viewer_service: Viewer resolution from DI
        auth_token: JWT token from cookie

    Returns:
        The viewer's resulting vote and the thread's counters
    """
    viewer = await viewer_service.resolve(auth_token)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.THREAD,
            votable_id=thread_id,
            vote_type=request.vote_type,
            viewer=viewer,
        )
    )


@router.post("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def vote_on_comment(
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a comment. Same toggle and flip rules as threads."""
    viewer = await viewer_service.resolve(auth_token)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.COMMENT,
            votable_id=comment_id,
            vote_type=request.vote_type,
            viewer=viewer,
        )
    )
