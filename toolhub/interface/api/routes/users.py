"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from toolhub.application.usecase.vote import (
    GetUserVotesRequest,
    GetUserVotesResponse,
    GetUserVotesUseCase,
)
from toolhub.domain.service import ViewerService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/me/votes", response_model=GetUserVotesResponse)
async def get_my_votes(
    get_user_votes_use_case: FromDishka[GetUserVotesUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> GetUserVotesResponse:
    """Get the current user's votes, split by thread and comment.

    Requires authentication.
    """
    viewer = await viewer_service.resolve(auth_token)
    return await get_user_votes_use_case.execute(GetUserVotesRequest(viewer=viewer))
