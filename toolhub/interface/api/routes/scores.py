"""Tool score routes (aggregated and editorial)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, ConfigDict

from toolhub.application.usecase.score import (
    CreateEditorialScoreRequest,
    CreateEditorialScoreUseCase,
    DeactivateEditorialScoreRequest,
    DeactivateEditorialScoreUseCase,
    EditorialScoreItem,
    GetAggregatedScoresRequest,
    GetAggregatedScoresResponse,
    GetAggregatedScoresUseCase,
    RecalculateScoresRequest,
    RecalculateScoresResponse,
    RecalculateScoresUseCase,
)
from toolhub.domain.service import ViewerService

router = APIRouter(tags=["scores"], route_class=DishkaRoute)


class RecalculateScoresAPIRequest(BaseModel):
    """API request for recalculating a tool's aggregate."""

    model_config = ConfigDict(extra="forbid")

    tool_id: str


class CreateEditorialScoreAPIRequest(BaseModel):
    """API request for an editorial score."""

    model_config = ConfigDict(extra="forbid")

    tool_id: str
    metric_scores: dict[str, float]
    notes: str | None = None


@router.get("/aggregated-scores/{tool_id}", response_model=GetAggregatedScoresResponse)
async def get_aggregated_scores(
    tool_id: str,
    get_aggregated_scores_use_case: FromDishka[GetAggregatedScoresUseCase],
    category: str | None = Query(default=None),
) -> GetAggregatedScoresResponse:
    """Get the scores to display for a tool.

    Public endpoint. Falls back from community aggregates to editorial
    scores to neutral defaults, and reports why.

    Args:
        tool_id: Tool UUID
        get_aggregated_scores_use_case: Get aggregated scores use case from DI
        category: Optional category overriding the tool's own

    Returns:
        Aggregated and editorial records plus the chosen display values
    """
    return await get_aggregated_scores_use_case.execute(
        GetAggregatedScoresRequest(tool_id=tool_id, category=category)
    )


@router.post("/aggregated-scores/recalculate", response_model=RecalculateScoresResponse)
async def recalculate_scores(
    request: RecalculateScoresAPIRequest,
    recalculate_scores_use_case: FromDishka[RecalculateScoresUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> RecalculateScoresResponse:
    """Rebuild a tool's aggregate from its approved reviews. Admin only."""
    viewer = await viewer_service.resolve(auth_token)
    return await recalculate_scores_use_case.execute(
        RecalculateScoresRequest(tool_id=request.tool_id, viewer=viewer)
    )


@router.post(
    "/editorial-scores",
    response_model=EditorialScoreItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_editorial_score(
    request: CreateEditorialScoreAPIRequest,
    create_editorial_score_use_case: FromDishka[CreateEditorialScoreUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> EditorialScoreItem:
    """Create the active editorial score for a tool. Admin only.

    A tool has at most one active editorial score; a second one is a
    conflict until the first is deactivated.
    """
    viewer = await viewer_service.resolve(auth_token)
    return await create_editorial_score_use_case.execute(
        CreateEditorialScoreRequest(
            tool_id=request.tool_id,
            metric_scores=request.metric_scores,
            notes=request.notes,
            viewer=viewer,
        )
    )


@router.delete("/editorial-scores/{editorial_score_id}", response_model=EditorialScoreItem)
async def deactivate_editorial_score(
    editorial_score_id: str,
    deactivate_editorial_score_use_case: FromDishka[DeactivateEditorialScoreUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> EditorialScoreItem:
    """Deactivate an editorial score. Admin only."""
    viewer = await viewer_service.resolve(auth_token)
    return await deactivate_editorial_score_use_case.execute(
        DeactivateEditorialScoreRequest(
            editorial_score_id=editorial_score_id, viewer=viewer
        )
    )
