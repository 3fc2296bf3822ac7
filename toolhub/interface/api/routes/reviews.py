"""Structured review routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, ConfigDict

from toolhub.application.usecase.review import (
    ListReviewsRequest,
    ListReviewsResponse,
    ListReviewsUseCase,
    ModerateReviewRequest,
    ModerateReviewUseCase,
    ReviewItem,
    SubmitReviewRequest,
    SubmitReviewUseCase,
)
from toolhub.domain.service import ViewerService
from toolhub.domain.value import ReviewerType, ReviewStatus

router = APIRouter(
    prefix="/structured-reviews", tags=["reviews"], route_class=DishkaRoute
)


class SubmitReviewAPIRequest(BaseModel):
    """API request for reviewing a tool."""

    model_config = ConfigDict(extra="forbid")

    tool_id: str
    metric_scores: dict[str, float]
    overall_rating: int
    review_text: str | None = None
    metric_comments: dict[str, str] | None = None


class ModerateReviewAPIRequest(BaseModel):
    """API request for moderating a review."""

    model_config = ConfigDict(extra="forbid")

    status: ReviewStatus


@router.get("", response_model=ListReviewsResponse)
async def list_reviews(
    list_reviews_use_case: FromDishka[ListReviewsUseCase],
    tool_id: str | None = Query(default=None),
    review_status: ReviewStatus | None = Query(default=None, alias="status"),
    reviewer_type: ReviewerType | None = Query(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListReviewsResponse:
    """List structured reviews, newest first.

    Args:
        list_reviews_use_case: List reviews use case from DI
        tool_id: Optional tool filter
        review_status: Optional status filter (query parameter ``status``)
        reviewer_type: Optional reviewer type filter
        limit: Page size
        offset: Number of reviews to skip

    Returns:
        A page of reviews
    """
    return await list_reviews_use_case.execute(
        ListReviewsRequest(
            tool_id=tool_id,
            status=review_status,
            reviewer_type=reviewer_type,
            limit=limit,
            offset=offset,
        )
    )


@router.post("", response_model=ReviewItem, status_code=status.HTTP_201_CREATED)
async def submit_review(
    request: SubmitReviewAPIRequest,
    submit_review_use_case: FromDishka[SubmitReviewUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> ReviewItem:
    """Submit a review of a tool.

    Requires authentication. One review per user per tool; new reviews
    start out pending moderation.
    """
    viewer = await viewer_service.resolve(auth_token)
    return await submit_review_use_case.execute(
        SubmitReviewRequest(
            tool_id=request.tool_id,
            metric_scores=request.metric_scores,
            overall_rating=request.overall_rating,
            review_text=request.review_text,
            metric_comments=request.metric_comments,
            viewer=viewer,
        )
    )


@router.put("/{review_id}/status", response_model=ReviewItem)
async def moderate_review(
    review_id: str,
    request: ModerateReviewAPIRequest,
    moderate_review_use_case: FromDishka[ModerateReviewUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> ReviewItem:
    """Approve or reject a review. Admin only."""
    viewer = await viewer_service.resolve(auth_token)
    return await moderate_review_use_case.execute(
        ModerateReviewRequest(
            review_id=review_id, status=request.status, viewer=viewer
        )
    )
