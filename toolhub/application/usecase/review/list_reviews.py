"""List reviews use case."""

from pydantic import BaseModel, Field

from toolhub.application.usecase.base import parse_id
from toolhub.domain.service import ReviewService
from toolhub.domain.value import ReviewerType, ReviewStatus, ToolId

from .submit_review import ReviewItem


class ListReviewsRequest(BaseModel):
    """List reviews request."""

    tool_id: str | None = None  # UUID string
    status: ReviewStatus | None = None
    reviewer_type: ReviewerType | None = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListReviewsResponse(BaseModel):
    """List reviews response."""

    reviews: list[ReviewItem]
    limit: int
    offset: int


class ListReviewsUseCase:
    """Use case for browsing structured reviews."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: ListReviewsRequest) -> ListReviewsResponse:
        tool_id = (
            ToolId(parse_id(request.tool_id, "tool_id")) if request.tool_id else None
        )
        reviews = await self.review_service.list_reviews(
            tool_id=tool_id,
            status=request.status,
            reviewer_type=request.reviewer_type,
            limit=request.limit,
            offset=request.offset,
        )
        return ListReviewsResponse(
            reviews=[ReviewItem.build(review) for review in reviews],
            limit=request.limit,
            offset=request.offset,
        )
