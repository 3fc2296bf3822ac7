"""Submit review use case."""

from datetime import datetime

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.model import StructuredReview
from toolhub.domain.service import ReviewService
from toolhub.domain.value import ReviewerType, ReviewStatus, ToolId, Viewer


class ReviewItem(BaseModel):
    """Structured review in a response."""

    review_id: str
    tool_id: str
    user_id: str
    category: str | None
    metric_scores: dict[str, float]
    metric_comments: dict[str, str]
    overall_rating: int
    review_text: str | None
    reviewer_type: ReviewerType
    is_verified: bool
    status: ReviewStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, review: StructuredReview) -> "ReviewItem":
        return cls(
            review_id=str(review.id),
            tool_id=str(review.tool_id),
            user_id=str(review.user_id),
            category=review.category,
            metric_scores=review.metric_scores,
            metric_comments=review.metric_comments,
            overall_rating=review.overall_rating,
            review_text=review.review_text,
            reviewer_type=review.reviewer_type,
            is_verified=review.is_verified,
            status=review.status,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )


class SubmitReviewRequest(BaseModel):
    """Submit review request."""

    tool_id: str  # UUID string
    metric_scores: dict[str, float]
    overall_rating: int
    review_text: str | None = None
    metric_comments: dict[str, str] | None = None
    viewer: Viewer


class SubmitReviewUseCase:
    """Use case for reviewing a tool metric by metric."""

    def __init__(self, review_service: ReviewService) -> None:
        """Initialize submit review use case.

        Args:
            review_service: Review domain service
        """
        self.review_service = review_service

    async def execute(self, request: SubmitReviewRequest) -> ReviewItem:
        """Execute submit review flow.

        The review is stored as pending until an admin approves it.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            NotFoundError: If the tool does not exist
            ValidationError: If scores, rating or text are invalid
            ConflictError: If the viewer already reviewed this tool
        """
        tool_id = ToolId(parse_id(request.tool_id, "tool_id"))
        review = await self.review_service.submit_review(
            tool_id,
            request.viewer,
            metric_scores=request.metric_scores,
            overall_rating=request.overall_rating,
            review_text=request.review_text,
            metric_comments=request.metric_comments,
        )
        return ReviewItem.build(review)
