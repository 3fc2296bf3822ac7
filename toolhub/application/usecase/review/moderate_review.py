"""Moderate review use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.service import ReviewService
from toolhub.domain.value import ReviewId, ReviewStatus, Viewer

from .submit_review import ReviewItem


class ModerateReviewRequest(BaseModel):
    """Moderate review request."""

    review_id: str  # UUID string
    status: ReviewStatus
    viewer: Viewer


class ModerateReviewUseCase:
    """Use case for approving or rejecting a review."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: ModerateReviewRequest) -> ReviewItem:
        """Execute moderate review flow.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is not an admin
            NotFoundError: If the review does not exist
        """
        review_id = ReviewId(parse_id(request.review_id, "review_id"))
        review = await self.review_service.moderate_review(
            review_id, request.status, request.viewer
        )
        return ReviewItem.build(review)
