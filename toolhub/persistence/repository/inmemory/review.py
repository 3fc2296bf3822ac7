"""In-memory structured review repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from toolhub.domain.model.review import StructuredReview
from toolhub.domain.repository.review import StructuredReviewRepository
from toolhub.domain.value import ReviewerType, ReviewId, ReviewStatus, ToolId, UserId


class InMemoryStructuredReviewRepository(StructuredReviewRepository):
    """In-memory implementation of StructuredReviewRepository for testing."""

    def __init__(self) -> None:
        self._reviews: dict[ReviewId, StructuredReview] = {}

    async def find_by_id(self, review_id: ReviewId) -> Optional[StructuredReview]:
        return self._reviews.get(review_id)

    async def find_by_user_and_tool(
        self, user_id: UserId, tool_id: ToolId
    ) -> Optional[StructuredReview]:
        for review in self._reviews.values():
            if review.user_id == user_id and review.tool_id == tool_id:
                return review
        return None

    async def find_by_tool(
        self, tool_id: ToolId, status: ReviewStatus
    ) -> List[StructuredReview]:
        reviews = [
            r
            for r in self._reviews.values()
            if r.tool_id == tool_id and r.status == status
        ]
        return sorted(reviews, key=lambda r: (r.created_at, str(r.id)))

    async def find_all(
        self,
        tool_id: Optional[ToolId] = None,
        status: Optional[ReviewStatus] = None,
        reviewer_type: Optional[ReviewerType] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[StructuredReview]:
        reviews = [
            r
            for r in self._reviews.values()
            if (tool_id is None or r.tool_id == tool_id)
            and (status is None or r.status == status)
            and (reviewer_type is None or r.reviewer_type == reviewer_type)
        ]
        reviews.sort(key=lambda r: str(r.id))
        reviews.sort(key=lambda r: r.created_at, reverse=True)
        return reviews[offset : offset + limit]

    async def save(self, review: StructuredReview) -> StructuredReview:
        """Save a review.

        Raises:
            IntegrityError: If the user already reviewed the tool
        """
        existing = await self.find_by_user_and_tool(review.user_id, review.tool_id)
        if existing and existing.id != review.id:
            raise IntegrityError("Duplicate review", None, Exception())
        self._reviews[review.id] = review
        return review

    async def update_status(
        self, review_id: ReviewId, status: ReviewStatus
    ) -> Optional[StructuredReview]:
        review = self._reviews.get(review_id)
        if review is None:
            return None
        updated = review.touched(status=status)
        self._reviews[review_id] = updated
        return updated
