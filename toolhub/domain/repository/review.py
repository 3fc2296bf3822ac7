"""Structured review repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from toolhub.domain.model.review import StructuredReview
from toolhub.domain.value import ReviewerType, ReviewId, ReviewStatus, ToolId, UserId


class StructuredReviewRepository(ABC):
    """Repository for StructuredReview entity."""

    @abstractmethod
    async def find_by_id(self, review_id: ReviewId) -> Optional[StructuredReview]:
        """Find a review by ID.

        Args:
            review_id: The review's unique identifier

        Returns:
            The review if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_tool(
        self, user_id: UserId, tool_id: ToolId
    ) -> Optional[StructuredReview]:
        """Find a user's review of a tool."""
        pass

    @abstractmethod
    async def find_by_tool(
        self, tool_id: ToolId, status: ReviewStatus
    ) -> List[StructuredReview]:
        """Find every review of a tool in one status, oldest first.

        Args:
            tool_id: Tool ID
            status: Review status

        Returns:
            All matching reviews (unpaginated)
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        tool_id: Optional[ToolId] = None,
        status: Optional[ReviewStatus] = None,
        reviewer_type: Optional[ReviewerType] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[StructuredReview]:
        """Find reviews matching the filters, newest first.

        Args:
            tool_id: Only reviews of this tool
            status: Only reviews in this status
            reviewer_type: Only reviews by this kind of reviewer
            limit: Maximum number of reviews to return
            offset: Number of reviews to skip

        Returns:
            Matching reviews
        """
        pass

    @abstractmethod
    async def save(self, review: StructuredReview) -> StructuredReview:
        """Save a review (create or update).

        Raises:
            IntegrityError: If the user already reviewed this tool
        """
        pass

    @abstractmethod
    async def update_status(
        self, review_id: ReviewId, status: ReviewStatus
    ) -> Optional[StructuredReview]:
        """Set the moderation status of a review.

        Returns:
            Updated review, or None if not found
        """
        pass
