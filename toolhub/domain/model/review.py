"""Structured review entity."""

from typing import Optional

from pydantic import Field

from toolhub.domain.model.common import EditableModel
from toolhub.domain.value import (
    ReviewerType,
    ReviewId,
    ReviewStatus,
    ToolId,
    UserId,
)


class StructuredReview(EditableModel):
    """Per-metric review of a tool.

    Only approved reviews contribute to aggregated scores. Verified reviews
    carry more weight in the average.
    """

    id: ReviewId
    tool_id: ToolId
    user_id: UserId
    category: Optional[str] = None
    metric_scores: dict[str, float]
    metric_comments: dict[str, str] = Field(default_factory=dict)
    overall_rating: int = Field(ge=1, le=10)
    review_text: Optional[str] = Field(default=None, max_length=2000)
    reviewer_type: ReviewerType = ReviewerType.USER
    is_verified: bool = False
    status: ReviewStatus = ReviewStatus.PENDING
