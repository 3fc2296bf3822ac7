"""Tool score entities.

AggregatedScore is derived from approved structured reviews and can always
be recalculated. EditorialScore is authored by admins as a fallback.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from toolhub.domain.model.common import DomainModel, EditableModel
from toolhub.domain.value import EditorialScoreId, ToolId, UserId


class MetricAggregate(DomainModel):
    """Statistics for one metric across approved reviews."""

    avg: float
    count: int = Field(ge=0)
    std_dev: float = Field(ge=0)
    min: float
    max: float


class AggregatedScore(DomainModel):
    """Aggregated review statistics for a tool."""

    tool_id: ToolId
    category: Optional[str] = None
    metric_scores: dict[str, MetricAggregate] = Field(default_factory=dict)
    overall_average: float = 0.0
    total_reviews: int = Field(default=0, ge=0)
    verified_reviews: int = Field(default=0, ge=0)
    editorial_reviews: int = Field(default=0, ge=0)
    confidence_score: float = Field(default=0.0, ge=0, le=100)
    last_calculated_at: datetime = Field(default_factory=datetime.now)


class EditorialScore(EditableModel):
    """Admin-authored per-metric scores for a tool.

    At most one active record per tool.
    """

    id: EditorialScoreId
    tool_id: ToolId
    editor_id: UserId
    metric_scores: dict[str, float]
    notes: Optional[str] = Field(default=None, max_length=2000)
    is_active: bool = True
