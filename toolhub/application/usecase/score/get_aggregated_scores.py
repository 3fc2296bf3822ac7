"""Get aggregated scores use case."""

from datetime import datetime

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.model import AggregatedScore, EditorialScore, MetricAggregate
from toolhub.domain.service import ScoringService
from toolhub.domain.value import ConfidenceBand, ScoreSource, ToolId


class AggregatedScoreItem(BaseModel):
    """Stored aggregate of a tool's approved reviews."""

    tool_id: str
    category: str | None
    metric_scores: dict[str, MetricAggregate]
    overall_average: float
    total_reviews: int
    verified_reviews: int
    editorial_reviews: int
    confidence_score: float
    last_calculated_at: datetime

    @classmethod
    def build(cls, score: AggregatedScore) -> "AggregatedScoreItem":
        return cls(
            tool_id=str(score.tool_id),
            category=score.category,
            metric_scores=score.metric_scores,
            overall_average=score.overall_average,
            total_reviews=score.total_reviews,
            verified_reviews=score.verified_reviews,
            editorial_reviews=score.editorial_reviews,
            confidence_score=score.confidence_score,
            last_calculated_at=score.last_calculated_at,
        )


class EditorialScoreItem(BaseModel):
    """Admin-authored scores of a tool."""

    editorial_score_id: str
    tool_id: str
    editor_id: str
    metric_scores: dict[str, float]
    notes: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, score: EditorialScore) -> "EditorialScoreItem":
        return cls(
            editorial_score_id=str(score.id),
            tool_id=str(score.tool_id),
            editor_id=str(score.editor_id),
            metric_scores=score.metric_scores,
            notes=score.notes,
            is_active=score.is_active,
            created_at=score.created_at,
            updated_at=score.updated_at,
        )


class DisplayItem(BaseModel):
    """Values to draw on the spider chart."""

    source: ScoreSource
    values: dict[str, float]
    confidence_score: float | None
    confidence_band: ConfidenceBand | None


class GetAggregatedScoresRequest(BaseModel):
    """Get aggregated scores request."""

    tool_id: str  # UUID string
    category: str | None = None  # Overrides the tool's category


class GetAggregatedScoresResponse(BaseModel):
    """Stored scores plus the recommended display values."""

    tool_id: str
    aggregated: AggregatedScoreItem | None
    editorial: EditorialScoreItem | None
    recommended: ScoreSource
    fallback_reason: str | None
    display: DisplayItem


class GetAggregatedScoresUseCase:
    """Use case for reading a tool's scores with the display fallback applied."""

    def __init__(self, scoring_service: ScoringService) -> None:
        """Initialize get aggregated scores use case.

        Args:
            scoring_service: Scoring domain service
        """
        self.scoring_service = scoring_service

    async def execute(
        self, request: GetAggregatedScoresRequest
    ) -> GetAggregatedScoresResponse:
        """Execute get aggregated scores flow.

        Raises:
            ValidationError: If the tool ID is malformed
            NotFoundError: If the tool does not exist
        """
        tool_id = ToolId(parse_id(request.tool_id, "tool_id"))
        overview = await self.scoring_service.get_score_overview(
            tool_id, request.category
        )
        display = overview.display

        return GetAggregatedScoresResponse(
            tool_id=str(tool_id),
            aggregated=(
                AggregatedScoreItem.build(overview.aggregated)
                if overview.aggregated
                else None
            ),
            editorial=(
                EditorialScoreItem.build(overview.editorial)
                if overview.editorial
                else None
            ),
            recommended=display.source,
            fallback_reason=display.fallback_reason,
            display=DisplayItem(
                source=display.source,
                values=display.values,
                confidence_score=display.confidence_score,
                confidence_band=display.confidence_band,
            ),
        )
