"""Spider-chart score aggregation.

Displayed scores come from one of three sources, chosen in this order:

1. Aggregated review scores, when their confidence is high
2. The tool's active editorial score
3. Aggregated review scores anyway, when any exist
4. Default neutral values for every metric of the tool's category
"""

import math
import statistics
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from toolhub.config import ScoringSettings
from toolhub.domain.error import ConflictError, NotFoundError, ValidationError
from toolhub.domain.model import (
    AggregatedScore,
    EditorialScore,
    MetricAggregate,
    StructuredReview,
    Tool,
)
from toolhub.domain.repository import (
    AggregatedScoreRepository,
    EditorialScoreRepository,
    StructuredReviewRepository,
    ToolRepository,
)
from toolhub.domain.value import (
    ConfidenceBand,
    EditorialScoreId,
    ReviewStatus,
    ScoreSource,
    ToolId,
    Viewer,
)

from .base import Service

LOW_CONFIDENCE = "Low confidence score"
NO_AGGREGATED = "No aggregated scores"
LOW_CONFIDENCE_NO_EDITORIAL = "Low confidence score and no editorial scores"
NO_SCORES = "No aggregated or editorial scores"


@dataclass(frozen=True)
class DisplayScores:
    """Per-metric values to draw, and where they came from."""

    tool_id: ToolId
    source: ScoreSource
    values: dict[str, float]
    confidence_score: float | None
    confidence_band: ConfidenceBand | None
    fallback_reason: str | None


@dataclass(frozen=True)
class ScoreOverview:
    """Everything known about a tool's scores."""

    aggregated: AggregatedScore | None
    editorial: EditorialScore | None
    display: DisplayScores


class ScoringService(Service):
    """Domain service for tool scores."""

    def __init__(
        self,
        tool_repository: ToolRepository,
        review_repository: StructuredReviewRepository,
        aggregated_score_repository: AggregatedScoreRepository,
        editorial_score_repository: EditorialScoreRepository,
        settings: ScoringSettings,
    ) -> None:
        """Initialize scoring service.

        Args:
            tool_repository: Tool repository
            review_repository: Structured review repository
            aggregated_score_repository: Aggregated score repository
            editorial_score_repository: Editorial score repository
            settings: Scoring configuration
        """
        self.tool_repository = tool_repository
        self.review_repository = review_repository
        self.aggregated_score_repository = aggregated_score_repository
        self.editorial_score_repository = editorial_score_repository
        self.settings = settings

    def confidence_for(self, total_reviews: int) -> float:
        """Confidence (0-100) for a number of approved reviews.

        Grows linearly with the review count and saturates at 100.
        """
        full = max(1, self.settings.reviews_for_full_confidence)
        return round(min(100.0, 100.0 * max(0, total_reviews) / full), 2)

    def band_for(self, confidence: float) -> ConfidenceBand:
        """Classify a confidence score into the three-tier badge."""
        if confidence >= self.settings.high_confidence_threshold:
            return ConfidenceBand.HIGH
        if confidence >= self.settings.moderate_confidence_threshold:
            return ConfidenceBand.MODERATE
        return ConfidenceBand.LOW

    async def get_tool(self, tool_id: ToolId) -> Tool:
        """Get a tool.

        Raises:
            NotFoundError: If the tool does not exist
        """
        tool = await self.tool_repository.find_by_id(tool_id)
        if tool is None:
            logfire.warn("Tool not found", tool_id=str(tool_id))
            raise NotFoundError("Tool", str(tool_id))
        return tool

    def metrics_for_tool(self, tool: Tool, category: str | None = None) -> list[str]:
        """Metric keys for a tool, optionally overriding its category."""
        if category is None and tool.category is not None:
            category = tool.category.root
        return self.settings.metrics_for(category)

    async def get_score_overview(
        self, tool_id: ToolId, category: str | None = None
    ) -> ScoreOverview:
        """Load a tool's aggregated and editorial scores and pick what to show.

        Args:
            tool_id: Tool ID
            category: Category whose metrics to show (defaults to the
                tool's own category)

        Returns:
            Stored scores plus the resolved display values

        Raises:
            NotFoundError: If the tool does not exist
        """
        with logfire.span("scoring_service.get_score_overview", tool_id=str(tool_id)):
            tool = await self.get_tool(tool_id)
            metrics = self.metrics_for_tool(tool, category)
            aggregated = await self.aggregated_score_repository.find_by_tool(tool_id)
            editorial = await self.editorial_score_repository.find_active_by_tool(
                tool_id
            )

            display = self.resolve_display(tool, metrics, aggregated, editorial)
            logfire.info(
                "Display scores resolved",
                tool_id=str(tool_id),
                source=display.source.value,
                confidence=display.confidence_score,
            )
            return ScoreOverview(
                aggregated=aggregated, editorial=editorial, display=display
            )

    async def get_display_scores(
        self, tool_id: ToolId, category: str | None = None
    ) -> DisplayScores:
        """Per-metric values for a tool's spider chart.

        Deterministic for the same stored reviews and editorial scores.

        Raises:
            NotFoundError: If the tool does not exist
        """
        overview = await self.get_score_overview(tool_id, category)
        return overview.display

    def resolve_display(
        self,
        tool: Tool,
        metrics: Sequence[str],
        aggregated: AggregatedScore | None,
        editorial: EditorialScore | None,
    ) -> DisplayScores:
        """Apply the fallback chain to stored scores."""
        neutral = self.settings.neutral_score
        confidence = None
        band = None
        if aggregated is not None:
            confidence = self.confidence_for(aggregated.total_reviews)
            band = self.band_for(confidence)

        if aggregated is not None and band == ConfidenceBand.HIGH:
            source, reason = ScoreSource.AGGREGATED, None
        elif editorial is not None and editorial.is_active:
            source = ScoreSource.EDITORIAL
            reason = LOW_CONFIDENCE if aggregated is not None else NO_AGGREGATED
        elif aggregated is not None:
            source, reason = ScoreSource.AGGREGATED, LOW_CONFIDENCE_NO_EDITORIAL
        else:
            source, reason = ScoreSource.DEFAULT, NO_SCORES

        values: dict[str, float] = {}
        for metric in metrics:
            if source == ScoreSource.AGGREGATED:
                stat = aggregated.metric_scores.get(metric)
                values[metric] = stat.avg if stat is not None else neutral
            elif source == ScoreSource.EDITORIAL:
                values[metric] = editorial.metric_scores.get(metric, neutral)
            else:
                values[metric] = tool.default_scores.get(metric) or neutral

        return DisplayScores(
            tool_id=tool.id,
            source=source,
            values=values,
            confidence_score=confidence,
            confidence_band=band,
            fallback_reason=reason,
        )

    def aggregate_reviews(
        self, tool: Tool, reviews: Sequence[StructuredReview]
    ) -> AggregatedScore | None:
        """Aggregate approved reviews into per-metric statistics.

        Verified reviews weigh ``verified_weight`` in the average. The
        standard deviation is the unweighted population deviation. Values
        are rounded to 2 decimals.

        Returns:
            The aggregate, or None when there are no reviews
        """
        if not reviews:
            return None

        samples: dict[str, list[tuple[float, float]]] = defaultdict(list)
        verified = 0
        editorial = 0
        for review in reviews:
            if review.is_verified:
                verified += 1
            if review.reviewer_type.is_editorial:
                editorial += 1
            weight = self.settings.verified_weight if review.is_verified else 1.0
            for metric, score in review.metric_scores.items():
                samples[metric].append((float(score), weight))

        metric_scores: dict[str, MetricAggregate] = {}
        sum_of_averages = 0.0
        for metric in sorted(samples):
            scores = [score for score, _ in samples[metric]]
            weights = [weight for _, weight in samples[metric]]
            avg = sum(s * w for s, w in samples[metric]) / sum(weights)
            sum_of_averages += avg
            metric_scores[metric] = MetricAggregate(
                avg=round(avg, 2),
                count=len(scores),
                std_dev=round(statistics.pstdev(scores), 2),
                min=min(scores),
                max=max(scores),
            )

        overall = round(sum_of_averages / len(metric_scores), 2) if metric_scores else 0.0
        return AggregatedScore(
            tool_id=tool.id,
            category=tool.category.root if tool.category else None,
            metric_scores=metric_scores,
            overall_average=overall,
            total_reviews=len(reviews),
            verified_reviews=verified,
            editorial_reviews=editorial,
            confidence_score=self.confidence_for(len(reviews)),
            last_calculated_at=datetime.now(),
        )

    async def recalculate_scores(
        self, tool_id: ToolId, viewer: Viewer
    ) -> AggregatedScore | None:
        """Recompute a tool's aggregate from its approved reviews. Admin only.

        When no approved reviews remain, the stored aggregate is removed.

        Args:
            tool_id: Tool ID
            viewer: Requesting viewer

        Returns:
            The stored aggregate, or None when it was cleared

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is not an admin
            NotFoundError: If the tool does not exist
        """
        self.require_admin(viewer, "aggregated scores", str(tool_id))

        with logfire.span("scoring_service.recalculate_scores", tool_id=str(tool_id)):
            tool = await self.get_tool(tool_id)
            reviews = await self.review_repository.find_by_tool(
                tool_id, ReviewStatus.APPROVED
            )

            aggregate = self.aggregate_reviews(tool, reviews)
            if aggregate is None:
                cleared = await self.aggregated_score_repository.delete_by_tool(tool_id)
                logfire.info(
                    "No approved reviews, aggregate cleared",
                    tool_id=str(tool_id),
                    cleared=cleared,
                )
                return None

            saved = await self.aggregated_score_repository.save(aggregate)
            logfire.info(
                "Aggregate recalculated",
                tool_id=str(tool_id),
                total_reviews=saved.total_reviews,
                confidence=saved.confidence_score,
            )
            return saved

    def validate_metric_scores(
        self,
        metric_scores: dict[str, float],
        allowed_metrics: Sequence[str],
        *,
        integers_only: bool = False,
    ) -> dict[str, float]:
        """Check metric keys against the category and values against the scale.

        Raises:
            ValidationError: ``EMPTY_METRIC_SCORES``, ``UNKNOWN_METRIC`` or
                ``INVALID_METRIC_SCORE_VALUE``
        """
        if not metric_scores:
            raise ValidationError(
                "metric_scores must contain at least one metric", "EMPTY_METRIC_SCORES"
            )
        allowed = set(allowed_metrics)
        low = 1 if integers_only else 0
        high = self.settings.max_metric_score
        for metric, score in metric_scores.items():
            if metric not in allowed:
                raise ValidationError(
                    f"Unknown metric {metric!r} for this tool", "UNKNOWN_METRIC"
                )
            if not math.isfinite(score):
                raise ValidationError(
                    f"Metric score for {metric} must be a number",
                    "INVALID_METRIC_SCORE_VALUE",
                )
            if integers_only and float(score) != int(score):
                raise ValidationError(
                    f"Metric score for {metric} must be an integer",
                    "INVALID_METRIC_SCORE_VALUE",
                )
            if not low <= score <= high:
                raise ValidationError(
                    f"Metric score for {metric} must be between {low} and {high:g}",
                    "INVALID_METRIC_SCORE_VALUE",
                )
        return dict(metric_scores)

    async def create_editorial_score(
        self,
        tool_id: ToolId,
        viewer: Viewer,
        metric_scores: dict[str, float],
        notes: str | None = None,
    ) -> EditorialScore:
        """Author the active editorial score of a tool. Admin only.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is not an admin
            NotFoundError: If the tool does not exist
            ValidationError: If metric scores are invalid
            ConflictError: If the tool already has an active editorial score
        """
        editor = self.require_admin(viewer, "editorial scores", str(tool_id))

        with logfire.span(
            "scoring_service.create_editorial_score", tool_id=str(tool_id)
        ):
            tool = await self.get_tool(tool_id)
            scores = self.validate_metric_scores(
                metric_scores, self.metrics_for_tool(tool)
            )

            existing = await self.editorial_score_repository.find_active_by_tool(
                tool_id
            )
            if existing is not None:
                raise ConflictError(
                    "Tool already has an active editorial score",
                    "EDITORIAL_SCORE_EXISTS",
                )

            now = datetime.now()
            score = EditorialScore(
                id=EditorialScoreId(uuid4()),
                tool_id=tool_id,
                editor_id=editor.user_id,
                metric_scores=scores,
                notes=notes.strip() if notes else None,
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.editorial_score_repository.save(score)
            except IntegrityError as e:
                logfire.warn("Concurrent editorial score", tool_id=str(tool_id))
                raise ConflictError(
                    "Tool already has an active editorial score",
                    "EDITORIAL_SCORE_EXISTS",
                ) from e

            logfire.info("Editorial score created", tool_id=str(tool_id))
            return saved

    async def deactivate_editorial_score(
        self, editorial_score_id: EditorialScoreId, viewer: Viewer
    ) -> EditorialScore:
        """Retire an editorial score. Admin only.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is not an admin
            NotFoundError: If the editorial score does not exist
        """
        self.require_admin(viewer, "editorial scores", str(editorial_score_id))

        with logfire.span(
            "scoring_service.deactivate_editorial_score",
            editorial_score_id=str(editorial_score_id),
        ):
            updated = await self.editorial_score_repository.deactivate(
                editorial_score_id
            )
            if updated is None:
                raise NotFoundError("Editorial score", str(editorial_score_id))
            logfire.info(
                "Editorial score deactivated",
                editorial_score_id=str(editorial_score_id),
            )
            return updated
