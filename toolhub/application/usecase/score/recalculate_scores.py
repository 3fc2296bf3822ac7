"""Recalculate scores use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.service import ScoringService
from toolhub.domain.value import ToolId, Viewer

from .get_aggregated_scores import AggregatedScoreItem


class RecalculateScoresRequest(BaseModel):
    """Recalculate scores request."""

    tool_id: str  # UUID string
    viewer: Viewer


class RecalculateScoresResponse(BaseModel):
    """Recalculated aggregate, or None when no approved reviews remain."""

    tool_id: str
    aggregated: AggregatedScoreItem | None


class RecalculateScoresUseCase:
    """Use case for rebuilding a tool's aggregate from approved reviews."""

    def __init__(self, scoring_service: ScoringService) -> None:
        self.scoring_service = scoring_service

    async def execute(
        self, request: RecalculateScoresRequest
    ) -> RecalculateScoresResponse:
        """Execute recalculate scores flow.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is not an admin
            NotFoundError: If the tool does not exist
        """
        tool_id = ToolId(parse_id(request.tool_id, "tool_id"))
        aggregate = await self.scoring_service.recalculate_scores(
            tool_id, request.viewer
        )
        return RecalculateScoresResponse(
            tool_id=str(tool_id),
            aggregated=AggregatedScoreItem.build(aggregate) if aggregate else None,
        )
