"""Create editorial score use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.service import ScoringService
from toolhub.domain.value import ToolId, Viewer

from .get_aggregated_scores import EditorialScoreItem


class CreateEditorialScoreRequest(BaseModel):
    """Create editorial score request."""

    tool_id: str  # UUID string
    metric_scores: dict[str, float]
    notes: str | None = None
    viewer: Viewer


class CreateEditorialScoreUseCase:
    """Use case for authoring a tool's editorial scores."""

    def __init__(self, scoring_service: ScoringService) -> None:
        self.scoring_service = scoring_service

    async def execute(self, request: CreateEditorialScoreRequest) -> EditorialScoreItem:
        """Execute create editorial score flow.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is not an admin
            NotFoundError: If the tool does not exist
            ValidationError: If metric scores are invalid
            ConflictError: If the tool already has an active editorial score
        """
        tool_id = ToolId(parse_id(request.tool_id, "tool_id"))
        score = await self.scoring_service.create_editorial_score(
            tool_id, request.viewer, request.metric_scores, request.notes
        )
        return EditorialScoreItem.build(score)
