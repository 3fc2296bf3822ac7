"""Deactivate editorial score use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.service import ScoringService
from toolhub.domain.value import EditorialScoreId, Viewer

from .get_aggregated_scores import EditorialScoreItem


class DeactivateEditorialScoreRequest(BaseModel):
    """Deactivate editorial score request."""

    editorial_score_id: str  # UUID string
    viewer: Viewer


class DeactivateEditorialScoreUseCase:
    """Use case for retiring an editorial score."""

    def __init__(self, scoring_service: ScoringService) -> None:
        self.scoring_service = scoring_service

    async def execute(
        self, request: DeactivateEditorialScoreRequest
    ) -> EditorialScoreItem:
        score_id = EditorialScoreId(
            parse_id(request.editorial_score_id, "editorial_score_id")
        )
        score = await self.scoring_service.deactivate_editorial_score(
            score_id, request.viewer
        )
        return EditorialScoreItem.build(score)
