"""In-memory tool score repositories for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from toolhub.domain.model.score import AggregatedScore, EditorialScore
from toolhub.domain.repository.score import (
    AggregatedScoreRepository,
    EditorialScoreRepository,
)
from toolhub.domain.value import EditorialScoreId, ToolId


class InMemoryAggregatedScoreRepository(AggregatedScoreRepository):
    """In-memory implementation of AggregatedScoreRepository for testing."""

    def __init__(self) -> None:
        self._scores: dict[ToolId, AggregatedScore] = {}

    async def find_by_tool(self, tool_id: ToolId) -> Optional[AggregatedScore]:
        return self._scores.get(tool_id)

    async def save(self, score: AggregatedScore) -> AggregatedScore:
        self._scores[score.tool_id] = score
        return score

    async def delete_by_tool(self, tool_id: ToolId) -> bool:
        return self._scores.pop(tool_id, None) is not None


class InMemoryEditorialScoreRepository(EditorialScoreRepository):
    """In-memory implementation of EditorialScoreRepository for testing."""

    def __init__(self) -> None:
        self._scores: dict[EditorialScoreId, EditorialScore] = {}

    async def find_by_id(
        self, editorial_score_id: EditorialScoreId
    ) -> Optional[EditorialScore]:
        return self._scores.get(editorial_score_id)

    async def find_active_by_tool(self, tool_id: ToolId) -> Optional[EditorialScore]:
        for score in self._scores.values():
            if score.tool_id == tool_id and score.is_active:
                return score
        return None

    async def save(self, score: EditorialScore) -> EditorialScore:
        """Save an editorial score.

        Raises:
            IntegrityError: If the tool already has another active score
        """
        if score.is_active:
            active = await self.find_active_by_tool(score.tool_id)
            if active and active.id != score.id:
                raise IntegrityError("Duplicate active editorial score", None, Exception())
        self._scores[score.id] = score
        return score

    async def deactivate(
        self, editorial_score_id: EditorialScoreId
    ) -> Optional[EditorialScore]:
        score = self._scores.get(editorial_score_id)
        if score is None:
            return None
        updated = score.touched(is_active=False)
        self._scores[editorial_score_id] = updated
        return updated
