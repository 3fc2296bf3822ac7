"""Score repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from toolhub.domain.model.score import AggregatedScore, EditorialScore
from toolhub.domain.value import EditorialScoreId, ToolId


class AggregatedScoreRepository(ABC):
    """Repository for derived per-tool aggregates (one row per tool)."""

    @abstractmethod
    async def find_by_tool(self, tool_id: ToolId) -> Optional[AggregatedScore]:
        """Find the aggregate for a tool.

        Args:
            tool_id: Tool ID

        Returns:
            The aggregate if one was calculated, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, score: AggregatedScore) -> AggregatedScore:
        """Insert or replace the aggregate for ``score.tool_id``."""
        pass

    @abstractmethod
    async def delete_by_tool(self, tool_id: ToolId) -> bool:
        """Remove the aggregate for a tool.

        Returns:
            True if a row was removed
        """
        pass


class EditorialScoreRepository(ABC):
    """Repository for admin-authored editorial scores."""

    @abstractmethod
    async def find_by_id(
        self, editorial_score_id: EditorialScoreId
    ) -> Optional[EditorialScore]:
        """Find an editorial score by ID."""
        pass

    @abstractmethod
    async def find_active_by_tool(self, tool_id: ToolId) -> Optional[EditorialScore]:
        """Find the active editorial score of a tool.

        Args:
            tool_id: Tool ID

        Returns:
            The active editorial score, None if the tool has none
        """
        pass

    @abstractmethod
    async def save(self, score: EditorialScore) -> EditorialScore:
        """Save an editorial score (create or update).

        Raises:
            IntegrityError: If the tool already has an active editorial score
        """
        pass

    @abstractmethod
    async def deactivate(
        self, editorial_score_id: EditorialScoreId
    ) -> Optional[EditorialScore]:
        """Mark an editorial score inactive.

        Returns:
            Updated score, or None if not found
        """
        pass
