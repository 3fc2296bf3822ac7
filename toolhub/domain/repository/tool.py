"""Tool repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from toolhub.domain.model.tool import Tool
from toolhub.domain.value import ToolId


class ToolRepository(ABC):
    """Repository for Tool entity."""

    @abstractmethod
    async def find_by_id(self, tool_id: ToolId) -> Optional[Tool]:
        """Find a tool by ID.

        Args:
            tool_id: The tool's unique identifier

        Returns:
            The tool if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, tool: Tool) -> Tool:
        """Save a tool (create or update)."""
        pass
