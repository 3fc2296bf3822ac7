"""In-memory tool repository for testing."""

from typing import Optional

from toolhub.domain.model.tool import Tool
from toolhub.domain.repository.tool import ToolRepository
from toolhub.domain.value import ToolId


class InMemoryToolRepository(ToolRepository):
    """In-memory implementation of ToolRepository for testing."""

    def __init__(self) -> None:
        self._tools: dict[ToolId, Tool] = {}

    async def find_by_id(self, tool_id: ToolId) -> Optional[Tool]:
        return self._tools.get(tool_id)

    async def save(self, tool: Tool) -> Tool:
        self._tools[tool.id] = tool
        return tool
