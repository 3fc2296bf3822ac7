"""PostgreSQL implementation of Tool repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from toolhub.domain.model import Tool
from toolhub.domain.repository import ToolRepository
from toolhub.domain.value import ToolId
from toolhub.persistence.mappers import row_to_tool, tool_to_dict
from toolhub.persistence.tables import tools_table


class PostgresToolRepository(ToolRepository):
    """PostgreSQL implementation of ToolRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, tool_id: ToolId) -> Optional[Tool]:
        """Find a tool by ID."""
        stmt = select(tools_table).where(tools_table.c.id == tool_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tool(row._asdict()) if row else None

    async def save(self, tool: Tool) -> Tool:
        """Save a tool (create or update)."""
        tool_dict = tool_to_dict(tool)
        stmt = insert(tools_table).values(**tool_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[tools_table.c.id],
            set_={k: v for k, v in tool_dict.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return tool
