"""Tool entity.

Only the fields needed for scoring are modelled here; the directory itself
is served elsewhere.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from toolhub.domain.model.common import DomainModel
from toolhub.domain.value import Category, ToolId


class Tool(DomainModel):
    """Tool entity."""

    id: ToolId
    name: str = Field(min_length=1, max_length=200)
    category: Optional[Category] = None
    # Curated spider-chart values used when no review data exists
    default_scores: dict[str, float] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
