"""Base models for domain entities."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Immutable domain entity. Changes produce a new instance."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class EditableModel(DomainModel):
    """Entity that can change after creation and records when it last did."""

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def touched(self, **changes: Any) -> Self:
        """Copy with ``changes`` applied and ``updated_at`` set to now."""
        return self.model_copy(update={**changes, "updated_at": datetime.now()})
