"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from toolhub.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, field: str = "id") -> UUID:
    """Parse a UUID string from a request.

    Raises:
        ValidationError: If the value is not a UUID (code ``INVALID_ID``)
    """
    try:
        return UUID(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {field}: {value!r}", "INVALID_ID") from e
