"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable value compared by its fields."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive.

    ``model_dump()`` and JSON serialization yield the primitive itself.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
