"""Tool score use cases."""

from .create_editorial_score import (
    CreateEditorialScoreRequest,
    CreateEditorialScoreUseCase,
)
from .deactivate_editorial_score import (
    DeactivateEditorialScoreRequest,
    DeactivateEditorialScoreUseCase,
)
from .get_aggregated_scores import (
    AggregatedScoreItem,
    DisplayItem,
    EditorialScoreItem,
    GetAggregatedScoresRequest,
    GetAggregatedScoresResponse,
    GetAggregatedScoresUseCase,
)
from .recalculate_scores import (
    RecalculateScoresRequest,
    RecalculateScoresResponse,
    RecalculateScoresUseCase,
)

__all__ = [
    "AggregatedScoreItem",
    "CreateEditorialScoreRequest",
    "CreateEditorialScoreUseCase",
    "DeactivateEditorialScoreRequest",
    "DeactivateEditorialScoreUseCase",
    "DisplayItem",
    "EditorialScoreItem",
    "GetAggregatedScoresRequest",
    "GetAggregatedScoresResponse",
    "GetAggregatedScoresUseCase",
    "RecalculateScoresRequest",
    "RecalculateScoresResponse",
    "RecalculateScoresUseCase",
]
