"""Structured review use cases."""

from .list_reviews import ListReviewsRequest, ListReviewsResponse, ListReviewsUseCase
from .moderate_review import ModerateReviewRequest, ModerateReviewUseCase
from .submit_review import ReviewItem, SubmitReviewRequest, SubmitReviewUseCase

__all__ = [
    "ListReviewsRequest",
    "ListReviewsResponse",
    "ListReviewsUseCase",
    "ModerateReviewRequest",
    "ModerateReviewUseCase",
    "ReviewItem",
    "SubmitReviewRequest",
    "SubmitReviewUseCase",
]
