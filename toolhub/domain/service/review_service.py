"""Structured review domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from toolhub.domain.error import ConflictError, NotFoundError, ValidationError
from toolhub.domain.model import StructuredReview
from toolhub.domain.repository import StructuredReviewRepository, UserRepository
from toolhub.domain.value import (
    ReviewerType,
    ReviewId,
    ReviewStatus,
    ToolId,
    Viewer,
)

from .base import Service
from .scoring_service import ScoringService

MAX_REVIEW_TEXT_LENGTH = 2000


class ReviewService(Service):
    """Domain service for structured tool reviews.

    Reviews start out pending. Only approved reviews feed the aggregated
    scores, and only after an admin recalculates them.
    """

    def __init__(
        self,
        review_repository: StructuredReviewRepository,
        user_repository: UserRepository,
        scoring_service: ScoringService,
    ) -> None:
        """Initialize review service.

        Args:
            review_repository: Structured review repository
            user_repository: User repository (reviewer verification)
            scoring_service: Scoring service (tool and metric lookup)
        """
        self.review_repository = review_repository
        self.user_repository = user_repository
        self.scoring_service = scoring_service

    async def submit_review(
        self,
        tool_id: ToolId,
        viewer: Viewer,
        metric_scores: dict[str, float],
        overall_rating: int,
        review_text: Optional[str] = None,
        metric_comments: Optional[dict[str, str]] = None,
    ) -> StructuredReview:
        """Submit the viewer's review of a tool.

        Args:
            tool_id: Reviewed tool
            viewer: Requesting viewer
            metric_scores: Integer 1-10 score per metric of the tool's category
            overall_rating: Integer 1-10
            review_text: Optional free text (at most 2000 characters)
            metric_comments: Optional note per scored metric

        Returns:
            The pending review

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            NotFoundError: If the tool does not exist
            ValidationError: If scores, rating or text are invalid
            ConflictError: If the viewer already reviewed this tool
        """
        user = self.require_authenticated(viewer, "submit reviews")

        with logfire.span(
            "review_service.submit_review",
            tool_id=str(tool_id),
            user_id=str(user.user_id),
        ):
            tool = await self.scoring_service.get_tool(tool_id)
            scores = self.scoring_service.validate_metric_scores(
                metric_scores,
                self.scoring_service.metrics_for_tool(tool),
                integers_only=True,
            )
            if not 1 <= overall_rating <= 10:
                raise ValidationError(
                    "Overall rating must be between 1 and 10", "INVALID_OVERALL_RATING"
                )

            text = review_text.strip() if review_text else None
            if text and len(text) > MAX_REVIEW_TEXT_LENGTH:
                raise ValidationError(
                    f"Review text must be at most {MAX_REVIEW_TEXT_LENGTH} characters",
                    "REVIEW_TEXT_TOO_LONG",
                )
            comments = {
                metric: note.strip()
                for metric, note in (metric_comments or {}).items()
                if metric in scores and note and note.strip()
            }

            existing = await self.review_repository.find_by_user_and_tool(
                user.user_id, tool_id
            )
            if existing is not None:
                raise ConflictError(
                    "You have already reviewed this tool", "REVIEW_EXISTS"
                )

            profile = await self.user_repository.find_by_id(user.user_id)
            is_verified = bool(profile and profile.email_verified)
            if user.is_admin:
                reviewer_type = ReviewerType.EDITORIAL
            elif is_verified:
                reviewer_type = ReviewerType.VERIFIED
            else:
                reviewer_type = ReviewerType.USER

            now = datetime.now()
            review = StructuredReview(
                id=ReviewId(uuid4()),
                tool_id=tool_id,
                user_id=user.user_id,
                category=tool.category.root if tool.category else None,
                metric_scores={k: float(v) for k, v in scores.items()},
                metric_comments=comments,
                overall_rating=overall_rating,
                review_text=text or None,
                reviewer_type=reviewer_type,
                is_verified=is_verified,
                status=ReviewStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.review_repository.save(review)
            except IntegrityError as e:
                logfire.warn(
                    "Concurrent duplicate review",
                    tool_id=str(tool_id),
                    user_id=str(user.user_id),
                )
                raise ConflictError(
                    "You have already reviewed this tool", "REVIEW_EXISTS"
                ) from e

            logfire.info(
                "Review submitted",
                review_id=str(saved.id),
                reviewer_type=reviewer_type.value,
            )
            return saved

    async def list_reviews(
        self,
        tool_id: Optional[ToolId] = None,
        status: Optional[ReviewStatus] = None,
        reviewer_type: Optional[ReviewerType] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[StructuredReview]:
        """List reviews matching the filters, newest first."""
        limit = max(1, min(limit, 100))
        with logfire.span("review_service.list_reviews"):
            return await self.review_repository.find_all(
                tool_id=tool_id,
                status=status,
                reviewer_type=reviewer_type,
                limit=limit,
                offset=max(0, offset),
            )

    async def moderate_review(
        self, review_id: ReviewId, status: ReviewStatus, viewer: Viewer
    ) -> StructuredReview:
        """Approve or reject a review. Admin only.

        Aggregates are not refreshed here; run a recalculation afterwards.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is not an admin
            NotFoundError: If the review does not exist
        """
        self.require_admin(viewer, "reviews", str(review_id))

        with logfire.span(
            "review_service.moderate_review",
            review_id=str(review_id),
            status=status.value,
        ):
            updated = await self.review_repository.update_status(review_id, status)
            if updated is None:
                raise NotFoundError("Review", str(review_id))
            logfire.info(
                "Review moderated", review_id=str(review_id), status=status.value
            )
            return updated
