"""Unit tests for the review use cases feeding score recalculation."""

import pytest

from toolhub.application.usecase.review import (
    ListReviewsRequest,
    ListReviewsUseCase,
    ModerateReviewRequest,
    ModerateReviewUseCase,
    SubmitReviewRequest,
    SubmitReviewUseCase,
)
from toolhub.application.usecase.score import (
    GetAggregatedScoresRequest,
    GetAggregatedScoresUseCase,
    RecalculateScoresRequest,
    RecalculateScoresUseCase,
)
from toolhub.domain.error import ForbiddenError
from toolhub.domain.repository import ToolRepository, UserRepository
from toolhub.domain.value import (
    ConfidenceBand,
    ReviewerType,
    ReviewStatus,
    ScoreSource,
    UserRole,
)
from tests.conftest import make_tool, make_user, viewer_for
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReviewToScoresFlow:
    """Submit, approve and recalculate."""

    @pytest.mark.asyncio
    async def test_approved_reviews_drive_aggregated_scores(self, unit_env):
        # Arrange
        submit = await unit_env.get(SubmitReviewUseCase)
        moderate = await unit_env.get(ModerateReviewUseCase)
        recalculate = await unit_env.get(RecalculateScoresUseCase)
        get_scores = await unit_env.get(GetAggregatedScoresUseCase)
        tool_repo = await unit_env.get(ToolRepository)
        user_repo = await unit_env.get(UserRepository)
        admin = viewer_for(await user_repo.save(make_user(role=UserRole.ADMIN)))
        tool = await tool_repo.save(make_tool())

        # Act
        for i in range(7):
            reviewer = await user_repo.save(make_user(f"Reviewer {i}"))
            review = await submit.execute(
                SubmitReviewRequest(
                    tool_id=str(tool.id),
                    metric_scores={"content_quality": 8, "speed_efficiency": 6},
                    overall_rating=8,
                    viewer=viewer_for(reviewer),
                )
            )
            assert review.status == ReviewStatus.PENDING
            await moderate.execute(
                ModerateReviewRequest(
                    review_id=review.review_id,
                    status=ReviewStatus.APPROVED,
                    viewer=admin,
                )
            )

        before = await get_scores.execute(
            GetAggregatedScoresRequest(tool_id=str(tool.id))
        )
        recalculated = await recalculate.execute(
            RecalculateScoresRequest(tool_id=str(tool.id), viewer=admin)
        )
        after = await get_scores.execute(
            GetAggregatedScoresRequest(tool_id=str(tool.id))
        )

        # Assert
        # Moderation alone does not refresh the aggregate
        assert before.recommended == ScoreSource.DEFAULT
        assert recalculated.aggregated.total_reviews == 7
        assert recalculated.aggregated.confidence_score == 70.0
        assert after.recommended == ScoreSource.AGGREGATED
        assert after.fallback_reason is None
        assert after.display.confidence_band == ConfidenceBand.HIGH
        assert after.display.values["content_quality"] == 8.0
        assert after.display.values["speed_efficiency"] == 6.0
        assert after.display.values["creative_features"] == 5.0

    @pytest.mark.asyncio
    async def test_list_and_moderation_permissions(self, unit_env):
        submit = await unit_env.get(SubmitReviewUseCase)
        moderate = await unit_env.get(ModerateReviewUseCase)
        list_reviews = await unit_env.get(ListReviewsUseCase)
        tool_repo = await unit_env.get(ToolRepository)
        user_repo = await unit_env.get(UserRepository)
        reviewer = await user_repo.save(make_user(email_verified=True))
        tool = await tool_repo.save(make_tool())
        review = await submit.execute(
            SubmitReviewRequest(
                tool_id=str(tool.id),
                metric_scores={"creative_features": 9},
                overall_rating=9,
                review_text="Lots of templates",
                viewer=viewer_for(reviewer),
            )
        )

        with pytest.raises(ForbiddenError):
            await moderate.execute(
                ModerateReviewRequest(
                    review_id=review.review_id,
                    status=ReviewStatus.APPROVED,
                    viewer=viewer_for(reviewer),
                )
            )

        listed = await list_reviews.execute(
            ListReviewsRequest(tool_id=str(tool.id), status=ReviewStatus.PENDING)
        )
        assert [r.review_id for r in listed.reviews] == [review.review_id]
        assert listed.reviews[0].reviewer_type == ReviewerType.VERIFIED
        assert listed.reviews[0].review_text == "Lots of templates"
        assert listed.limit == 50
