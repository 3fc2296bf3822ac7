"""Integration tests for the PostgreSQL repositories.

Requires a migrated database; point DATABASE__URL at it and run with
``pytest -m integration``.
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from toolhub.domain.model import AggregatedScore, EditorialScore, MetricAggregate, Vote
from toolhub.domain.repository import (
    AggregatedScoreRepository,
    CommentRepository,
    EditorialScoreRepository,
    ThreadRepository,
    ThreadSortOrder,
    ToolRepository,
    UserRepository,
    VoteRepository,
)
from toolhub.domain.value import (
    Category,
    ContentStatus,
    EditorialScoreId,
    UserRole,
    VotableType,
    VoteId,
    VoteType,
)
from tests.conftest import make_comment, make_thread, make_tool, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


def _unique_category() -> str:
    return f"it-{uuid4().hex[:12]}"


class TestThreadRepositoryIntegration:
    """PostgresThreadRepository against a real schema."""

    @pytest.mark.asyncio
    async def test_round_trip_and_listing_order(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        author = await user_repo.save(make_user(role=UserRole.ADMIN))
        category = _unique_category()
        pinned = await thread_repo.save(
            make_thread(
                author.id, category=category, is_pinned=True, age=timedelta(days=2)
            )
        )
        popular = await thread_repo.save(
            make_thread(author.id, category=category, upvotes=5)
        )
        fresh = await thread_repo.save(make_thread(author.id, category=category))

        # Act
        hot = await thread_repo.find_active(
            sort=ThreadSortOrder.HOT, category=Category(category)
        )
        new = await thread_repo.find_active(
            sort=ThreadSortOrder.NEW, category=Category(category)
        )

        # Assert
        assert [t.id for t in hot] == [pinned.id, popular.id, fresh.id]
        assert [t.id for t in new][0] == pinned.id
        found = await thread_repo.find_by_id(popular.id)
        assert found.category == Category(category)
        assert found.status == ContentStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_counters_floor_at_zero_in_sql(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        comment_repo = await integration_env.get(CommentRepository)
        author = await user_repo.save(make_user())
        thread = await thread_repo.save(make_thread(author.id, comment_count=1))
        comment = await comment_repo.save(make_comment(thread.id, author.id))

        thread_after = await thread_repo.adjust_counters(
            thread.id, downvotes=-1, comment_count=-5
        )
        comment_after = await comment_repo.adjust_counters(
            comment.id, upvotes=2, reply_count=-1
        )

        assert (thread_after.downvotes, thread_after.comment_count) == (0, 0)
        assert (comment_after.upvotes, comment_after.reply_count) == (2, 0)

    @pytest.mark.asyncio
    async def test_soft_delete_is_idempotent(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        author = await user_repo.save(make_user())
        thread = await thread_repo.save(make_thread(author.id))

        assert await thread_repo.mark_deleted(thread.id) is True
        assert await thread_repo.mark_deleted(thread.id) is False
        assert (await thread_repo.find_by_id(thread.id)).status == ContentStatus.DELETED


class TestVoteRepositoryIntegration:
    """PostgresVoteRepository against a real schema."""

    @pytest.mark.asyncio
    async def test_vote_lifecycle(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        vote_repo = await integration_env.get(VoteRepository)
        voter = await user_repo.save(make_user())
        thread = await thread_repo.save(make_thread(voter.id))
        vote = Vote(
            id=VoteId(uuid4()),
            user_id=voter.id,
            votable_type=VotableType.THREAD,
            votable_id=thread.id,
            vote_type=VoteType.UPVOTE,
        )

        await vote_repo.save(vote)
        flipped = await vote_repo.update_vote_type(
            vote.id, VoteType.DOWNVOTE, VoteType.UPVOTE
        )
        stale_flip = await vote_repo.update_vote_type(
            vote.id, VoteType.DOWNVOTE, VoteType.UPVOTE
        )
        downvotes = await vote_repo.count_by_votable(
            VotableType.THREAD, thread.id, VoteType.DOWNVOTE
        )
        deleted = await vote_repo.delete(vote.id)

        assert flipped.vote_type == VoteType.DOWNVOTE
        assert stale_flip is None
        assert downvotes == 1
        assert deleted is True
        assert (
            await vote_repo.find_by_user_and_votable(
                voter.id, VotableType.THREAD, thread.id
            )
            is None
        )


class TestScoreRepositoryIntegration:
    """Score repositories against a real schema."""

    @pytest.mark.asyncio
    async def test_aggregate_upsert_and_delete(self, integration_env):
        tool_repo = await integration_env.get(ToolRepository)
        aggregated_repo = await integration_env.get(AggregatedScoreRepository)
        tool = await tool_repo.save(make_tool(default_scores={"content_quality": 6}))
        first = AggregatedScore(
            tool_id=tool.id,
            metric_scores={
                "content_quality": MetricAggregate(
                    avg=7.5, count=2, std_dev=0.5, min=7, max=8
                )
            },
            overall_average=7.5,
            total_reviews=2,
            confidence_score=20.0,
        )

        await aggregated_repo.save(first)
        await aggregated_repo.save(first.model_copy(update={"total_reviews": 3}))
        stored = await aggregated_repo.find_by_tool(tool.id)

        assert stored.total_reviews == 3
        assert stored.metric_scores["content_quality"].std_dev == 0.5
        assert (await tool_repo.find_by_id(tool.id)).default_scores == {
            "content_quality": 6
        }
        assert await aggregated_repo.delete_by_tool(tool.id) is True
        assert await aggregated_repo.find_by_tool(tool.id) is None

    @pytest.mark.asyncio
    async def test_editorial_deactivate(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        tool_repo = await integration_env.get(ToolRepository)
        editorial_repo = await integration_env.get(EditorialScoreRepository)
        editor = await user_repo.save(make_user(role=UserRole.ADMIN))
        tool = await tool_repo.save(make_tool())
        score = await editorial_repo.save(
            EditorialScore(
                id=EditorialScoreId(uuid4()),
                tool_id=tool.id,
                editor_id=editor.id,
                metric_scores={"content_quality": 8.0},
            )
        )

        assert (await editorial_repo.find_active_by_tool(tool.id)).id == score.id
        retired = await editorial_repo.deactivate(score.id)

        assert retired.is_active is False
        assert await editorial_repo.find_active_by_tool(tool.id) is None
