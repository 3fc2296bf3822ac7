"""Unit tests for GetUserVotesUseCase."""

import pytest

from toolhub.application.usecase.vote import GetUserVotesRequest, GetUserVotesUseCase
from toolhub.domain.error import AuthenticationRequiredError
from toolhub.domain.repository import (
    CommentRepository,
    ThreadRepository,
    UserRepository,
)
from toolhub.domain.service import VoteService
from toolhub.domain.value import ANONYMOUS, VotableType, VoteType
from tests.conftest import make_comment, make_thread, make_user, viewer_for
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUserVotesUseCase:
    """Tests for GetUserVotesUseCase."""

    @pytest.mark.asyncio
    async def test_groups_votes_by_type(self, unit_env):
        use_case = await unit_env.get(GetUserVotesUseCase)
        vote_service = await unit_env.get(VoteService)
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        voter = await user_repo.save(make_user())
        other = await user_repo.save(make_user("Other"))
        first = await thread_repo.save(make_thread(other.id))
        second = await thread_repo.save(make_thread(other.id))
        comment = await comment_repo.save(make_comment(first.id, other.id))
        viewer = viewer_for(voter)
        await vote_service.cast_vote(VotableType.THREAD, first.id, viewer, VoteType.UPVOTE)
        await vote_service.cast_vote(
            VotableType.THREAD, second.id, viewer, VoteType.DOWNVOTE
        )
        await vote_service.cast_vote(
            VotableType.COMMENT, comment.id, viewer, VoteType.UPVOTE
        )
        # Someone else's vote is not listed
        await vote_service.cast_vote(
            VotableType.THREAD, first.id, viewer_for(other), VoteType.UPVOTE
        )

        response = await use_case.execute(GetUserVotesRequest(viewer=viewer))

        assert {v.votable_id for v in response.thread_votes} == {
            str(first.id),
            str(second.id),
        }
        assert [v.votable_id for v in response.comment_votes] == [str(comment.id)]
        assert response.summary.total_thread_votes == 2
        assert response.summary.total_comment_votes == 1
        assert response.summary.total_votes == 3

    @pytest.mark.asyncio
    async def test_requires_login(self, unit_env):
        use_case = await unit_env.get(GetUserVotesUseCase)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(GetUserVotesRequest(viewer=ANONYMOUS))
