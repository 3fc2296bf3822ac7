"""Unit tests for GetThreadUseCase."""

from uuid import uuid4

import pytest

from toolhub.application.usecase.thread import GetThreadRequest, GetThreadUseCase
from toolhub.domain.error import NotFoundError, ValidationError
from toolhub.domain.repository import ThreadRepository, UserRepository
from toolhub.domain.service import CommentService, ModerationService, VoteService
from toolhub.domain.value import VotableType, VoteType
from tests.conftest import make_thread, make_user, viewer_for
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_thread_with_comment_tree(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        thread_repo = await unit_env.get(ThreadRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("Author"))
        reader = await user_repo.save(make_user("Reader"))
        thread = await thread_repo.save(make_thread(author.id))
        root = await comment_service.create_comment(
            thread.id, viewer_for(author), "Root comment"
        )
        await comment_service.create_reply(root.id, viewer_for(reader), "A reply")
        await vote_service.cast_vote(
            VotableType.THREAD, thread.id, viewer_for(reader), VoteType.UPVOTE
        )

        # Act
        response = await use_case.execute(
            GetThreadRequest(thread_id=str(thread.id), viewer=viewer_for(reader))
        )

        # Assert
        assert response.thread.comment_count == 1
        assert response.thread.upvotes == 1
        assert response.thread.user_vote == VoteType.UPVOTE
        assert len(response.comments) == 1
        top = response.comments[0]
        assert top.content == "Root comment"
        assert top.reply_count == 1
        assert top.depth == 0
        assert [reply.content for reply in top.replies] == ["A reply"]
        assert top.replies[0].author.name == "Reader"
        assert top.replies[0].depth == 1

    @pytest.mark.asyncio
    async def test_anonymous_viewer_sees_no_votes(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        thread = await thread_repo.save(make_thread(author.id, upvotes=3))

        response = await use_case.execute(GetThreadRequest(thread_id=str(thread.id)))

        assert response.thread.user_vote is None
        assert response.thread.score == 3
        assert response.comments == []

    @pytest.mark.asyncio
    async def test_deleted_thread_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        thread = await thread_repo.save(make_thread(author.id))
        await moderation_service.delete_thread(thread.id, viewer_for(author))

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(GetThreadRequest(thread_id=str(thread.id)))
        assert exc_info.value.code == "THREAD_NOT_FOUND"

        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadRequest(thread_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_id(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(GetThreadRequest(thread_id="not-a-uuid"))
        assert exc_info.value.code == "INVALID_ID"
