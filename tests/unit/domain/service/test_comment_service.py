"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from toolhub.config import CommunitySettings
from toolhub.domain.error import (
    AuthenticationRequiredError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from toolhub.domain.repository import (
    CommentRepository,
    ThreadRepository,
    UserRepository,
)
from toolhub.domain.service import CommentService, CounterService, ModerationService
from toolhub.domain.value import ANONYMOUS, UserRole
from tests.conftest import make_thread, make_user, viewer_for
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(unit_env):
    user_repo = await unit_env.get(UserRepository)
    thread_repo = await unit_env.get(ThreadRepository)
    author = await user_repo.save(make_user())
    thread = await thread_repo.save(make_thread(author.id))
    return author, thread


class TestCreateComment:
    """Tests for top-level comments."""

    @pytest.mark.asyncio
    async def test_create_comment_increments_thread_count(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        thread_repo = await unit_env.get(ThreadRepository)
        author, thread = await _setup(unit_env)

        comment = await comment_service.create_comment(
            thread.id, viewer_for(author), "  Nice write-up  "
        )

        assert comment.content == "Nice write-up"
        assert comment.parent_comment_id is None
        assert comment.thread_id == thread.id
        assert (await thread_repo.find_by_id(thread.id)).comment_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("content", "code"),
        [("   ", "CONTENT_REQUIRED"), ("x" * 2001, "CONTENT_TOO_LONG")],
    )
    async def test_content_bounds(self, unit_env, content, code):
        comment_service = await unit_env.get(CommentService)
        thread_repo = await unit_env.get(ThreadRepository)
        author, thread = await _setup(unit_env)

        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_comment(
                thread.id, viewer_for(author), content
            )

        assert exc_info.value.code == code
        assert (await thread_repo.find_by_id(thread.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_anonymous_cannot_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        _, thread = await _setup(unit_env)

        with pytest.raises(AuthenticationRequiredError):
            await comment_service.create_comment(thread.id, ANONYMOUS, "Hello")

    @pytest.mark.asyncio
    async def test_comment_on_deleted_thread(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        moderation_service = await unit_env.get(ModerationService)
        author, thread = await _setup(unit_env)
        await moderation_service.delete_thread(thread.id, viewer_for(author))

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_comment(
                thread.id, viewer_for(author), "Too late"
            )
        assert exc_info.value.code == "THREAD_NOT_FOUND"


class TestCreateReply:
    """Tests for replies."""

    @pytest.mark.asyncio
    async def test_reply_increments_parent_not_thread(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        author, thread = await _setup(unit_env)
        viewer = viewer_for(author)

        parent = await comment_service.create_comment(thread.id, viewer, "Parent")
        reply = await comment_service.create_reply(parent.id, viewer, "Child")

        assert reply.thread_id == thread.id
        assert reply.parent_comment_id == parent.id
        assert (await comment_repo.find_by_id(parent.id)).reply_count == 1
        assert (await thread_repo.find_by_id(thread.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_reply(uuid4(), viewer_for(author), "Hi")
        assert exc_info.value.code == "PARENT_COMMENT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_reply_to_deleted_parent(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        moderation_service = await unit_env.get(ModerationService)
        author, thread = await _setup(unit_env)
        viewer = viewer_for(author)
        parent = await comment_service.create_comment(thread.id, viewer, "Parent")
        await moderation_service.delete_comment(parent.id, viewer)

        with pytest.raises(NotFoundError):
            await comment_service.create_reply(parent.id, viewer, "Hi")

    @pytest.mark.asyncio
    async def test_reply_beyond_nesting_limit_rejected(self, unit_env):
        """Replies stop at max_comment_depth levels, counting the top level."""
        comment_repo = await unit_env.get(CommentRepository)
        comment_service = CommentService(
            comment_repository=comment_repo,
            thread_repository=await unit_env.get(ThreadRepository),
            counter_service=await unit_env.get(CounterService),
            settings=CommunitySettings(max_comment_depth=3),
        )
        author, thread = await _setup(unit_env)
        viewer = viewer_for(author)

        top = await comment_service.create_comment(thread.id, viewer, "Level 1")
        second = await comment_service.create_reply(top.id, viewer, "Level 2")
        third = await comment_service.create_reply(second.id, viewer, "Level 3")

        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_reply(third.id, viewer, "Level 4")
        assert exc_info.value.code == "REPLY_DEPTH_EXCEEDED"
        assert (await comment_repo.find_by_id(third.id)).reply_count == 0
        # Shallower comments still accept replies
        await comment_service.create_reply(top.id, viewer, "Another level 2")


class TestUpdateComment:
    """Tests for editing comments."""

    @pytest.mark.asyncio
    async def test_author_edits(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author, thread = await _setup(unit_env)
        viewer = viewer_for(author)
        comment = await comment_service.create_comment(thread.id, viewer, "Typo")

        updated = await comment_service.update_comment(comment.id, viewer, "Fixed")

        assert updated.content == "Fixed"

    @pytest.mark.asyncio
    async def test_admin_edits_and_stranger_cannot(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author, thread = await _setup(unit_env)
        admin = await user_repo.save(make_user("Admin", role=UserRole.ADMIN))
        stranger = await user_repo.save(make_user("Stranger"))
        comment = await comment_service.create_comment(
            thread.id, viewer_for(author), "Original"
        )

        updated = await comment_service.update_comment(
            comment.id, viewer_for(admin), "Moderated"
        )
        assert updated.content == "Moderated"

        with pytest.raises(ForbiddenError):
            await comment_service.update_comment(
                comment.id, viewer_for(stranger), "Hijacked"
            )
