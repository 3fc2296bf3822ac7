"""Unit tests for ThreadService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from toolhub.domain.error import (
    AuthenticationRequiredError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from toolhub.domain.repository import ThreadRepository, ThreadSortOrder, UserRepository
from toolhub.domain.service import ThreadService
from toolhub.domain.value import ANONYMOUS, UserRole
from tests.conftest import make_thread, make_user, viewer_for
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateThread:
    """Tests for thread creation and validation."""

    @pytest.mark.asyncio
    async def test_create_thread_trims_fields(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        thread = await thread_service.create_thread(
            viewer_for(author),
            title="  Best diff tool?  ",
            content="  I keep switching between three of them.  ",
            category="  Dev Tools ",
        )

        assert thread.title == "Best diff tool?"
        assert thread.content == "I keep switching between three of them."
        assert thread.category.root == "Dev Tools"
        assert thread.author_id == author.id
        assert (thread.upvotes, thread.downvotes, thread.comment_count) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_anonymous_cannot_create(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(AuthenticationRequiredError):
            await thread_service.create_thread(
                ANONYMOUS, title="Title", content="Long enough content"
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("title", "content", "code"),
        [
            ("   ", "Long enough content", "TITLE_REQUIRED"),
            ("x" * 301, "Long enough content", "TITLE_TOO_LONG"),
            ("Title", "too short", "CONTENT_TOO_SHORT"),
            ("Title", "x" * 10001, "CONTENT_TOO_LONG"),
        ],
    )
    async def test_field_bounds(self, unit_env, title, content, code):
        thread_service = await unit_env.get(ThreadService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(ValidationError) as exc_info:
            await thread_service.create_thread(
                viewer_for(author), title=title, content=content
            )
        assert exc_info.value.code == code

    @pytest.mark.asyncio
    async def test_category_too_long(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(ValidationError) as exc_info:
            await thread_service.create_thread(
                viewer_for(author),
                title="Title",
                content="Long enough content",
                category="c" * 51,
            )
        assert exc_info.value.code == "INVALID_CATEGORY"


class TestListThreads:
    """Tests for sorting and pagination."""

    @pytest.mark.asyncio
    async def test_pinned_first_then_sort_order(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = make_user().id

        old_popular = await thread_repo.save(
            make_thread(author_id, upvotes=10, age=timedelta(days=3))
        )
        fresh = await thread_repo.save(make_thread(author_id, age=timedelta(minutes=1)))
        disliked = await thread_repo.save(
            make_thread(author_id, upvotes=1, downvotes=4, age=timedelta(hours=1))
        )
        pinned = await thread_repo.save(
            make_thread(author_id, is_pinned=True, age=timedelta(days=30))
        )

        new, _ = await thread_service.list_threads(sort=ThreadSortOrder.NEW)
        top, _ = await thread_service.list_threads(sort=ThreadSortOrder.TOP)

        assert [t.id for t in new] == [pinned.id, fresh.id, disliked.id, old_popular.id]
        assert [t.id for t in top] == [pinned.id, old_popular.id, fresh.id, disliked.id]

    @pytest.mark.asyncio
    async def test_hot_breaks_score_ties_by_recency(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = make_user().id

        older = await thread_repo.save(
            make_thread(author_id, upvotes=3, age=timedelta(days=2))
        )
        newer = await thread_repo.save(
            make_thread(author_id, upvotes=3, age=timedelta(hours=2))
        )
        best = await thread_repo.save(
            make_thread(author_id, upvotes=8, age=timedelta(days=5))
        )

        hot, _ = await thread_service.list_threads(sort=ThreadSortOrder.HOT)

        assert [t.id for t in hot] == [best.id, newer.id, older.id]

    @pytest.mark.asyncio
    async def test_pagination_reports_has_more(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = make_user().id
        for i in range(5):
            await thread_repo.save(make_thread(author_id, age=timedelta(minutes=i)))

        first, first_more = await thread_service.list_threads(
            sort=ThreadSortOrder.NEW, limit=2, offset=0
        )
        last, last_more = await thread_service.list_threads(
            sort=ThreadSortOrder.NEW, limit=2, offset=4
        )

        assert len(first) == 2 and first_more
        assert len(last) == 1 and not last_more

    @pytest.mark.asyncio
    async def test_page_size_defaults_and_caps(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        assert thread_service.page_size(None) == 10
        assert thread_service.page_size(500) == 50
        assert thread_service.page_size(7) == 7

    @pytest.mark.asyncio
    async def test_category_filter(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = make_user().id
        design = await thread_repo.save(make_thread(author_id, category="Design"))
        await thread_repo.save(make_thread(author_id, category="Video Editing"))
        await thread_repo.save(make_thread(author_id))

        threads, _ = await thread_service.list_threads(category="Design")

        assert [t.id for t in threads] == [design.id]


class TestUpdateThread:
    """Tests for editing threads."""

    @pytest.mark.asyncio
    async def test_author_edits_title_only(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        thread = await thread_repo.save(make_thread(author.id, category="Design"))

        updated = await thread_service.update_thread(
            thread.id, viewer_for(author), title="Renamed"
        )

        assert updated.title == "Renamed"
        assert updated.content == thread.content
        assert updated.category.root == "Design"

    @pytest.mark.asyncio
    async def test_admin_may_edit(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))
        thread = await thread_repo.save(make_thread(make_user().id))

        updated = await thread_service.update_thread(
            thread.id, viewer_for(admin), content="Moderated content body"
        )

        assert updated.content == "Moderated content body"

    @pytest.mark.asyncio
    async def test_stranger_may_not_edit(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        user_repo = await unit_env.get(UserRepository)
        stranger = await user_repo.save(make_user())
        thread = await thread_repo.save(make_thread(make_user().id))

        with pytest.raises(ForbiddenError):
            await thread_service.update_thread(
                thread.id, viewer_for(stranger), title="Mine now"
            )

    @pytest.mark.asyncio
    async def test_missing_thread(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(NotFoundError):
            await thread_service.get_active_thread(uuid4())
        with pytest.raises(NotFoundError):
            await thread_service.update_thread(
                uuid4(), viewer_for(author), title="Anything"
            )
