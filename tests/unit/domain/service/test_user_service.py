"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from toolhub.domain.repository import UserRepository
from toolhub.domain.service import UserService
from toolhub.domain.value import UserId, UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAuthorSummaries:
    """Tests for UserService.get_author_summaries()."""

    @pytest.mark.asyncio
    async def test_known_and_missing_authors(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        ada = await user_repo.save(make_user("Ada", role=UserRole.ADMIN))
        nameless = await user_repo.save(make_user(None))
        ghost = UserId(uuid4())

        summaries = await user_service.get_author_summaries(
            [ada.id, nameless.id, ghost, ada.id]
        )

        assert len(summaries) == 3
        assert summaries[ada.id].name == "Ada"
        assert summaries[ada.id].role == UserRole.ADMIN
        assert summaries[nameless.id].name == "Unknown"
        assert summaries[ghost].name == "Unknown"
        assert summaries[ghost].role == UserRole.USER

    @pytest.mark.asyncio
    async def test_no_ids(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_author_summaries([]) == {}
