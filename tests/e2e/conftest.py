"""Fixtures for HTTP tests against the app with in-memory persistence."""

import pytest
from fastapi.testclient import TestClient

from toolhub.domain.model import User
from toolhub.domain.repository import ToolRepository, UserRepository
from toolhub.interface.api.app import create_app
from tests.conftest import make_tool, make_user, token_for
from tests.di import build_test_container


class ApiEnv:
    """Test client plus direct access to the stores behind it."""

    def __init__(self, client: TestClient, container) -> None:
        self.client = client
        self.container = container

    def _save(self, repository_type, entity):
        async def save():
            repository = await self.container.get(repository_type)
            return await repository.save(entity)

        # Run on the client's event loop, where the app resolves the same stores
        return self.client.portal.call(save)

    def add_user(self, *args, **kwargs) -> User:
        return self._save(UserRepository, make_user(*args, **kwargs))

    def add_tool(self, *args, **kwargs):
        return self._save(ToolRepository, make_tool(*args, **kwargs))

    def login(self, user: User) -> None:
        self.client.cookies.set("auth_token", token_for(user))

    def logout(self) -> None:
        self.client.cookies.clear()


@pytest.fixture
def api():
    """Fresh app and in-memory stores per test."""
    container = build_test_container()
    with TestClient(create_app(container)) as client:
        yield ApiEnv(client, container)
