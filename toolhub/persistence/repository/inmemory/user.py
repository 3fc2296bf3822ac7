"""In-memory user repository for testing."""

from typing import Optional, Sequence

from toolhub.domain.model.user import User
from toolhub.domain.repository.user import UserRepository
from toolhub.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        found = (self._users.get(user_id) for user_id in set(user_ids))
        return {user.id: user for user in found if user is not None}

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
