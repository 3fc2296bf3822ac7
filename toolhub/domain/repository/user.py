"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from toolhub.domain.model.user import User
from toolhub.domain.value import UserId


class UserRepository(ABC):
    """Read access to accounts owned by the identity provider.

    Roles decide admin-only operations; names and images feed the author
    summaries shown next to threads and comments.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Look up one account, None if the identity provider never created it."""

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Look up several accounts in one query.

        Args:
            user_ids: Ids to resolve; duplicates are allowed

        Returns:
            Found accounts by id. Unknown ids are left out, not mapped to None.
        """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Upsert an account. Used by seeding and tests."""
