"""User domain service."""

from dataclasses import dataclass
from typing import Iterable

import logfire

from toolhub.domain.repository import UserRepository
from toolhub.domain.value import UserId, UserRole

from .base import Service


@dataclass(frozen=True)
class AuthorSummary:
    """Public projection of a content author."""

    name: str
    image: str | None
    role: UserRole


UNKNOWN_AUTHOR = AuthorSummary(name="Unknown", image=None, role=UserRole.USER)


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_author_summaries(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, AuthorSummary]:
        """Build author projections for many users in one query.

        Users that no longer exist map to an "Unknown" author.

        Args:
            user_ids: Author IDs (duplicates allowed)

        Returns:
            Mapping of every requested ID to its author projection
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_author_summaries", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            summaries = {}
            for user_id in unique_ids:
                user = users.get(user_id)
                if user is None:
                    summaries[user_id] = UNKNOWN_AUTHOR
                    continue
                summaries[user_id] = AuthorSummary(
                    name=user.name or UNKNOWN_AUTHOR.name,
                    image=user.image,
                    role=user.role,
                )
            return summaries
