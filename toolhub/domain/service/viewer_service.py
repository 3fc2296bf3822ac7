"""Viewer resolution domain service."""

from uuid import UUID

import logfire

from toolhub.domain.repository import UserRepository
from toolhub.domain.value import ANONYMOUS, Authenticated, UserId, Viewer

from .base import Service
from .jwt_service import JWTService


class ViewerService(Service):
    """Turns a session token into a Viewer."""

    def __init__(self, jwt_service: JWTService, user_repository: UserRepository) -> None:
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    async def resolve(self, auth_token: str | None) -> Viewer:
        """Resolve the requesting viewer.

        Missing, invalid or expired tokens, and tokens for unknown users,
        resolve to an anonymous viewer. The role always comes from storage.

        Args:
            auth_token: JWT from the ``auth_token`` cookie

        Returns:
            Anonymous or Authenticated viewer
        """
        user_id_str = self.jwt_service.get_user_id_from_token(auth_token)
        if not user_id_str:
            return ANONYMOUS

        try:
            user_id = UserId(UUID(user_id_str))
        except ValueError:
            logfire.warn("Token carries a malformed user id", user_id=user_id_str)
            return ANONYMOUS

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("Token for unknown user", user_id=user_id_str)
            return ANONYMOUS

        return Authenticated(user_id=user.id, role=user.role)
