"""Session token verification."""

import logfire
from pydantic import ValidationError as PayloadValidationError

from toolhub.config import AuthSettings
from toolhub.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Verifies session tokens issued by the identity provider."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid, expired or has malformed claims
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except PayloadValidationError as e:
                raise JWTError("Malformed token payload") from e

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """User id carried by a token, or None when missing or unverifiable."""
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug("Token rejected, viewer is anonymous", error=str(e))
            return None
