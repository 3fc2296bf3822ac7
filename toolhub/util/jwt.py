"""Session token helpers.

Tokens are HS256 JWTs issued by the identity provider. The user id travels
in the standard ``sub`` claim; ``exp`` is mandatory.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from toolhub.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp"]


class TokenPayload(BaseModel):
    """Verified claims of a session token."""

    sub: str
    exp: datetime
    iat: datetime | None = None

    @property
    def user_id(self) -> str:
        return self.sub


class JWTError(Exception):
    """Token could not be verified."""


def create_token(
    user_id: str, settings: AuthSettings, expires_in: timedelta | None = None
) -> str:
    """Sign a session token for a user.

    The identity provider issues tokens in production; this is used by
    scripts and tests.

    Args:
        user_id: User ID to put in ``sub``
        settings: Signing configuration
        expires_in: Lifetime (defaults to ``jwt_expiry_days``)
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_in or timedelta(days=settings.jwt_expiry_days)
    claims = {"sub": user_id, "iat": issued_at, "exp": issued_at + lifetime}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry.

    Raises:
        JWTError: If the token is expired, badly signed or lacks a claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e
    return TokenPayload(**claims)
