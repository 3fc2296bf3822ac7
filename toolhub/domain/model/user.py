"""User entity.

Users are owned by the identity provider. Toolhub only reads the profile
fields it shows next to community content and the role used for
moderation checks.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from toolhub.domain.model.common import DomainModel
from toolhub.domain.value import UserId, UserRole


class User(DomainModel):
    """User entity."""

    id: UserId
    name: Optional[str] = None
    image: Optional[str] = None
    role: UserRole = UserRole.USER
    email_verified: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
