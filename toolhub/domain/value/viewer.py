"""Requesting viewer.

A viewer is either anonymous or an authenticated user with a role. It is
passed explicitly to every operation whose result depends on who is asking.
"""

from typing import Literal, Union

from toolhub.domain.value.common import ValueObject
from toolhub.domain.value.identifiers import UserId
from toolhub.domain.value.types import UserRole


class Anonymous(ValueObject):
    """Viewer without a valid session."""

    kind: Literal["anonymous"] = "anonymous"


class Authenticated(ValueObject):
    """Viewer with a verified session."""

    kind: Literal["authenticated"] = "authenticated"
    user_id: UserId
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def can_manage(self, author_id: UserId) -> bool:
        """Whether this viewer may edit or delete content by ``author_id``."""
        return self.is_admin or self.user_id == author_id


Viewer = Union[Anonymous, Authenticated]

ANONYMOUS = Anonymous()
