"""Base service class for domain services."""

from toolhub.domain.error import AuthenticationRequiredError, ForbiddenError
from toolhub.domain.value import Authenticated, Viewer


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def require_authenticated(viewer: Viewer, action: str) -> Authenticated:
        """Narrow a viewer to an authenticated user.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
        """
        if not isinstance(viewer, Authenticated):
            raise AuthenticationRequiredError(action)
        return viewer

    @staticmethod
    def require_admin(viewer: Viewer, resource: str, resource_id: str) -> Authenticated:
        """Narrow a viewer to an admin.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is not an admin
        """
        user = Service.require_authenticated(viewer, f"manage {resource}")
        if not user.is_admin:
            raise ForbiddenError(resource, resource_id, str(user.user_id))
        return user
