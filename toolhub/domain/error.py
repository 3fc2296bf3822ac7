"""Domain layer errors.

Every domain error carries a machine-readable ``code``. The interface layer
maps each class to an HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    default_code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class ValidationError(DomainError):
    """Bad or missing input."""

    default_code = "VALIDATION_ERROR"


class AuthenticationRequiredError(DomainError):
    """Raised when an anonymous viewer attempts an authenticated operation."""

    default_code = "AUTH_REQUIRED"

    def __init__(self, action: str = "perform this action"):
        super().__init__(f"Authentication required to {action}")


class ForbiddenError(DomainError):
    """Raised when a user acts on content they neither own nor moderate."""

    default_code = "FORBIDDEN"

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not allowed to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is missing or soft-deleted."""

    default_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str, code: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} not found: {identifier}",
            code or f"{resource.upper().replace(' ', '_')}_NOT_FOUND",
        )


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""

    default_code = "CONFLICT"
