"""Translation of errors into JSON error responses.

Every error body has the shape ``{"error": message, "code": code}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from toolhub.domain.error import (
    AuthenticationRequiredError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)

# Checked in order; the first matching class wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationRequiredError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def error_body(message: str, code: str) -> dict[str, str]:
    return {"error": message, "code": code}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown subclasses map to 500."""
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    log = logfire.error if status_code >= 500 else logfire.warn
    log(
        "Domain error",
        path=request.url.path,
        code=exc.code,
        status_code=status_code,
        error=exc.message,
    )
    return JSONResponse(status_code=status_code, content=error_body(exc.message, exc.code))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    logfire.warn("Request validation failed", path=request.url.path, error=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, "INVALID_REQUEST"),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error", path=request.url.path, error_type=type(exc).__name__
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(f"Internal server error: {exc}", "INTERNAL_ERROR"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register JSON error handlers on the application.

    Args:
        app: FastAPI application
    """
    # Starlette types handlers as taking any Exception
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        handle_request_validation_error,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, handle_unexpected_error)
