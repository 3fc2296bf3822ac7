"""Logfire setup and instrumentation.

Services open a span per operation and emit structured events inside it:

    with logfire.span("vote_service.cast_vote", votable_id=str(votable_id)):
        ...
        logfire.info("Vote flipped", vote_id=str(vote.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from toolhub.config import Settings

SERVICE_NAME = "toolhub-api"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Spans are exported when ``OBSERVABILITY__SEND_TO_LOGFIRE`` is true, or
    when it is unset and ``OBSERVABILITY__LOGFIRE_TOKEN`` is present. The
    console exporter is off in production.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    console: logfire.ConsoleOptions | bool = False
    if settings.environment != "production":
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token or None,
        console=console,
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    # WebSocket scopes have no method
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    if getattr(request, "client", None):
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
