"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from toolhub.config import Settings
from toolhub.interface.api.errors import register_error_handlers
from toolhub.interface.api.routes import (
    comments,
    health,
    reviews,
    scores,
    threads,
    users,
    votes,
)
from toolhub.util.di.container import create_container, setup_di
from toolhub.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    threads.router,
    comments.router,
    votes.router,
    users.router,
    scores.router,
    reviews.router,
)


def _add_cors(app: FastAPI, settings: Settings) -> None:
    # The session cookie is sent cross-origin, so origins must be explicit
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Content-Type", "Origin", "X-Requested-With"],
        max_age=600,
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API application.

    Logfire must already be configured: ``scripts/start_app.py`` does it in
    production and ``tests/conftest.py`` in tests.

    Args:
        container: DI container; defaults to the production container

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Toolhub API",
        description=(
            "Community threads, comment trees and votes, plus per-metric "
            "scoring of software tools"
        ),
        version="0.1.0",
    )

    instrument_fastapi(app_instance)
    _add_cors(app_instance, settings)
    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Module-level instance for uvicorn
app = create_app()
