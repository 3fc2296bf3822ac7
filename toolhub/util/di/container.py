"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from toolhub.util.di import select_providers


def create_container() -> AsyncContainer:
    """Container with every production implementation.

    FastapiProvider exposes the current Request to REQUEST-scoped factories.
    """
    return make_async_container(*select_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so DishkaRoute can resolve dependencies."""
    setup_dishka(container, app)
