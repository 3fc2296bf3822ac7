"""Provider metadata shared by the production and test containers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have an in-memory stand-in for tests
Component = Literal["persistence"]


class DependencyInjectionError(Exception):
    """No provider matches the requested component implementation."""


class ProviderBase(Provider):
    """Provider with mock-selection metadata.

    Attributes:
        __mock_component__: Component a provider family implements, None for
            providers that have a single implementation
        __is_mock__: True for the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
