"""Dependency injection wiring.

Every provider family is listed once in ``PROVIDERS``. Families that declare
a ``__mock_component__`` have a production and an in-memory subclass, and
the container builder picks one of them per component.
"""

from typing import Collection, Type

from toolhub.util.di.application import ProdApplicationProvider
from toolhub.util.di.base import Component, DependencyInjectionError, ProviderBase
from toolhub.util.di.core import ProdConfigProvider
from toolhub.util.di.domain import ProdDomainProvider
from toolhub.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Components that have an in-memory implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider family.

    Args:
        base: Provider family from ``PROVIDERS``
        use_mock: Select the in-memory implementation

    Returns:
        Provider class; ``base`` itself when it has no subclasses

    Raises:
        DependencyInjectionError: If the family lacks the requested implementation
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for impl in subclasses:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


def select_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per family.

    Args:
        mocked: Components to back with their in-memory implementation
    """
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "DependencyInjectionError",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
    "select_providers",
]
