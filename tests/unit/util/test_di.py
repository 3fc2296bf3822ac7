"""Unit tests for provider selection."""

import pytest

from tests.di import MockPersistenceProvider, build_test_container
from toolhub.util.di import (
    DependencyInjectionError,
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
    mockable_components,
    select_providers,
)
from toolhub.util.di.base import ProviderBase


def test_persistence_is_the_only_mockable_component():
    assert mockable_components() == {"persistence"}


def test_concrete_provider_is_used_as_is():
    assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider


@pytest.mark.parametrize(
    "use_mock, expected",
    [(False, ProdPersistenceProvider), (True, MockPersistenceProvider)],
)
def test_mockable_provider_selected_by_flag(use_mock, expected):
    assert get_provider(PersistenceProvider, use_mock=use_mock) is expected


def test_missing_implementation_raises():
    class LonelyFamily(ProviderBase):
        __mock_component__ = "persistence"

    class OnlyProd(LonelyFamily):
        pass

    with pytest.raises(DependencyInjectionError, match="No mock implementation"):
        get_provider(LonelyFamily, use_mock=True)


def test_select_providers_mocks_requested_components():
    providers = select_providers(mocked={"persistence"})

    assert any(isinstance(p, MockPersistenceProvider) for p in providers)
    assert not any(isinstance(p, ProdPersistenceProvider) for p in providers)


def test_unknown_unmock_component_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"search"})  # type: ignore[arg-type]
