"""Providers for external infrastructure."""

# Both implementations must be imported so get_provider sees them as subclasses
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
