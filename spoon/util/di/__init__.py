"""Dishka providers for the account service.

PROVIDERS lists every provider the app container is built from. Tests
build the same list through ``get_provider(..., use_mock=True)`` so that
persistence and photo storage run in memory.
"""

from typing import Type

from spoon.util.di.application import ProdApplicationProvider
from spoon.util.di.base import Component, ProviderBase
from spoon.util.di.core import ProdConfigProvider
from spoon.util.di.domain import ProdDomainProvider
from spoon.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

# Config, domain and use cases first, then the swappable infrastructure
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to install for one PROVIDERS entry.

    Config, domain and application providers have no subclasses and are
    returned as they are. PersistenceProvider and StorageProvider each
    have a production and a mock subclass, and ``use_mock`` chooses
    between them by their ``__is_mock__`` flag.

    Args:
        base: Entry from PROVIDERS
        use_mock: Whether to pick the in-memory subclass

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the base has no subclass of the requested kind
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "PersistenceProvider",
    "StorageProvider",
    # Infrastructure implementations
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
