"""Dependency injection module."""

from typing import Type

from readproof.util.di.application import ProdApplicationProvider
from readproof.util.di.base import Component, ProviderBase
from readproof.util.di.core import ProdConfigProvider
from readproof.util.di.domain import ProdDomainProvider
from readproof.util.di.infrastructure import (
    NamingProvider,
    PersistenceProvider,
    ProdNamingProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    NamingProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a component base.

    Bases without subclasses are concrete and returned as-is; otherwise the
    subclass whose ``__is_mock__`` equals ``use_mock`` is chosen.

    Raises:
        ValueError: If no matching implementation is registered
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
    "NamingProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdNamingProvider",
    "ProdPersistenceProvider",
]
