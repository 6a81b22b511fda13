"""Dependency injection module."""

from typing import Type

from customlinks.util.di.application import ProdApplicationProvider
from customlinks.util.di.base import Component, ProviderBase
from customlinks.util.di.core import ProdConfigProvider
from customlinks.util.di.domain import ProdDomainProvider
from customlinks.util.di.infrastructure import (
    IdentityAdapterProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
)
from customlinks.util.error import DependencyInjectionError

# Assembly order for the container
PROVIDERS: list[Type[ProviderBase]] = [
    # Always real
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    IdentityAdapterProvider,
    # Swappable for in-memory fakes in tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to install for ``base``.

    A base with no subclasses is installed as-is. A base with subclasses is a
    swappable component: return the subclass whose ``__is_mock__`` matches
    ``use_mock``, or raise ``DependencyInjectionError`` if none does.
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
        raise DependencyInjectionError(
            f"No {kind} implementation for {component_name}"
        )

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
    "IdentityAdapterProvider",
    # Infrastructure
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
