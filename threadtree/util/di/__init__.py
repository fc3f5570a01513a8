"""Dependency injection module."""

from typing import Type

from threadtree.util.di.application import ProdApplicationProvider
from threadtree.util.di.base import Component, ProviderBase
from threadtree.util.di.core import ProdConfigProvider
from threadtree.util.di.domain import ProdDomainProvider
from threadtree.util.di.infrastructure import (
    ForestRepositoryProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Every container is built from these; mockable bases are resolved per build
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ForestRepositoryProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Bases without subclasses are concrete and returned as they are. For a
    mockable base, the subclass whose ``__is_mock__`` equals ``use_mock``
    is returned.

    Raises:
        ValueError: If the base has no implementation of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ForestRepositoryProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
