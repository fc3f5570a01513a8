"""Infrastructure DI providers."""

from threadtree.util.di.infrastructure.persistence import (
    ForestRepositoryProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "ForestRepositoryProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
