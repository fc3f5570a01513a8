"""Domain repository interfaces."""

from threadtree.domain.repository.forest import ForestRepository

__all__ = [
    "ForestRepository",
]
