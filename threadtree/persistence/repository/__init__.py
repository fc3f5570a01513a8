"""Forest repository implementations."""

from threadtree.persistence.repository.forest import (
    BlobForestRepository,
    dump_forest,
    parse_forest,
)

__all__ = [
    "BlobForestRepository",
    "dump_forest",
    "parse_forest",
]
