"""Tree algorithms over the comment forest."""

from threadtree.domain.tree.locator import (
    contains,
    find,
    find_container,
    find_with_depth,
    iter_preorder,
)
from threadtree.domain.tree.view import (
    count,
    filter_forest,
    flatten_for_render,
    sort_in_place,
)

__all__ = [
    # Locator
    "contains",
    "find",
    "find_container",
    "find_with_depth",
    "iter_preorder",
    # Views
    "count",
    "filter_forest",
    "flatten_for_render",
    "sort_in_place",
]
