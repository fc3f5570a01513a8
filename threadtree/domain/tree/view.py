"""Derived views over the comment forest.

``filter_forest`` and ``flatten_for_render`` never touch the stored tree.
``sort_in_place`` is the exception: order is a property of the stored
forest, so a re-render shows the last applied order without sorting again.
"""

from collections.abc import Callable
from typing import Any

import logfire

from threadtree.domain.model import CommentNode, Forest, RenderItem
from threadtree.domain.tree.locator import iter_preorder
from threadtree.domain.value import SortOrder

# (key, reverse) per order
_SORT_KEYS: dict[SortOrder, tuple[Callable[[CommentNode], Any], bool]] = {
    SortOrder.NEWEST: (lambda node: node.created_at, True),
    SortOrder.OLDEST: (lambda node: node.created_at, False),
    SortOrder.TOP: (lambda node: node.votes, True),
}


def count(forest: Forest) -> int:
    """Total number of nodes at every depth."""
    return sum(1 for _ in iter_preorder(forest))


def sort_in_place(forest: Forest, order: SortOrder | str) -> bool:
    """Sort the root sequence and every replies sequence independently.

    Siblings are reordered; no node changes depth or parent. Sorting is
    stable, so ties keep their previous relative order.

    Args:
        forest: Root sequence, sorted in place
        order: newest, oldest or top

    Returns:
        False if ``order`` is not a known order (nothing is changed)
    """
    try:
        key, reverse = _SORT_KEYS[SortOrder(order)]
    except ValueError:
        logfire.warn("Unknown sort order ignored", order=str(order))
        return False

    forest.sort(key=key, reverse=reverse)
    for node, _ in iter_preorder(forest):
        node.replies.sort(key=key, reverse=reverse)
    return True


def filter_forest(forest: Forest, query: str) -> Forest:
    """Prune the forest to comments matching ``query`` and their ancestors.

    Matching is case-insensitive containment on the comment text. A node is
    kept if its own text matches or if any descendant matches; everything
    else is dropped, including non-matching replies of a matching node.

    Args:
        forest: Root sequence (not modified)
        query: Search text; blank means no filtering

    Returns:
        ``forest`` itself for a blank query, otherwise a new forest of
        shallow node copies holding only the surviving replies
    """
    needle = query.strip().casefold()
    if not needle:
        return forest
    return _prune(forest, needle)


def _prune(forest: Forest, needle: str) -> Forest:
    # Reversed pre-order reaches every reply before its parent
    survivors: dict[int, CommentNode] = {}
    for node, _ in reversed(list(iter_preorder(forest))):
        replies = [survivors[id(r)] for r in node.replies if id(r) in survivors]
        if replies or needle in node.text.casefold():
            survivors[id(node)] = node.model_copy(update={"replies": replies})
    return [survivors[id(node)] for node in forest if id(node) in survivors]


def flatten_for_render(forest: Forest) -> list[RenderItem]:
    """Flatten the forest into pre-order ``(node, depth)`` rows.

    Replies of a collapsed node are left out of the rows; they stay in the
    forest and reappear once the node is expanded.
    """
    rows: list[RenderItem] = []
    stack = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        rows.append(RenderItem(node=node, depth=depth))
        if not node.collapsed:
            stack.extend((child, depth + 1) for child in reversed(node.replies))
    return rows
