"""Depth-first lookup over the comment forest.

Every traversal is pre-order: a node is visited before its replies and
siblings are visited in list order. Lookups stop at the first match, which
is the only match while ids are unique.

An explicit stack is used instead of recursion so that long reply chains do
not run into the interpreter's recursion limit.
"""

from collections.abc import Iterator
from typing import Optional

from threadtree.domain.error import DepthExceededError
from threadtree.domain.model import CommentNode, Forest
from threadtree.domain.value import CommentId

Slot = tuple[list[CommentNode], int]


def _walk(
    forest: Forest, max_depth: Optional[int] = None
) -> Iterator[tuple[list[CommentNode], int, int]]:
    """Yield ``(container, index, depth)`` for every node in pre-order."""
    stack = [(forest, i, 0) for i in reversed(range(len(forest)))]
    while stack:
        container, index, depth = stack.pop()
        if max_depth is not None and depth > max_depth:
            raise DepthExceededError(depth, max_depth)
        yield container, index, depth
        replies = container[index].replies
        stack.extend((replies, i, depth + 1) for i in reversed(range(len(replies))))


def iter_preorder(
    forest: Forest, max_depth: Optional[int] = None
) -> Iterator[tuple[CommentNode, int]]:
    """Iterate ``(node, depth)`` pairs in pre-order.

    Args:
        forest: Root sequence
        max_depth: Deepest depth the traversal may reach (roots are 0)

    Raises:
        DepthExceededError: If a node deeper than ``max_depth`` is reached
    """
    for container, index, depth in _walk(forest, max_depth):
        yield container[index], depth


def find_with_depth(
    forest: Forest, comment_id: CommentId, max_depth: Optional[int] = None
) -> Optional[tuple[CommentNode, int]]:
    """Find a node and its depth by id."""
    for node, depth in iter_preorder(forest, max_depth):
        if node.id == comment_id:
            return node, depth
    return None


def find(
    forest: Forest, comment_id: CommentId, max_depth: Optional[int] = None
) -> Optional[CommentNode]:
    """Find a node by id.

    Returns:
        The node if present, None otherwise
    """
    found = find_with_depth(forest, comment_id, max_depth)
    return found[0] if found else None


def find_container(
    forest: Forest, comment_id: CommentId, max_depth: Optional[int] = None
) -> Optional[Slot]:
    """Find the list that directly holds a node, and the node's index in it.

    The container is the root sequence for top-level comments and the
    parent's ``replies`` otherwise, so callers can splice it.
    """
    for container, index, _ in _walk(forest, max_depth):
        if container[index].id == comment_id:
            return container, index
    return None


def contains(forest: Forest, comment_id: CommentId) -> bool:
    """Whether any node in the forest has the given id."""
    return find(forest, comment_id) is not None
