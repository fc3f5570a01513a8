"""Mappers between the comment forest and its stored records.

The snapshot is a flat list of records in pre-order, each naming its parent,
so neither writing nor reading it nests deeper than a single comment however
long a reply chain grows.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from threadtree.domain.model import CommentNode, Forest
from threadtree.domain.tree import iter_preorder
from threadtree.domain.value import CommentId


class CommentRecord(BaseModel):
    """One comment as stored: its own fields and its parent's id."""

    id: str
    parent_id: Optional[str] = None  # None for top-level comments
    text: str
    author: str
    created_at: datetime
    edited: bool = False
    edited_at: Optional[datetime] = None
    votes: int = 0
    collapsed: bool = False


def forest_to_records(forest: Forest) -> list[CommentRecord]:
    """Flatten a forest into pre-order records.

    Args:
        forest: Root sequence

    Returns:
        Records where every parent precedes its replies
    """
    records: list[CommentRecord] = []
    ancestors: list[CommentNode] = []
    for node, depth in iter_preorder(forest):
        del ancestors[depth:]
        parent_id = ancestors[-1].id if ancestors else None
        records.append(
            CommentRecord(
                parent_id=parent_id, **node.model_dump(exclude={"replies"})
            )
        )
        ancestors.append(node)
    return records


def records_to_forest(records: list[CommentRecord]) -> Forest:
    """Rebuild a forest from pre-order records.

    Raises:
        ValueError: If an id repeats, a parent is missing or comes after its
            reply, or a record breaks a comment invariant (pydantic's
            ValidationError is a ValueError)
    """
    forest: Forest = []
    nodes: dict[str, CommentNode] = {}
    for record in records:
        if record.id in nodes:
            raise ValueError(f"Duplicate comment id in snapshot: {record.id}")
        node = CommentNode(
            id=CommentId(record.id),
            **record.model_dump(exclude={"id", "parent_id"}),
        )
        if record.parent_id is None:
            forest.append(node)
        else:
            parent = nodes.get(record.parent_id)
            if parent is None:
                raise ValueError(
                    f"Comment {record.id} precedes its parent {record.parent_id}"
                )
            parent.replies.append(node)
        nodes[record.id] = node
    return forest
