"""Domain model entities for the comment tree."""

from threadtree.domain.model.comment import (
    ANONYMOUS,
    CommentNode,
    Forest,
    RenderItem,
    utcnow,
)
from threadtree.domain.model.view import ThreadView

__all__ = [
    "ANONYMOUS",
    "CommentNode",
    "Forest",
    "RenderItem",
    "ThreadView",
    "utcnow",
]
