"""Domain value objects for the comment tree."""

from threadtree.domain.value.identifiers import CommentId, new_comment_id
from threadtree.domain.value.types import SortOrder

__all__ = [
    # Identifiers
    "CommentId",
    "new_comment_id",
    # Types
    "SortOrder",
]
