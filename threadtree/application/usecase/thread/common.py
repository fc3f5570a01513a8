"""Response models shared by thread use cases."""

from datetime import datetime

from pydantic import BaseModel

from threadtree.domain.model import CommentNode


class CommentItem(BaseModel):
    """A comment without its replies."""

    comment_id: str
    text: str
    author: str
    created_at: datetime
    edited: bool
    edited_at: datetime | None
    votes: int
    collapsed: bool
    reply_count: int

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        """Build the item for a node; ``reply_count`` counts direct replies."""
        return cls(
            comment_id=node.id,
            text=node.text,
            author=node.author,
            created_at=node.created_at,
            edited=node.edited,
            edited_at=node.edited_at,
            votes=node.votes,
            collapsed=node.collapsed,
            reply_count=len(node.replies),
        )
