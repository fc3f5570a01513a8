"""Comment entity.

Comments form a forest: each top-level comment owns its replies, which own
their replies in turn, with no depth limit unless one is configured.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from threadtree.domain.model.common import DomainModel, ValueObject
from threadtree.domain.value import CommentId

ANONYMOUS = "Anonymous"


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CommentNode(DomainModel):
    """A comment or reply.

    The ``replies`` list is owned exclusively by this node; a node is never
    reachable from two places in the forest.
    """

    id: CommentId
    text: str
    author: str = ANONYMOUS
    created_at: datetime = Field(default_factory=utcnow)
    edited: bool = False
    edited_at: Optional[datetime] = None
    votes: int = 0
    collapsed: bool = False
    replies: list["CommentNode"] = Field(default_factory=list)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Reject blank text."""
        if not v.strip():
            raise ValueError("Comment text must not be empty")
        return v

    @model_validator(mode="after")
    def validate_edit_state(self) -> "CommentNode":
        """edited_at is set exactly when the comment has been edited."""
        if self.edited != (self.edited_at is not None):
            raise ValueError("edited_at must be set if and only if edited is true")
        return self

    def apply_edit(self, text: str, at: datetime) -> None:
        """Replace the text and stamp the edit time."""
        self.text = text
        self.edited = True
        self.edited_at = at


Forest = list[CommentNode]


class RenderItem(ValueObject):
    """One row of the flattened render sequence."""

    node: CommentNode
    depth: int = Field(ge=0)
