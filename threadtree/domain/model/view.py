"""Read models derived from the forest."""

from pydantic import Field

from threadtree.domain.model.comment import RenderItem
from threadtree.domain.model.common import ValueObject
from threadtree.domain.value import SortOrder


class ThreadView(ValueObject):
    """Flattened, optionally filtered, render sequence plus the live count."""

    items: list[RenderItem] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)
    query: str = ""
    order: SortOrder | None = None
