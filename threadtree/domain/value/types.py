"""Domain value types for the comment tree."""

from enum import Enum


class SortOrder(str, Enum):
    """Ordering applied to every sibling group of the forest."""

    NEWEST = "newest"
    OLDEST = "oldest"
    TOP = "top"
