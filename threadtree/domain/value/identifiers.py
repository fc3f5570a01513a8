"""Identifiers for comment tree entities.

Comment ids are opaque strings combining a millisecond clock component with
a random suffix, so two ids minted in the same millisecond still differ.
"""

import secrets
import time
from typing import NewType

CommentId = NewType("CommentId", str)

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_RANDOM_LENGTH = 6


def _base36(value: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def new_comment_id() -> CommentId:
    """Generate a new comment identifier.

    Unique among ids generated by this process with overwhelming
    probability; not a security token.

    Returns:
        Identifier of the form ``c_<clock><random>``
    """
    clock = _base36(time.time_ns() // 1_000_000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_RANDOM_LENGTH))
    return CommentId(f"c_{clock}{suffix}")
