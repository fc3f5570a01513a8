"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire

from threadtree.domain.model import CommentNode
from threadtree.domain.value import CommentId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_node(
    comment_id: str,
    text: str | None = None,
    *,
    minutes: int = 0,
    votes: int = 0,
    collapsed: bool = False,
    replies: list[CommentNode] | None = None,
) -> CommentNode:
    """Helper to build comment nodes with readable ids and fixed timestamps.

    Args:
        comment_id: Comment id (also used as the text when none is given)
        text: Comment text
        minutes: Creation time offset from BASE_TIME
        votes: Vote tally
        collapsed: Collapsed flag
        replies: Child nodes

    Returns:
        CommentNode
    """
    return CommentNode(
        id=CommentId(comment_id),
        text=text or comment_id,
        author="tester",
        created_at=BASE_TIME + timedelta(minutes=minutes),
        votes=votes,
        collapsed=collapsed,
        replies=replies or [],
    )


class TickClock:
    """Clock that advances one second on every read."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now
