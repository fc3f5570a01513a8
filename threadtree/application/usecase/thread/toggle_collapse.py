"""Toggle collapse use case."""

from pydantic import BaseModel

from threadtree.domain.service import ThreadService
from threadtree.domain.value import CommentId


class ToggleCollapseRequest(BaseModel):
    """Toggle collapse request."""

    comment_id: str
    collapsed: bool | None = None  # None flips the current state


class ToggleCollapseResponse(BaseModel):
    """Toggle collapse response."""

    comment_id: str
    collapsed: bool


class ToggleCollapseUseCase:
    """Use case for collapsing or expanding a comment's replies."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: ToggleCollapseRequest) -> ToggleCollapseResponse:
        """Execute toggle collapse flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        node = await self.thread_service.toggle_collapse(
            CommentId(request.comment_id), request.collapsed
        )
        return ToggleCollapseResponse(comment_id=node.id, collapsed=node.collapsed)
