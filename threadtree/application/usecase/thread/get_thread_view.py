"""Get thread view use case."""

from pydantic import BaseModel

from threadtree.application.usecase.thread.common import CommentItem
from threadtree.domain.service import ThreadService
from threadtree.domain.value import SortOrder


class ThreadRow(CommentItem):
    """Comment row in render order."""

    depth: int


class GetThreadViewRequest(BaseModel):
    """Get thread view request."""

    query: str | None = None  # None uses the remembered search query


class GetThreadViewResponse(BaseModel):
    """Get thread view response."""

    rows: list[ThreadRow]
    count: int  # All comments, regardless of search or collapse
    query: str
    order: SortOrder | None


class GetThreadViewUseCase:
    """Use case for the flattened render view of the forest.

    Rows come in pre-order with their nesting depth. Replies of collapsed
    comments are left out; a search keeps only matches and their ancestors.
    """

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread view use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadViewRequest) -> GetThreadViewResponse:
        """Execute get thread view flow.

        Args:
            request: Optional query override

        Returns:
            Render rows, total count, active query and order
        """
        view = await self.thread_service.view(request.query)
        rows = [
            ThreadRow(
                **CommentItem.from_node(item.node).model_dump(), depth=item.depth
            )
            for item in view.items
        ]
        return GetThreadViewResponse(
            rows=rows, count=view.count, query=view.query, order=view.order
        )
