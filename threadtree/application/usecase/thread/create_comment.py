"""Create comment use case."""

from pydantic import BaseModel

from threadtree.application.usecase.thread.common import CommentItem
from threadtree.domain.service import ThreadService
from threadtree.domain.value import CommentId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    text: str
    author: str | None = None  # Defaults to the configured anonymous author
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    parent_id: str | None


class CreateCommentUseCase:
    """Use case for posting a top-level comment or a reply."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create comment use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            EmptyTextError: If the text is blank
            ParentNotFoundError: If replying to a missing comment
            DepthExceededError: If the reply would nest too deeply
        """
        if request.parent_id is None:
            node = await self.thread_service.add_root(request.text, request.author)
        else:
            node = await self.thread_service.add_reply(
                CommentId(request.parent_id), request.text, request.author
            )

        return CreateCommentResponse(
            comment=CommentItem.from_node(node),
            parent_id=request.parent_id,
        )
