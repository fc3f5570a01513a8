"""Get comment use case."""

from pydantic import BaseModel

from threadtree.application.usecase.thread.common import CommentItem
from threadtree.domain.service import ThreadService
from threadtree.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentItem
    reply_ids: list[str]


class GetCommentUseCase:
    """Use case for reading a single comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        node = await self.thread_service.get_comment(CommentId(request.comment_id))
        return GetCommentResponse(
            comment=CommentItem.from_node(node),
            reply_ids=[reply.id for reply in node.replies],
        )
