"""Edit comment use case."""

from pydantic import BaseModel

from threadtree.application.usecase.thread.common import CommentItem
from threadtree.domain.service import ThreadService
from threadtree.domain.value import CommentId


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    comment_id: str
    text: str  # New text content (trimmed, cannot be blank)


class EditCommentResponse(BaseModel):
    """Edit comment response."""

    comment: CommentItem


class EditCommentUseCase:
    """Use case for replacing a comment's text."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: EditCommentRequest) -> EditCommentResponse:
        """Execute edit comment flow.

        Raises:
            EmptyTextError: If the new text is blank
            NotFoundError: If the comment does not exist
        """
        node = await self.thread_service.edit(
            CommentId(request.comment_id), request.text
        )
        return EditCommentResponse(comment=CommentItem.from_node(node))
