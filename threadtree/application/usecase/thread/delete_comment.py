"""Delete comment use case."""

from pydantic import BaseModel

from threadtree.domain.service import ThreadService
from threadtree.domain.tree import count
from threadtree.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    removed: int  # The comment plus all of its replies
    count: int  # Comments remaining


class DeleteCommentUseCase:
    """Use case for deleting a comment and its replies."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        removed = await self.thread_service.delete(CommentId(request.comment_id))
        remaining = await self.thread_service.count()
        return DeleteCommentResponse(
            comment_id=request.comment_id,
            removed=count([removed]),
            count=remaining,
        )
