"""Vote comment use case."""

from pydantic import BaseModel

from threadtree.domain.service import ThreadService
from threadtree.domain.value import CommentId


class VoteCommentRequest(BaseModel):
    """Vote comment request."""

    comment_id: str
    delta: int = 1  # +1 upvote, -1 downvote


class VoteCommentResponse(BaseModel):
    """Vote comment response."""

    comment_id: str
    votes: int


class VoteCommentUseCase:
    """Use case for voting on a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        node = await self.thread_service.vote(
            CommentId(request.comment_id), request.delta
        )
        return VoteCommentResponse(comment_id=node.id, votes=node.votes)
