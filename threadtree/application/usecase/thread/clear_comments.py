"""Clear comments use case."""

from pydantic import BaseModel

from threadtree.domain.service import ThreadService


class ClearCommentsResponse(BaseModel):
    """Clear comments response."""

    count: int


class ClearCommentsUseCase:
    """Use case for deleting every comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self) -> ClearCommentsResponse:
        """Execute clear flow."""
        await self.thread_service.clear_all()
        return ClearCommentsResponse(count=await self.thread_service.count())
