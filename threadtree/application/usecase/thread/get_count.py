"""Get count use case."""

from pydantic import BaseModel

from threadtree.domain.service import ThreadService


class GetCountResponse(BaseModel):
    """Get count response."""

    count: int


class GetCountUseCase:
    """Use case for counting comments at every depth."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self) -> GetCountResponse:
        """Execute count flow."""
        return GetCountResponse(count=await self.thread_service.count())
