"""Set search query use case."""

from pydantic import BaseModel

from threadtree.domain.service import ThreadService


class SetSearchQueryRequest(BaseModel):
    """Set search query request."""

    query: str = ""  # Empty clears the search


class SetSearchQueryResponse(BaseModel):
    """Set search query response."""

    query: str


class SetSearchQueryUseCase:
    """Use case for changing the query applied to later render views."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: SetSearchQueryRequest) -> SetSearchQueryResponse:
        """Execute set search query flow."""
        await self.thread_service.set_search_query(request.query)
        return SetSearchQueryResponse(query=request.query)
