"""Set sort order use case."""

from pydantic import BaseModel

from threadtree.domain.service import ThreadService
from threadtree.domain.value import SortOrder


class SetSortOrderRequest(BaseModel):
    """Set sort order request."""

    order: str


class SetSortOrderResponse(BaseModel):
    """Set sort order response."""

    applied: bool  # False when the order is not recognised
    order: SortOrder | None  # Order now in effect


class SetSortOrderUseCase:
    """Use case for reordering the stored forest."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: SetSortOrderRequest) -> SetSortOrderResponse:
        """Execute sort flow. Unknown orders change nothing."""
        applied = await self.thread_service.sort(request.order)
        return SetSortOrderResponse(
            applied=applied, order=self.thread_service.sort_order
        )
