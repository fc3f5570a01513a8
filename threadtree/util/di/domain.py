"""Domain layer DI providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from threadtree.config import ThreadSettings
from threadtree.domain.repository import ForestRepository
from threadtree.domain.service import ThreadService
from threadtree.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    The thread service is APP-scoped: it holds the one forest for the life of
    the container, loads it when first provided and saves it once more when
    the container closes.
    """

    scope = Scope.APP

    @provide
    async def get_thread_service(
        self, forest_repository: ForestRepository, settings: ThreadSettings
    ) -> AsyncIterator[ThreadService]:
        """Provide the thread domain service."""
        service = ThreadService(forest_repository=forest_repository, settings=settings)
        await service.open()
        yield service
        await service.close()
