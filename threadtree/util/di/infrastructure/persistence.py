"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine

from threadtree.config import StorageSettings
from threadtree.domain.repository import ForestRepository
from threadtree.persistence.blobstore import BlobStore, SqlBlobStore
from threadtree.persistence.database import create_engine
from threadtree.persistence.repository import BlobForestRepository
from threadtree.util.di.base import ProviderBase
from threadtree.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations bind ``BlobStore``.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using an SQL database."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: StorageSettings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_blob_store(self, engine: AsyncEngine) -> BlobStore:
        """Provide SQL blob store."""
        return SqlBlobStore(engine)


class ForestRepositoryProvider(ProviderBase):
    """Forest repository over whichever blob store is bound - concrete."""

    @provide(scope=Scope.APP)
    def get_forest_repository(
        self, blob_store: BlobStore, settings: StorageSettings
    ) -> ForestRepository:
        """Provide the blob-backed forest repository."""
        return BlobForestRepository(blob_store=blob_store, key=settings.blob_key)
