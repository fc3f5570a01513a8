"""Integration tests for SqlBlobStore against a SQLite database file."""

import pytest
import pytest_asyncio

from threadtree.config import StorageSettings, ThreadSettings
from threadtree.domain.service import ThreadService
from threadtree.persistence.blobstore import SqlBlobStore
from threadtree.persistence.database import create_engine
from threadtree.persistence.repository import BlobForestRepository

KEY = "comments_tree_v2"


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Async engine over a fresh SQLite file."""
    settings = StorageSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'threads.db'}")
    engine = create_engine(settings)
    yield engine
    await engine.dispose()


class TestSqlBlobStore:
    """Integration tests for SqlBlobStore."""

    @pytest.mark.asyncio
    async def test_missing_key_reads_none(self, engine):
        """An unknown key reads as absent."""
        store = SqlBlobStore(engine)

        assert await store.get(KEY) is None

    @pytest.mark.asyncio
    async def test_put_replaces_value(self, engine):
        """A second put overwrites the first."""
        store = SqlBlobStore(engine)

        await store.put(KEY, "[]")
        await store.put(KEY, '[{"id": "a"}]')

        assert await store.get(KEY) == '[{"id": "a"}]'

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, engine):
        """Blobs under different keys do not interfere."""
        store = SqlBlobStore(engine)

        await store.put("one", "1")
        await store.put("two", "2")

        assert await store.get("one") == "1"
        assert await store.get("two") == "2"


class TestThreadServiceOverSql:
    """The thread service persisting through the SQL blob store."""

    @pytest.mark.asyncio
    async def test_forest_survives_restart(self, engine):
        """A new service over the same database sees the saved thread."""
        # Arrange
        service = ThreadService(
            forest_repository=BlobForestRepository(SqlBlobStore(engine), KEY),
            settings=ThreadSettings(),
        )
        root = await service.add_root("Hello", "Alice")
        reply = await service.add_reply(root.id, "World", "Bob")
        await service.vote(reply.id, -2)
        await service.close()

        # Act
        restarted = ThreadService(
            forest_repository=BlobForestRepository(SqlBlobStore(engine), KEY),
            settings=ThreadSettings(),
        )
        await restarted.open()

        # Assert
        assert await restarted.count() == 2
        assert restarted.forest[0].id == root.id
        assert restarted.forest[0].author == "Alice"
        assert restarted.forest[0].replies[0].votes == -2
