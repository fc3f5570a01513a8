"""SQL-backed blob store."""

from typing import Optional

import logfire
from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from threadtree.domain.model import utcnow
from threadtree.persistence.blobstore.base import BlobStore
from threadtree.persistence.error import BlobStoreError
from threadtree.persistence.tables import blobs_table, metadata


class SqlBlobStore(BlobStore):
    """Blob store keeping one row per key in the ``blobs`` table.

    The table is created on first use. A put deletes and inserts the row in a
    single transaction, so readers see either the old blob or the new one.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        """Initialize SQL blob store.

        Args:
            engine: Async database engine
        """
        self.engine = engine
        self._schema_ready = False

    async def get(self, key: str) -> Optional[str]:
        """Read a blob."""
        try:
            await self._ensure_schema()
            async with self.engine.connect() as conn:
                result = await conn.execute(
                    select(blobs_table.c.value).where(blobs_table.c.key == key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise BlobStoreError(f"Failed to read blob {key}: {e}") from e

    async def put(self, key: str, value: str) -> None:
        """Replace a blob."""
        try:
            await self._ensure_schema()
            async with self.engine.begin() as conn:
                await conn.execute(delete(blobs_table).where(blobs_table.c.key == key))
                await conn.execute(
                    insert(blobs_table).values(
                        key=key, value=value, updated_at=utcnow()
                    )
                )
        except SQLAlchemyError as e:
            raise BlobStoreError(f"Failed to write blob {key}: {e}") from e
        logfire.debug("Blob written", key=key, size=len(value))

    async def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        self._schema_ready = True
        logfire.info("Blob store schema ready")
