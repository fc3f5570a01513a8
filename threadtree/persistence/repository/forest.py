"""Blob-backed forest repository."""

import logfire
from pydantic import TypeAdapter, ValidationError

from threadtree.domain.error import PersistenceUnavailableError
from threadtree.domain.model import Forest
from threadtree.domain.repository import ForestRepository
from threadtree.persistence.blobstore import BlobStore
from threadtree.persistence.error import BlobStoreError
from threadtree.persistence.mappers import (
    CommentRecord,
    forest_to_records,
    records_to_forest,
)

_records_adapter = TypeAdapter(list[CommentRecord])


def dump_forest(forest: Forest) -> str:
    """Serialize a forest to a flat JSON list of comment records."""
    return _records_adapter.dump_json(forest_to_records(forest)).decode("utf-8")


def parse_forest(blob: str) -> Forest:
    """Parse a JSON list of comment records back into a forest.

    Raises:
        ValueError: If the blob is not a valid snapshot (pydantic's
            ValidationError is a ValueError), repeats an id, or orphans a reply
    """
    return records_to_forest(_records_adapter.validate_json(blob))


class BlobForestRepository(ForestRepository):
    """Stores the whole forest as one JSON blob under a fixed key."""

    def __init__(self, blob_store: BlobStore, key: str) -> None:
        """Initialize blob forest repository.

        Args:
            blob_store: Underlying key/value store
            key: Key of the forest snapshot
        """
        self.blob_store = blob_store
        self.key = key

    async def load(self) -> Forest:
        """Load the forest, falling back to an empty one."""
        try:
            blob = await self.blob_store.get(self.key)
        except BlobStoreError as e:
            logfire.warn("Blob store unreadable, starting empty", error=str(e))
            return []

        if blob is None:
            logfire.info("No saved forest, starting empty", key=self.key)
            return []

        try:
            return parse_forest(blob)
        except (ValidationError, ValueError) as e:
            logfire.warn(
                "Saved forest is corrupt, starting empty", key=self.key, error=str(e)
            )
            return []

    async def save(self, forest: Forest) -> None:
        """Replace the saved snapshot."""
        blob = dump_forest(forest)
        try:
            await self.blob_store.put(self.key, blob)
        except BlobStoreError as e:
            raise PersistenceUnavailableError(str(e)) from e
