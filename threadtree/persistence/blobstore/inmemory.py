"""In-memory blob store for testing."""

from typing import Optional

from threadtree.persistence.blobstore.base import BlobStore
from threadtree.persistence.error import BlobStoreError


class InMemoryBlobStore(BlobStore):
    """In-memory implementation of BlobStore for testing.

    Counts writes, and can be switched off to simulate an unavailable store.
    """

    def __init__(self) -> None:
        self._blobs: dict[str, str] = {}
        self.writes = 0
        self.available = True

    async def get(self, key: str) -> Optional[str]:
        """Read a blob."""
        self._check_available()
        return self._blobs.get(key)

    async def put(self, key: str, value: str) -> None:
        """Replace a blob."""
        self._check_available()
        self._blobs[key] = value
        self.writes += 1

    def _check_available(self) -> None:
        if not self.available:
            raise BlobStoreError("In-memory blob store is unavailable")
