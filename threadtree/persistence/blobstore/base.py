"""Blob store interface."""

from abc import ABC, abstractmethod
from typing import Optional


class BlobStore(ABC):
    """Key/value store of text blobs.

    A put replaces the whole value for its key in one step.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read the blob stored under ``key``.

        Returns:
            The blob, or None if the key is absent

        Raises:
            BlobStoreError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous blob.

        Raises:
            BlobStoreError: If the store cannot be written
        """
        pass
