"""Blob store implementations."""

from threadtree.persistence.blobstore.base import BlobStore
from threadtree.persistence.blobstore.inmemory import InMemoryBlobStore
from threadtree.persistence.blobstore.sql import SqlBlobStore

__all__ = [
    "BlobStore",
    "InMemoryBlobStore",
    "SqlBlobStore",
]
