"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class BlobStoreError(PersistenceError):
    """Blob store read or write failed."""

    pass
