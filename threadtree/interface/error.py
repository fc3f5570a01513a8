"""Mapping of domain errors to HTTP errors."""

import logfire
from fastapi import HTTPException, status

from threadtree.domain.error import (
    DepthExceededError,
    DomainError,
    EmptyTextError,
    NotFoundError,
    PersistenceUnavailableError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (EmptyTextError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DepthExceededError, status.HTTP_409_CONFLICT),
    (PersistenceUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into the matching HTTP error.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the error message as detail
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            break
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    if status_code >= 500:
        logfire.error("Request failed", error=str(error))
    else:
        logfire.warn("Request rejected", error=str(error), status_code=status_code)
    return HTTPException(status_code=status_code, detail=str(error))
