"""
Catalog error taxonomy.

Repositories raise these; `core.error_handlers` turns them into HTTP
responses using the `HTTP_STATUS` table below. Status codes are looked up by
error type, never derived from message text.
"""

from __future__ import annotations

from fastapi import status


class CatalogError(Exception):
    """Base for every failure the catalog surfaces to clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    pass


class NotFound(CatalogError):
    pass


class ConstraintViolation(CatalogError):
    pass


class StorageError(CatalogError):
    pass


HTTP_STATUS: dict[type[CatalogError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    ConstraintViolation: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_status_for(exc: CatalogError) -> int:
    for cls in type(exc).__mro__:
        if cls in HTTP_STATUS:
            return HTTP_STATUS[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR
