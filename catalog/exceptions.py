"""
Catalog domain errors.

Raised by the service layer when a caller-supplied precondition fails.
Storage failures are left as SQLAlchemy's own exceptions; main.py turns
both families into the standard error response.
"""
from fastapi import status


class CatalogError(Exception):
    """Base class for errors the catalog raises itself."""
    status_code = status.HTTP_400_BAD_REQUEST
    code = "CATALOG_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(CatalogError):
    """Caller data fails a precondition (e.g. no attribute name to resolve by)."""
    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_INPUT"


class NotFoundError(CatalogError):
    """A referenced product, sku, attribute or attribute value does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
