"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import FilmSeriesKind, ProductCategory
from app.domain.exceptions import (
    AuthenticationException,
    CatalogException,
    IntegrityViolationException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    StorageException,
    ValidationException,
)

__all__ = [
    # Enums
    "FilmSeriesKind",
    "ProductCategory",
    # Exceptions
    "AuthenticationException",
    "CatalogException",
    "IntegrityViolationException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "StorageException",
    "ValidationException",
]
