"""Domain exceptions for the media catalog.

Defines domain-level exceptions that represent business rule violations and
storage failures. These exceptions are independent of the web framework;
the presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CatalogException(Exception):
    """Base exception for all catalog application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CatalogException):
    """Raised when client-supplied data violates a field contract.

    Covers missing required fields, invalid enumerated values and references
    to related entities that do not exist.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(CatalogException):
    """Raised when the bearer credential is missing or cannot be verified."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(CatalogException):
    """Raised when a resource is absent or not owned by the caller.

    Both cases share this exception so that existence is never leaked
    across ownership boundaries.
    """

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'Book', 'Collection').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class StorageException(CatalogException):
    """Raised when the storage engine or a transaction fails.

    The message is generic; the underlying error is logged where it is caught
    and chained as __cause__.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            "Storage operation failed",
            "STORAGE_ERROR",
            {"operation": operation},
        )


class IntegrityViolationException(CatalogException):
    """Raised when a product row exists without its category detail row.

    Signals an earlier atomicity violation; never downgraded to not-found.
    """

    def __init__(self, category: str, product_id: int) -> None:
        super().__init__(
            "Catalog data is inconsistent",
            "INTEGRITY_ERROR",
            {"category": category, "product_id": str(product_id)},
        )


class SqlNotConfiguredException(CatalogException):
    """Raised when an operation requires the database but no engine is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
