"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.user import IdentityClaims


# Transaction scope interface
class ITransactionScope(Protocol):
    """Protocol for atomic units of work over one storage session.

    write() commits when the block exits normally and rolls back on any other
    exit; storage failures surface as StorageException. read() only
    translates storage failures.
    """

    def write(self, operation: str, **context: Any) -> AbstractAsyncContextManager[Any]:
        """Open a transaction for a multi-row write."""

    def read(self, operation: str, **context: Any) -> AbstractAsyncContextManager[Any]:
        """Scope a read-only operation."""


# Identity resolver interface
class IIdentityResolver(Protocol):
    """Protocol for verifying a bearer credential against the identity provider."""

    async def resolve(self, token: str) -> IdentityClaims:
        """Return subject id and display name; raise AuthenticationException on failure."""
