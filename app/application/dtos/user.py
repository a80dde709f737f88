"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of sync_user). id is the external subject id."""

    id: str
    name: str | None


@dataclass(frozen=True)
class IdentityClaims:
    """Verified identity from the identity provider.

    display_name may be empty; the user registry stores that as null.
    """

    subject_id: str
    display_name: str
