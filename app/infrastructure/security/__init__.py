"""Security: bearer token verification against the identity provider."""

from app.infrastructure.security.identity import (
    JwksIdentityResolver,
    display_name_from_claims,
)

__all__ = [
    "JwksIdentityResolver",
    "display_name_from_claims",
]
