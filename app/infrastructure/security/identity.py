"""Bearer token verification against the identity provider's JWKS.

Uses python-jose for signature and claim checks and httpx to fetch the key
set. The key set is cached for jwks_cache_ttl_seconds and refetched early
when a token names a key id that is not in the cache (key rotation).
"""

import asyncio
import logging
import time
from typing import Any

import httpx
from jose import JWTError, jwt

from app.application.dtos.user import IdentityClaims
from app.core.config import Settings
from app.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired authentication token"


def display_name_from_claims(claims: dict[str, Any]) -> str:
    """Pick a display name: preferred_username, else the local part of email, else ''."""
    preferred = claims.get("preferred_username")
    if isinstance(preferred, str) and preferred:
        return preferred
    email = claims.get("email")
    if isinstance(email, str) and email:
        return email.split("@", 1)[0]
    return ""


class JwksIdentityResolver:
    """IIdentityResolver backed by an OpenID Connect issuer (e.g. a Keycloak realm)."""

    def __init__(
        self,
        jwks_url: str,
        issuer: str,
        *,
        audience: str | None = None,
        algorithms: list[str] | None = None,
        http_client: httpx.AsyncClient | None = None,
        cache_ttl_seconds: int = 300,
        fetch_timeout_seconds: float = 10.0,
    ) -> None:
        self._jwks_url = jwks_url
        self._issuer = issuer
        self._audience = audience
        self._algorithms = algorithms or ["RS256"]
        self._http_client = http_client
        self._cache_ttl = cache_ttl_seconds
        self._fetch_timeout = fetch_timeout_seconds
        self._jwks: dict[str, Any] | None = None
        self._fetched_at = 0.0
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.AsyncClient | None = None
    ) -> "JwksIdentityResolver":
        return cls(
            settings.jwks_url,
            settings.oidc_issuer,
            audience=settings.oidc_audience,
            algorithms=settings.oidc_algorithm_list,
            http_client=http_client,
            cache_ttl_seconds=settings.jwks_cache_ttl_seconds,
            fetch_timeout_seconds=settings.jwks_fetch_timeout_seconds,
        )

    async def resolve(self, token: str) -> IdentityClaims:
        """Verify token and return its subject and display name.

        Enforces signature, exp, iss, sub (and aud when configured).

        Raises:
            AuthenticationException: If the token is malformed, invalid,
                expired, or the key set cannot be fetched.
        """
        try:
            header = jwt.get_unverified_header(token)
        except JWTError as e:
            logger.info("Rejected bearer token: %s", e)
            raise AuthenticationException(INVALID_TOKEN_MESSAGE) from e

        jwks = await self._get_jwks()
        kid = header.get("kid")
        if kid and not any(k.get("kid") == kid for k in jwks.get("keys", [])):
            jwks = await self._get_jwks(force=True)

        try:
            claims = jwt.decode(
                token,
                jwks,
                algorithms=self._algorithms,
                audience=self._audience,
                issuer=self._issuer,
                options={
                    "verify_aud": self._audience is not None,
                    "require_exp": True,
                    "require_sub": True,
                },
            )
        except JWTError as e:
            logger.info("Rejected bearer token: %s", e)
            raise AuthenticationException(INVALID_TOKEN_MESSAGE) from e

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise AuthenticationException("Token missing valid user identifier")
        return IdentityClaims(
            subject_id=subject, display_name=display_name_from_claims(claims)
        )

    async def _get_jwks(self, *, force: bool = False) -> dict[str, Any]:
        async with self._lock:
            fresh = time.monotonic() - self._fetched_at < self._cache_ttl
            if self._jwks is not None and fresh and not force:
                return self._jwks
            try:
                if self._http_client is not None:
                    response = await self._http_client.get(
                        self._jwks_url, timeout=self._fetch_timeout
                    )
                else:
                    async with httpx.AsyncClient(timeout=self._fetch_timeout) as client:
                        response = await client.get(self._jwks_url)
                response.raise_for_status()
                jwks = response.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.error("Failed to fetch JWKS from %s: %s", self._jwks_url, e)
                if self._jwks is not None:
                    return self._jwks
                raise AuthenticationException("Identity provider unavailable") from e
            if not isinstance(jwks, dict) or not isinstance(jwks.get("keys"), list):
                logger.error("JWKS from %s has no 'keys' list", self._jwks_url)
                raise AuthenticationException("Identity provider unavailable")
            self._jwks = jwks
            self._fetched_at = time.monotonic()
            logger.debug("Fetched %d signing keys from %s", len(jwks["keys"]), self._jwks_url)
            return jwks
