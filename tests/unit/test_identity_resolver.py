"""JwksIdentityResolver: token verification against a JWKS served by httpx.MockTransport.

Tokens are HS256-signed with an 'oct' JWK so no RSA key generation is needed;
the resolver treats every JWK the same way.
"""

import time

import httpx
import pytest
from jose import jwt
from jose.utils import base64url_encode

from app.domain.exceptions import AuthenticationException
from app.infrastructure.security import JwksIdentityResolver, display_name_from_claims

ISSUER = "https://auth.test/realms/catalog"
JWKS_URL = f"{ISSUER}/protocol/openid-connect/certs"
SECRET = "catalog-test-signing-secret-0123456789"


def _oct_jwk(secret: str, kid: str) -> dict:
    return {
        "kty": "oct",
        "kid": kid,
        "alg": "HS256",
        "k": base64url_encode(secret.encode()).decode(),
    }


def _token(claims: dict | None = None, *, secret: str = SECRET, kid: str = "k1", **overrides) -> str:
    now = int(time.time())
    payload = {
        "sub": "user-1",
        "iss": ISSUER,
        "iat": now,
        "exp": now + 300,
        "preferred_username": "alice",
    }
    payload.update(claims or {})
    payload.update(overrides)
    payload = {k: v for k, v in payload.items() if v is not None}
    return jwt.encode(payload, secret, algorithm="HS256", headers={"kid": kid})


class JwksServer:
    """MockTransport handler serving a mutable key set and counting fetches."""

    def __init__(self, keys: list[dict], status_code: int = 200) -> None:
        self.keys = keys
        self.status_code = status_code
        self.fetches = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.fetches += 1
        assert str(request.url) == JWKS_URL
        return httpx.Response(self.status_code, json={"keys": self.keys})


def _resolver(server: JwksServer, **kwargs) -> JwksIdentityResolver:
    client = httpx.AsyncClient(transport=httpx.MockTransport(server))
    return JwksIdentityResolver(
        JWKS_URL, ISSUER, algorithms=["HS256"], http_client=client, **kwargs
    )


async def test_valid_token_resolves_subject_and_display_name() -> None:
    resolver = _resolver(JwksServer([_oct_jwk(SECRET, "k1")]))

    identity = await resolver.resolve(_token())

    assert identity.subject_id == "user-1"
    assert identity.display_name == "alice"


async def test_display_name_falls_back_to_email_local_part() -> None:
    resolver = _resolver(JwksServer([_oct_jwk(SECRET, "k1")]))

    identity = await resolver.resolve(
        _token(preferred_username=None, email="bob@example.org")
    )

    assert identity.display_name == "bob"


async def test_wrong_issuer_is_rejected() -> None:
    resolver = _resolver(JwksServer([_oct_jwk(SECRET, "k1")]))

    with pytest.raises(AuthenticationException):
        await resolver.resolve(_token(iss="https://evil.test/realms/catalog"))


async def test_missing_subject_is_rejected() -> None:
    resolver = _resolver(JwksServer([_oct_jwk(SECRET, "k1")]))

    with pytest.raises(AuthenticationException):
        await resolver.resolve(_token(sub=None))


async def test_bad_signature_is_rejected() -> None:
    resolver = _resolver(JwksServer([_oct_jwk(SECRET, "k1")]))

    with pytest.raises(AuthenticationException):
        await resolver.resolve(_token(secret="some-other-secret-9876543210"))


async def test_expired_token_is_rejected() -> None:
    resolver = _resolver(JwksServer([_oct_jwk(SECRET, "k1")]))
    past = int(time.time()) - 3600

    with pytest.raises(AuthenticationException):
        await resolver.resolve(_token(iat=past - 60, exp=past))


async def test_malformed_token_is_rejected() -> None:
    resolver = _resolver(JwksServer([_oct_jwk(SECRET, "k1")]))

    with pytest.raises(AuthenticationException):
        await resolver.resolve("not-a-jwt")


async def test_audience_is_enforced_when_configured() -> None:
    resolver = _resolver(JwksServer([_oct_jwk(SECRET, "k1")]), audience="catalog-api")

    with pytest.raises(AuthenticationException):
        await resolver.resolve(_token(aud="other-api"))
    identity = await resolver.resolve(_token(aud="catalog-api"))
    assert identity.subject_id == "user-1"


async def test_key_set_is_cached() -> None:
    server = JwksServer([_oct_jwk(SECRET, "k1")])
    resolver = _resolver(server)

    await resolver.resolve(_token())
    await resolver.resolve(_token())

    assert server.fetches == 1


async def test_unknown_key_id_triggers_refetch() -> None:
    """Key rotation: a token naming an unseen kid forces one refetch."""
    rotated = "rotated-signing-secret-abcdefghijkl"
    server = JwksServer([_oct_jwk(SECRET, "k1")])
    resolver = _resolver(server)
    await resolver.resolve(_token())

    server.keys = [_oct_jwk(rotated, "k2")]
    identity = await resolver.resolve(_token(secret=rotated, kid="k2"))

    assert identity.subject_id == "user-1"
    assert server.fetches == 2


async def test_unreachable_identity_provider_is_authentication_failure() -> None:
    resolver = _resolver(JwksServer([], status_code=503))

    with pytest.raises(AuthenticationException) as exc_info:
        await resolver.resolve(_token())
    assert exc_info.value.message == "Identity provider unavailable"


@pytest.mark.parametrize(
    ("claims", "expected"),
    [
        ({"preferred_username": "alice", "email": "a@example.org"}, "alice"),
        ({"email": "carol@example.org"}, "carol"),
        ({"preferred_username": ""}, ""),
        ({}, ""),
    ],
)
def test_display_name_from_claims(claims, expected) -> None:
    assert display_name_from_claims(claims) == expected
