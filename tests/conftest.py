"""Pytest configuration and fixtures for the media catalog.

Every test runs against a fresh in-memory SQLite database (aiosqlite, foreign
keys on) built from the ORM metadata. HTTP tests use app.main:app with get_db
and the identity resolver overridden, so no Postgres or identity provider is
needed. Bearer tokens of the form "token-<name>" authenticate as user
"<name>-id" with display name "<name>".
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["OIDC_ISSUER"] = "https://auth.test/realms/catalog"

from collections.abc import AsyncIterator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.api.v1.dependencies import get_identity_resolver  # noqa: E402
from app.application.dtos.user import IdentityClaims  # noqa: E402
from app.domain.exceptions import AuthenticationException  # noqa: E402
from app.infrastructure.persistence import models  # noqa: E402, F401
from app.infrastructure.persistence.database import (  # noqa: E402
    Base,
    build_session_factory,
    configure_engine,
    get_db,
)
from app.main import app  # noqa: E402

TOKEN_PREFIX = "token-"


class FakeIdentityResolver:
    """Resolves "token-<name>" to subject "<name>-id"; rejects anything else."""

    async def resolve(self, token: str) -> IdentityClaims:
        if not token.startswith(TOKEN_PREFIX) or token == TOKEN_PREFIX:
            raise AuthenticationException("Invalid or expired authentication token")
        name = token[len(TOKEN_PREFIX):]
        return IdentityClaims(subject_id=f"{name}-id", display_name=name)


def bearer(name: str) -> dict[str, str]:
    """Authorization header for the fake resolver."""
    return {"Authorization": f"Bearer {TOKEN_PREFIX}{name}"}


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database per test (StaticPool keeps the single connection alive)."""
    test_engine = configure_engine(
        create_async_engine(
            "sqlite+aiosqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Database session for repository/service integration tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), one session per request."""

    async def _get_test_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    resolver = FakeIdentityResolver()
    app.dependency_overrides[get_db] = _get_test_db
    app.dependency_overrides[get_identity_resolver] = lambda: resolver
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def alice() -> dict[str, str]:
    return bearer("alice")


@pytest.fixture
def bob() -> dict[str, str]:
    return bearer("bob")
