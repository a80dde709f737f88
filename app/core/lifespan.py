"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the shared HTTP client
used for JWKS fetches, the identity resolver, optional schema creation, and
DB engine dispose. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.security import JwksIdentityResolver
from app.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, shared HTTP client, identity resolver, schema
    (only when DATABASE_AUTO_CREATE is set). Shutdown order: HTTP client
    close, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    # Shared HTTP client for JWKS fetches (connection reuse).
    app.state.http_client = httpx.AsyncClient(timeout=settings.jwks_fetch_timeout_seconds)
    app.state.identity_resolver = JwksIdentityResolver.from_settings(
        settings, app.state.http_client
    )
    logger.info("Identity provider: issuer=%s jwks=%s", settings.oidc_issuer, settings.jwks_url)

    if settings.database_auto_create:
        from app.infrastructure.persistence.database import create_schema

        await create_schema()

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    from app.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
