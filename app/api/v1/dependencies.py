"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the transaction scope, and
application services. Services are built from infrastructure implementations
here; routes depend only on these dependencies, not on infra directly.

FastAPI caches a dependency per request, so every repository and service in
one request shares the same AsyncSession and transaction scope.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.application.interfaces.services import IIdentityResolver
from app.application.services.user_service import UserSyncService
from app.application.use_cases.collections import CollectionService
from app.application.use_cases.products import ProductService
from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import (
    CollectionRepository,
    ProductRepository,
    UserRepository,
)
from app.infrastructure.persistence.transaction import SqlTransactionScope
from app.infrastructure.security import JwksIdentityResolver

logger = logging.getLogger(__name__)


async def get_tx(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SqlTransactionScope:
    """Transaction scope over the request's session."""
    return SqlTransactionScope(db)


async def get_product_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductRepository:
    return ProductRepository(db)


async def get_collection_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CollectionRepository:
    return CollectionRepository(db)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return UserRepository(db)


async def get_product_service(
    product_repo: Annotated[ProductRepository, Depends(get_product_repo)],
    tx: Annotated[SqlTransactionScope, Depends(get_tx)],
) -> ProductService:
    """Build ProductService (composition root)."""
    return ProductService(product_repo, tx)


async def get_collection_service(
    collection_repo: Annotated[CollectionRepository, Depends(get_collection_repo)],
    product_repo: Annotated[ProductRepository, Depends(get_product_repo)],
    tx: Annotated[SqlTransactionScope, Depends(get_tx)],
) -> CollectionService:
    """Build CollectionService (composition root)."""
    return CollectionService(collection_repo, product_repo, tx)


async def get_user_sync_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    tx: Annotated[SqlTransactionScope, Depends(get_tx)],
) -> UserSyncService:
    """Build UserSyncService (composition root)."""
    return UserSyncService(user_repo, tx)


def get_identity_resolver(request: Request) -> IIdentityResolver:
    """Identity resolver from app state (built in lifespan; lazily if lifespan did not run)."""
    resolver = getattr(request.app.state, "identity_resolver", None)
    if resolver is None:
        http_client = getattr(request.app.state, "http_client", None)
        resolver = JwksIdentityResolver.from_settings(get_settings(), http_client)
        request.app.state.identity_resolver = resolver
    return resolver


_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    resolver: Annotated[IIdentityResolver, Depends(get_identity_resolver)],
    user_sync: Annotated[UserSyncService, Depends(get_user_sync_service)],
) -> UserResult:
    """Verify the bearer token and upsert the caller into the user registry.

    Raises 401 when the header is missing or the token is rejected. The
    upsert runs before the route handler, so every authenticated request
    refreshes the stored display name.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        identity = await resolver.resolve(credentials.credentials)
    except AuthenticationException as e:
        raise HTTPException(
            status_code=401,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    return await user_sync.sync_user(identity.subject_id, identity.display_name)
