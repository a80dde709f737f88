"""Collection API: thin routes delegating to CollectionService.

Every route is scoped to the authenticated user; another user's collection
answers 404 exactly like a missing one.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Path, Query, Response

from app.api.v1.dependencies import get_collection_service, get_current_user
from app.application.dtos.user import UserResult
from app.application.use_cases.collections import CollectionService
from app.schemas.collection import (
    AddProductRequest,
    CollectionCreateRequest,
    CollectionResponse,
    MembershipStatusResponse,
)
from app.schemas.product import MAX_ID

router = APIRouter()

CollectionId = Annotated[int, Path(gt=0, le=MAX_ID, description="Collection id")]
ProductId = Annotated[int, Path(gt=0, le=MAX_ID, description="Product id")]


@router.post("", response_model=CollectionResponse, status_code=201)
async def create_collection(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    collection_svc: Annotated[CollectionService, Depends(get_collection_service)],
    body: CollectionCreateRequest | None = None,
):
    """Create a collection owned by the caller. The body (and its name) is optional."""
    name = body.name if body is not None else None
    created = await collection_svc.create_collection(current_user.id, name)
    return CollectionResponse.from_result(created)


@router.get("", response_model=list[CollectionResponse])
async def list_collections(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    collection_svc: Annotated[CollectionService, Depends(get_collection_service)],
):
    """List the caller's collections (without products)."""
    results = await collection_svc.list_collections(current_user.id)
    return [CollectionResponse.from_result(c) for c in results]


@router.get("/{collection_id}", response_model=CollectionResponse)
async def get_collection(
    collection_id: CollectionId,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    collection_svc: Annotated[CollectionService, Depends(get_collection_service)],
    include: Annotated[
        Literal["produkte", "products"] | None,
        Query(description="Set to 'produkte' to embed member products"),
    ] = None,
):
    """Get one of the caller's collections, optionally with its products."""
    found = await collection_svc.get_collection(
        current_user.id, collection_id, include_products=include is not None
    )
    return CollectionResponse.from_result(found)


@router.delete("/{collection_id}", status_code=204)
async def delete_collection(
    collection_id: CollectionId,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    collection_svc: Annotated[CollectionService, Depends(get_collection_service)],
) -> Response:
    """Delete one of the caller's collections; memberships go with it."""
    await collection_svc.delete_collection(current_user.id, collection_id)
    return Response(status_code=204)


@router.post("/{collection_id}/products", response_model=MembershipStatusResponse)
async def add_product_to_collection(
    collection_id: CollectionId,
    body: AddProductRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    collection_svc: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Add a product to the collection. Adding an existing member is a no-op."""
    await collection_svc.add_product(current_user.id, collection_id, body.product_id)
    return MembershipStatusResponse()


@router.delete("/{collection_id}/products/{product_id}", status_code=204)
async def remove_product_from_collection(
    collection_id: CollectionId,
    product_id: ProductId,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    collection_svc: Annotated[CollectionService, Depends(get_collection_service)],
) -> Response:
    """Remove a product from the collection. Removing a non-member is a no-op."""
    await collection_svc.remove_product(current_user.id, collection_id, product_id)
    return Response(status_code=204)
