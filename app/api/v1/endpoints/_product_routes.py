"""Route factory for the per-category product CRUD endpoints.

Every category exposes the same five routes; only the request/response
models and the category value differ.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from app.api.v1.dependencies import get_current_user, get_product_service
from app.application.dtos.user import UserResult
from app.application.use_cases.products import ProductService
from app.domain.enums import ProductCategory
from app.schemas.product import MAX_ID, ProductFields

ProductId = Annotated[int, Path(gt=0, le=MAX_ID, description="Product id")]


def build_product_router(
    category: ProductCategory,
    request_model: type[ProductFields],
    response_model: type[ProductFields],
) -> APIRouter:
    """Return a router with POST, GET (list), GET/PUT/DELETE by id for one category."""
    router = APIRouter()
    label = category.value

    @router.post("", response_model=response_model, status_code=201)
    async def create_product(
        body: request_model,  # type: ignore[valid-type]
        product_svc: Annotated[ProductService, Depends(get_product_service)],
        _: Annotated[UserResult, Depends(get_current_user)],
    ):
        created = await product_svc.create(
            category, body.name, body.sequence_number, body.to_details()
        )
        return response_model.from_result(created)

    @router.get("", response_model=list[response_model])  # type: ignore[valid-type]
    async def list_products(
        product_svc: Annotated[ProductService, Depends(get_product_service)],
        _: Annotated[UserResult, Depends(get_current_user)],
    ):
        results = await product_svc.list_products(category)
        return [response_model.from_result(r) for r in results]

    @router.get("/{product_id}", response_model=response_model)
    async def get_product(
        product_id: ProductId,
        product_svc: Annotated[ProductService, Depends(get_product_service)],
        _: Annotated[UserResult, Depends(get_current_user)],
    ):
        found = await product_svc.get(category, product_id)
        return response_model.from_result(found)

    @router.put("/{product_id}", response_model=response_model)
    async def update_product(
        product_id: ProductId,
        body: request_model,  # type: ignore[valid-type]
        product_svc: Annotated[ProductService, Depends(get_product_service)],
        _: Annotated[UserResult, Depends(get_current_user)],
    ):
        updated = await product_svc.update(
            category, product_id, body.name, body.sequence_number, body.to_details()
        )
        return response_model.from_result(updated)

    @router.delete("/{product_id}", status_code=204)
    async def delete_product(
        product_id: ProductId,
        product_svc: Annotated[ProductService, Depends(get_product_service)],
        _: Annotated[UserResult, Depends(get_current_user)],
    ) -> Response:
        """Idempotent: deleting an absent id also answers 204."""
        await product_svc.delete(category, product_id, missing_ok=True)
        return Response(status_code=204)

    create_product.__doc__ = f"Create a {label} (product and detail rows in one transaction)."
    list_products.__doc__ = f"List all {label} products."
    get_product.__doc__ = f"Get a {label} by id."
    update_product.__doc__ = f"Replace a {label}'s fields (omitted optional fields become null)."
    return router
