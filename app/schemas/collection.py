"""Collection API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.application.dtos.collection import CollectionResult
from app.schemas.product import MAX_ID, ProductSummaryResponse


class CollectionCreateRequest(BaseModel):
    """Request body for creating a collection. The name is optional."""

    name: str | None = Field(default=None, max_length=255)


class AddProductRequest(BaseModel):
    """Request body for adding a product to a collection."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="produktId", gt=0, le=MAX_ID)


class CollectionResponse(BaseModel):
    """Collection response. produkte is null unless members were requested."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    owner_user_id: str = Field(..., alias="webuserId")
    name: str | None = None
    products: list[ProductSummaryResponse] | None = Field(default=None, alias="produkte")

    @classmethod
    def from_result(cls, result: CollectionResult) -> "CollectionResponse":
        products = None
        if result.products is not None:
            products = [
                ProductSummaryResponse(
                    id=p.id,
                    name=p.name,
                    sequence_number=p.sequence_number,
                    category=p.category,
                )
                for p in result.products
            ]
        return cls(
            id=result.id,
            owner_user_id=result.owner_user_id,
            name=result.name,
            products=products,
        )


class MembershipStatusResponse(BaseModel):
    """Response for adding a product to a collection."""

    status: str = Field(default="Product added to collection")
