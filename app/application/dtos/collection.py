"""DTOs for collection use cases (no dependency on ORM)."""

from dataclasses import dataclass

from app.application.dtos.product import ProductSummary


@dataclass(frozen=True)
class CollectionResult:
    """Collection read-model.

    products is None when members were not requested, otherwise the member
    products ordered by id.
    """

    id: int
    owner_user_id: str
    name: str | None
    products: tuple[ProductSummary, ...] | None = None
