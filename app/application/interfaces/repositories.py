"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.collection import CollectionResult
    from app.application.dtos.product import ProductDetails, ProductResult
    from app.application.dtos.user import UserResult
    from app.domain.enums import ProductCategory


class ProductRow(Protocol):
    """Shared product fields as returned by IProductRepository.get and list_by_category."""

    id: int
    name: str
    sequence_number: int | None
    category: str


class IProductRepository(Protocol):
    """Protocol for the product store (base row + category detail row)."""

    async def insert(
        self,
        category: ProductCategory,
        name: str,
        sequence_number: int | None,
        details: ProductDetails,
    ) -> ProductResult:
        """Insert product and detail rows (flush only; caller owns the transaction)."""

    async def get(
        self, category: ProductCategory, product_id: int
    ) -> tuple[ProductRow, ProductDetails | None] | None:
        """Return (product, details) for id+category; None when no product row matches."""

    async def update(
        self,
        category: ProductCategory,
        product_id: int,
        name: str,
        sequence_number: int | None,
        details: ProductDetails,
    ) -> ProductResult | None:
        """Overwrite shared and category fields; None when no product row matches."""

    async def delete(self, category: ProductCategory, product_id: int) -> bool:
        """Delete the product row (detail row cascades); True if a row matched."""

    async def list_by_category(
        self, category: ProductCategory
    ) -> list[tuple[ProductRow, ProductDetails | None]]:
        """Return all (product, details) pairs of a category ordered by id."""

    async def exists(self, product_id: int) -> bool:
        """Return True if a product with this id exists (any category)."""


class ICollectionRepository(Protocol):
    """Protocol for the collection store. Every query is filtered by owner."""

    async def create(self, owner_user_id: str, name: str | None) -> CollectionResult:
        """Insert a collection for owner."""

    async def list_for_owner(self, owner_user_id: str) -> list[CollectionResult]:
        """Return owner's collections ordered by name (nulls last), then id."""

    async def get_for_owner(
        self, owner_user_id: str, collection_id: int, *, include_products: bool = False
    ) -> CollectionResult | None:
        """Return collection if it exists and belongs to owner; else None."""

    async def delete_for_owner(self, owner_user_id: str, collection_id: int) -> bool:
        """Delete collection filtered by id and owner; True if a row matched."""

    async def add_product(self, collection_id: int, product_id: int) -> bool:
        """Insert membership pair; False if it was already present."""

    async def remove_product(self, collection_id: int, product_id: int) -> bool:
        """Delete membership pair; False if it was absent."""


class IUserRepository(Protocol):
    """Protocol for the local user projection."""

    async def upsert(self, user_id: str, name: str | None) -> UserResult:
        """Insert or overwrite name for user_id (single statement)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by external subject id."""
