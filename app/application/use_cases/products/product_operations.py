"""Product operations: create, get, update, delete, list for one category at a time.

A product is written as one unit: the base row and its category detail row
are inserted, updated and deleted inside a single transaction. Validation
runs before the transaction opens.
"""

from __future__ import annotations

import logging

from app.application.dtos.product import (
    DETAILS_BY_CATEGORY,
    ProductDetails,
    ProductResult,
)
from app.application.interfaces.repositories import IProductRepository
from app.application.interfaces.services import ITransactionScope
from app.application.services.product_validator import normalize_name, validate_details
from app.domain.enums import ProductCategory
from app.domain.exceptions import IntegrityViolationException, ResourceNotFoundException

logger = logging.getLogger(__name__)


class ProductService:
    """CRUD over (product, detail) pairs. Category is fixed per call and never rewritten."""

    def __init__(self, product_repo: IProductRepository, tx: ITransactionScope) -> None:
        self.product_repo = product_repo
        self.tx = tx

    async def create(
        self,
        category: ProductCategory,
        name: str | None,
        sequence_number: int | None,
        details: ProductDetails,
    ) -> ProductResult:
        """Insert product and detail rows atomically. Returns the merged view."""
        name = normalize_name(name)
        validate_details(category, details)
        async with self.tx.write(f"{category.value}.create"):
            created = await self.product_repo.insert(
                category, name, sequence_number, details
            )
        logger.info("Created %s %s", category.value, created.id)
        return created

    async def get(self, category: ProductCategory, product_id: int) -> ProductResult:
        """Return the product of this category.

        Raises ResourceNotFoundException when no product of this category has
        the id, IntegrityViolationException when its detail row is missing.
        """
        async with self.tx.read(f"{category.value}.get", product_id=product_id):
            found = await self.product_repo.get(category, product_id)
        if found is None:
            raise ResourceNotFoundException(category.value, product_id)
        product, details = found
        if details is None:
            logger.error(
                "Integrity violation: %s %s exists without its detail row",
                category.value,
                product_id,
            )
            raise IntegrityViolationException(category.value, product_id)
        return ProductResult(
            id=product.id,
            name=product.name,
            sequence_number=product.sequence_number,
            category=category,
            details=details,
        )

    async def update(
        self,
        category: ProductCategory,
        product_id: int,
        name: str | None,
        sequence_number: int | None,
        details: ProductDetails,
    ) -> ProductResult:
        """Overwrite shared and category fields in one transaction.

        Optional fields omitted by the caller are stored as null (full replacement).
        """
        name = normalize_name(name)
        validate_details(category, details)
        async with self.tx.write(f"{category.value}.update", product_id=product_id):
            updated = await self.product_repo.update(
                category, product_id, name, sequence_number, details
            )
            if updated is None:
                raise ResourceNotFoundException(category.value, product_id)
        return updated

    async def delete(
        self, category: ProductCategory, product_id: int, *, missing_ok: bool = False
    ) -> bool:
        """Delete the product (detail and membership rows cascade).

        Returns True if a row was deleted. When nothing matched, raises
        ResourceNotFoundException unless missing_ok is set.
        """
        async with self.tx.write(f"{category.value}.delete", product_id=product_id):
            deleted = await self.product_repo.delete(category, product_id)
        if not deleted:
            if not missing_ok:
                raise ResourceNotFoundException(category.value, product_id)
            logger.info("%s %s already absent; delete is a no-op", category.value, product_id)
        return deleted

    async def list_products(self, category: ProductCategory) -> list[ProductResult]:
        """Return every product of the category.

        A product without its detail row is logged and returned with empty
        category fields instead of failing the listing.
        """
        async with self.tx.read(f"{category.value}.list"):
            rows = await self.product_repo.list_by_category(category)
        results: list[ProductResult] = []
        for product, details in rows:
            if details is None:
                logger.warning(
                    "%s %s has no detail row; listing it with empty fields",
                    category.value,
                    product.id,
                )
                details = DETAILS_BY_CATEGORY[category]()
            results.append(
                ProductResult(
                    id=product.id,
                    name=product.name,
                    sequence_number=product.sequence_number,
                    category=category,
                    details=details,
                )
            )
        return results
