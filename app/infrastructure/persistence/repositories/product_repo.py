"""Product repository: base product row plus its category detail row.

Every method works on the (product, detail) pair for one category. Rows are
matched on id AND category, so an id of another category behaves as absent.
insert and update return application DTOs; get and list_by_category return
(ORM product row, details DTO) pairs so callers can tell a missing detail row.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, fields
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.product import (
    DETAILS_BY_CATEGORY,
    ProductDetails,
    ProductResult,
)
from app.domain.enums import ProductCategory
from app.domain.exceptions import IntegrityViolationException
from app.infrastructure.persistence.models.product import (
    Book,
    FilmSeries,
    Game,
    Manga,
    Product,
)
from app.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

DETAIL_MODELS: dict[ProductCategory, type[Book | Manga | Game | FilmSeries]] = {
    ProductCategory.BOOK: Book,
    ProductCategory.MANGA: Manga,
    ProductCategory.GAME: Game,
    ProductCategory.FILM_SERIES: FilmSeries,
}


def _details_from_row(category: ProductCategory, row: Any) -> ProductDetails:
    """Build the category DTO from an ORM detail row."""
    details_cls = DETAILS_BY_CATEGORY[category]
    return details_cls(**{f.name: getattr(row, f.name) for f in fields(details_cls)})


def _to_result(
    product: Product, category: ProductCategory, details: ProductDetails
) -> ProductResult:
    return ProductResult(
        id=product.id,
        name=product.name,
        sequence_number=product.sequence_number,
        category=category,
        details=details,
    )


class ProductRepository(BaseRepository[Product]):
    """Product store for all four categories. Flushes only; callers own the transaction."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Product)

    def _pair_query(self, category: ProductCategory) -> Any:
        detail_model = DETAIL_MODELS[category]
        return (
            select(Product, detail_model)
            .outerjoin(detail_model, detail_model.product_id == Product.id)
            .where(Product.category == category.value)
        )

    async def insert(
        self,
        category: ProductCategory,
        name: str,
        sequence_number: int | None,
        details: ProductDetails,
    ) -> ProductResult:
        """Insert product row, then the detail row keyed by the generated id."""
        product = await self.create(
            Product(name=name, sequence_number=sequence_number, category=category.value)
        )
        detail_row = DETAIL_MODELS[category](product_id=product.id, **asdict(details))
        self.db.add(detail_row)
        await self.db.flush()
        return _to_result(product, category, _details_from_row(category, detail_row))

    async def get(
        self, category: ProductCategory, product_id: int
    ) -> tuple[Product, ProductDetails | None] | None:
        """Return (product, details) or None when no product of this category has the id.

        details is None when the product row exists without its detail row.
        """
        result = await self.db.execute(
            self._pair_query(category).where(Product.id == product_id)
        )
        row = result.first()
        if row is None:
            return None
        product, detail_row = row
        details = _details_from_row(category, detail_row) if detail_row is not None else None
        return product, details

    async def update(
        self,
        category: ProductCategory,
        product_id: int,
        name: str,
        sequence_number: int | None,
        details: ProductDetails,
    ) -> ProductResult | None:
        """Overwrite shared fields on product and all category fields on the detail row.

        Returns None when no product of this category has the id. Raises
        IntegrityViolationException when the detail row is missing.
        """
        result = await self.db.execute(
            select(Product).where(
                Product.id == product_id, Product.category == category.value
            )
        )
        product = result.scalar_one_or_none()
        if product is None:
            return None
        product.name = name
        product.sequence_number = sequence_number

        detail_row = await self.db.get(DETAIL_MODELS[category], product_id)
        if detail_row is None:
            logger.error(
                "%s %s has no detail row; refusing update", category.value, product_id
            )
            raise IntegrityViolationException(category.value, product_id)
        for key, value in asdict(details).items():
            setattr(detail_row, key, value)
        await self.db.flush()
        return _to_result(product, category, _details_from_row(category, detail_row))

    async def delete(self, category: ProductCategory, product_id: int) -> bool:
        """Delete the product row; the detail and membership rows go by ON DELETE CASCADE."""
        result = await self.db.execute(
            delete(Product)
            .where(Product.id == product_id, Product.category == category.value)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def list_by_category(
        self, category: ProductCategory
    ) -> list[tuple[Product, ProductDetails | None]]:
        """Return all (product, details) pairs of the category ordered by id."""
        result = await self.db.execute(self._pair_query(category).order_by(Product.id))
        return [
            (
                product,
                _details_from_row(category, detail_row) if detail_row is not None else None,
            )
            for product, detail_row in result.all()
        ]

    async def exists(self, product_id: int) -> bool:
        result = await self.db.execute(select(Product.id).where(Product.id == product_id))
        return result.scalar_one_or_none() is not None
