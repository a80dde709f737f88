"""Collection repository. Owner-scoped; interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.dtos.collection import CollectionResult
from app.application.dtos.product import ProductSummary
from app.infrastructure.persistence.models.collection import (
    Collection,
    CollectionProduct,
)
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(c: Collection, *, include_products: bool = False) -> CollectionResult:
    """Map ORM Collection to CollectionResult (products only when loaded)."""
    products = None
    if include_products:
        products = tuple(
            ProductSummary(
                id=p.id,
                name=p.name,
                sequence_number=p.sequence_number,
                category=p.category,
            )
            for p in c.products
        )
    return CollectionResult(
        id=c.id,
        owner_user_id=c.owner_user_id,
        name=c.name,
        products=products,
    )


class CollectionRepository(BaseRepository[Collection]):
    """Collection repository. Lookups are filtered by id AND owner, so a foreign
    collection is indistinguishable from a missing one."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Collection)

    async def create(self, owner_user_id: str, name: str | None) -> CollectionResult:
        created = await super().create(Collection(owner_user_id=owner_user_id, name=name))
        return _to_result(created)

    async def list_for_owner(self, owner_user_id: str) -> list[CollectionResult]:
        result = await self.db.execute(
            select(Collection)
            .where(Collection.owner_user_id == owner_user_id)
            .order_by(Collection.name.asc().nulls_last(), Collection.id.asc())
        )
        return [_to_result(c) for c in result.scalars().all()]

    async def get_for_owner(
        self, owner_user_id: str, collection_id: int, *, include_products: bool = False
    ) -> CollectionResult | None:
        q = select(Collection).where(
            Collection.id == collection_id,
            Collection.owner_user_id == owner_user_id,
        )
        if include_products:
            q = q.options(selectinload(Collection.products)).execution_options(
                populate_existing=True
            )
        result = await self.db.execute(q)
        collection = result.scalar_one_or_none()
        if collection is None:
            return None
        return _to_result(collection, include_products=include_products)

    async def delete_for_owner(self, owner_user_id: str, collection_id: int) -> bool:
        """Single DELETE filtered by id and owner; membership rows cascade."""
        result = await self.db.execute(
            delete(Collection)
            .where(
                Collection.id == collection_id,
                Collection.owner_user_id == owner_user_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def add_product(self, collection_id: int, product_id: int) -> bool:
        """Insert the pair; an existing pair is left untouched (returns False)."""
        stmt = (
            self._dialect_insert(CollectionProduct)
            .values(collection_id=collection_id, product_id=product_id)
            .on_conflict_do_nothing(index_elements=["collection_id", "product_id"])
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def remove_product(self, collection_id: int, product_id: int) -> bool:
        result = await self.db.execute(
            delete(CollectionProduct)
            .where(
                CollectionProduct.collection_id == collection_id,
                CollectionProduct.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

