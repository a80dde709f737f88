"""Collection operations: lifecycle and product membership, scoped to the owner."""

from __future__ import annotations

import logging

from app.application.dtos.collection import CollectionResult
from app.application.interfaces.repositories import (
    ICollectionRepository,
    IProductRepository,
)
from app.application.interfaces.services import ITransactionScope
from app.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "Collection"


class CollectionService:
    """Create, list, read, delete collections and edit their membership.

    A collection owned by another user is reported exactly like a missing one.
    """

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        product_repo: IProductRepository,
        tx: ITransactionScope,
    ) -> None:
        self.collection_repo = collection_repo
        self.product_repo = product_repo
        self.tx = tx

    async def create_collection(
        self, owner_user_id: str, name: str | None = None
    ) -> CollectionResult:
        """Create a collection. Names are not unique and there is no per-user limit."""
        async with self.tx.write("collection.create", owner=owner_user_id):
            created = await self.collection_repo.create(owner_user_id, name)
        logger.info("Created collection %s for user %s", created.id, owner_user_id)
        return created

    async def list_collections(self, owner_user_id: str) -> list[CollectionResult]:
        """Owner's collections ordered by name (unnamed last), then id."""
        async with self.tx.read("collection.list", owner=owner_user_id):
            return await self.collection_repo.list_for_owner(owner_user_id)

    async def get_collection(
        self,
        owner_user_id: str,
        collection_id: int,
        *,
        include_products: bool = False,
    ) -> CollectionResult:
        """Return the collection, with member products when include_products is set."""
        async with self.tx.read(
            "collection.get", collection_id=collection_id, owner=owner_user_id
        ):
            found = await self.collection_repo.get_for_owner(
                owner_user_id, collection_id, include_products=include_products
            )
        if found is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, collection_id)
        return found

    async def delete_collection(self, owner_user_id: str, collection_id: int) -> None:
        """Delete in one statement filtered by id and owner; membership rows cascade."""
        async with self.tx.write(
            "collection.delete", collection_id=collection_id, owner=owner_user_id
        ):
            deleted = await self.collection_repo.delete_for_owner(
                owner_user_id, collection_id
            )
            if not deleted:
                raise ResourceNotFoundException(RESOURCE_TYPE, collection_id)

    async def add_product(
        self, owner_user_id: str, collection_id: int, product_id: int
    ) -> bool:
        """Add a product to the collection. Adding an existing member is a no-op.

        Raises ResourceNotFoundException for a missing/foreign collection and
        ValidationException when the product does not exist. Returns True if
        a membership row was inserted.
        """
        async with self.tx.write(
            "collection.add_product",
            collection_id=collection_id,
            product_id=product_id,
            owner=owner_user_id,
        ):
            await self._ensure_owned(owner_user_id, collection_id)
            if not await self.product_repo.exists(product_id):
                raise ValidationException(
                    "Product to add does not exist", field="produktId"
                )
            return await self.collection_repo.add_product(collection_id, product_id)

    async def remove_product(
        self, owner_user_id: str, collection_id: int, product_id: int
    ) -> bool:
        """Remove a product from the collection. Removing a non-member is a no-op.

        Returns True if a membership row was deleted.
        """
        async with self.tx.write(
            "collection.remove_product",
            collection_id=collection_id,
            product_id=product_id,
            owner=owner_user_id,
        ):
            await self._ensure_owned(owner_user_id, collection_id)
            return await self.collection_repo.remove_product(collection_id, product_id)

    async def _ensure_owned(self, owner_user_id: str, collection_id: int) -> None:
        found = await self.collection_repo.get_for_owner(owner_user_id, collection_id)
        if found is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, collection_id)
