"""Base repository: session handle, primary-key lookup, and dialect-aware inserts."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, create and conflict-tolerant insert helpers.

    Repositories never commit: they flush inside the caller's transaction
    (see app.infrastructure.persistence.transaction).
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: Any) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record (flush assigns generated keys)."""
        self.db.add(obj)
        await self.db.flush()
        return obj

    def _dialect_insert(self, model: type[Base]) -> Any:
        """INSERT construct supporting ON CONFLICT for the bound dialect.

        Postgres and SQLite share the on_conflict_do_nothing /
        on_conflict_do_update API.
        """
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            return pg_insert(model)
        if dialect == "sqlite":
            return sqlite_insert(model)
        raise NotImplementedError(f"ON CONFLICT inserts not supported for dialect {dialect!r}")
