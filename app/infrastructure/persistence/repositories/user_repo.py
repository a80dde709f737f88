"""User repository: upsert of the local identity projection. Returns application DTOs."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.domain.exceptions import StorageException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(id=u.id, name=u.name)


class UserRepository(BaseRepository[User]):
    """User repository keyed by the identity provider's subject id."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def upsert(self, user_id: str, name: str | None) -> UserResult:
        """INSERT ... ON CONFLICT (id) DO UPDATE SET name: one statement, last write wins."""
        stmt = self._dialect_insert(User).values(id=user_id, name=name)
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={"name": stmt.excluded.name},
        )
        await self.db.execute(stmt)
        user = await self._get_fresh(user_id)
        if user is None:
            logger.error("User %s missing after upsert", user_id)
            raise StorageException("user.sync")
        return _user_to_result(user)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self._get_fresh(user_id)
        return _user_to_result(user) if user else None

    async def _get_fresh(self, user_id: str) -> User | None:
        # populate_existing: the identity map may hold a row loaded before the upsert.
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
