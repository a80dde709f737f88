"""User registry service: keep the local user row in step with the identity provider."""

from __future__ import annotations

import logging

from app.application.dtos.user import UserResult
from app.application.interfaces.repositories import IUserRepository
from app.application.interfaces.services import ITransactionScope
from app.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class UserSyncService:
    """Upsert the user on every authenticated request (last write wins on name)."""

    def __init__(self, user_repo: IUserRepository, tx: ITransactionScope) -> None:
        self._user_repo = user_repo
        self._tx = tx

    async def sync_user(self, external_id: str, display_name: str | None) -> UserResult:
        """Create or update the user keyed by the external subject id.

        An empty display name is stored as null. Safe to repeat: never fails
        because the user already exists.
        """
        name = display_name or None
        async with self._tx.write("user.sync", user_id=external_id):
            user = await self._user_repo.upsert(external_id, name)
        logger.debug("Synced user %s", external_id)
        return user

    async def get_user(self, user_id: str) -> UserResult:
        async with self._tx.read("user.get", user_id=user_id):
            user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("User", user_id)
        return user
