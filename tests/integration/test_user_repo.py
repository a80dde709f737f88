"""User registry upsert on SQLite."""

import pytest
from sqlalchemy import func, select

from app.application.services.user_service import UserSyncService
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.models import User
from app.infrastructure.persistence.repositories import UserRepository
from app.infrastructure.persistence.transaction import SqlTransactionScope


@pytest.fixture
def user_sync(db_session) -> UserSyncService:
    return UserSyncService(UserRepository(db_session), SqlTransactionScope(db_session))


@pytest.mark.requires_db
async def test_repeated_sync_keeps_one_row_with_latest_name(user_sync, db_session) -> None:
    await user_sync.sync_user("kc-123", "alice")
    await user_sync.sync_user("kc-123", "alice")
    synced = await user_sync.sync_user("kc-123", "Alice Liddell")

    assert synced.name == "Alice Liddell"
    count = await db_session.execute(select(func.count()).select_from(User))
    assert count.scalar_one() == 1
    assert (await user_sync.get_user("kc-123")).name == "Alice Liddell"


@pytest.mark.requires_db
async def test_empty_display_name_is_stored_as_null(user_sync) -> None:
    synced = await user_sync.sync_user("kc-456", "")

    assert synced.id == "kc-456"
    assert synced.name is None


@pytest.mark.requires_db
async def test_get_unknown_user_is_not_found(user_sync) -> None:
    with pytest.raises(ResourceNotFoundException):
        await user_sync.get_user("nobody")
