"""Transaction scope for multi-row writes.

transaction() commits when its block exits normally and rolls back on every
other exit path (domain errors, storage errors, cancellation) before the
exception propagates. SQLAlchemy errors are logged with the operation name
and entity ids and re-raised as StorageException, so callers never see
driver details.

Usage:
    async with transaction(session, "Book.update", product_id=42):
        await repo.update(...)
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import StorageException

logger = logging.getLogger(__name__)


def _describe(context: dict[str, Any]) -> str:
    return ", ".join(f"{k}={v}" for k, v in context.items()) or "-"


@asynccontextmanager
async def transaction(
    session: AsyncSession, operation: str, **context: Any
) -> AsyncIterator[AsyncSession]:
    """Run the block as one atomic unit; rollback unless commit succeeds."""
    try:
        yield session
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(
            "Storage failure in %s (%s); transaction rolled back: %s",
            operation,
            _describe(context),
            e,
        )
        raise StorageException(operation) from e
    except BaseException:
        await session.rollback()
        raise


@asynccontextmanager
async def storage_errors(operation: str, **context: Any) -> AsyncIterator[None]:
    """Translate SQLAlchemy errors of a read-only block into StorageException."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(
            "Storage failure in %s (%s): %s", operation, _describe(context), e
        )
        raise StorageException(operation) from e


class SqlTransactionScope:
    """ITransactionScope over one AsyncSession (one per request)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def write(self, operation: str, **context: Any):
        return transaction(self.session, operation, **context)

    def read(self, operation: str, **context: Any):
        return storage_errors(operation, **context)
