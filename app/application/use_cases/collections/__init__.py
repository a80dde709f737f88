"""Collection use cases."""

from app.application.use_cases.collections.collection_operations import (
    CollectionService,
)

__all__ = ["CollectionService"]
