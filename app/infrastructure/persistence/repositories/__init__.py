"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.collection_repo import (
    CollectionRepository,
)
from app.infrastructure.persistence.repositories.product_repo import ProductRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "CollectionRepository",
    "ProductRepository",
    "UserRepository",
]
