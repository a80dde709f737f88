"""Application use cases: one entry point per workflow."""

from app.application.use_cases.collections import CollectionService
from app.application.use_cases.products import ProductService

__all__ = [
    "CollectionService",
    "ProductService",
]
