"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.collection import (
    Collection,
    CollectionProduct,
)
from app.infrastructure.persistence.models.mixins import (
    GenreMixin,
    ProductDetailModel,
    ProductExtensionMixin,
)
from app.infrastructure.persistence.models.product import (
    Book,
    FilmSeries,
    Game,
    Manga,
    Product,
)
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Book",
    "Collection",
    "CollectionProduct",
    "FilmSeries",
    "Game",
    "Manga",
    "Product",
    "User",
    "GenreMixin",
    "ProductDetailModel",
    "ProductExtensionMixin",
]
