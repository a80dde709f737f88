"""Application DTOs: read-models returned by repositories and use cases (no ORM)."""

from app.application.dtos.collection import CollectionResult
from app.application.dtos.product import (
    BookDetails,
    FilmSeriesDetails,
    GameDetails,
    MangaDetails,
    ProductDetails,
    ProductResult,
    ProductSummary,
)
from app.application.dtos.user import IdentityClaims, UserResult

__all__ = [
    "BookDetails",
    "CollectionResult",
    "FilmSeriesDetails",
    "GameDetails",
    "IdentityClaims",
    "MangaDetails",
    "ProductDetails",
    "ProductResult",
    "ProductSummary",
    "UserResult",
]
