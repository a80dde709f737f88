"""DTOs for product use cases (no dependency on ORM).

A product is one logical record: shared fields plus exactly one category
payload. ProductResult.details holds the payload; its type always matches
ProductResult.category.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from app.domain.enums import ProductCategory


@dataclass(frozen=True)
class BookDetails:
    category: ClassVar[ProductCategory] = ProductCategory.BOOK

    author: str | None = None
    language: str | None = None
    genre: str | None = None


@dataclass(frozen=True)
class MangaDetails:
    category: ClassVar[ProductCategory] = ProductCategory.MANGA

    mangaka: str | None = None
    language: str | None = None
    genre: str | None = None


@dataclass(frozen=True)
class GameDetails:
    category: ClassVar[ProductCategory] = ProductCategory.GAME

    platform: str | None = None
    genre: str | None = None


@dataclass(frozen=True)
class FilmSeriesDetails:
    """kind is 'Film', 'Serie' or None."""

    category: ClassVar[ProductCategory] = ProductCategory.FILM_SERIES

    kind: str | None = None
    genre: str | None = None


ProductDetails = Union[BookDetails, MangaDetails, GameDetails, FilmSeriesDetails]

DETAILS_BY_CATEGORY: dict[ProductCategory, type[ProductDetails]] = {
    ProductCategory.BOOK: BookDetails,
    ProductCategory.MANGA: MangaDetails,
    ProductCategory.GAME: GameDetails,
    ProductCategory.FILM_SERIES: FilmSeriesDetails,
}


@dataclass(frozen=True)
class ProductResult:
    """Merged view of a product row and its category detail row."""

    id: int
    name: str
    sequence_number: int | None
    category: ProductCategory
    details: ProductDetails


@dataclass(frozen=True)
class ProductSummary:
    """Shared product fields only (collection member listings)."""

    id: int
    name: str
    sequence_number: int | None
    category: str
