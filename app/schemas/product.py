"""Product API schemas (Book, Manga, Game, FilmSeries).

JSON keys follow the catalog's wire format (nummer, autor, sprache, mangaka,
konsole, art); request bodies also accept the Python field names. PUT uses
the same body as POST: omitted optional fields are stored as null.
"""

from dataclasses import asdict
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from app.application.dtos.product import (
    BookDetails,
    FilmSeriesDetails,
    GameDetails,
    MangaDetails,
    ProductDetails,
    ProductResult,
)

# Ids are INTEGER columns; anything larger is a malformed identifier.
MAX_ID = 2**31 - 1


class ProductFields(BaseModel):
    """Shared product fields (base row)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    sequence_number: int | None = Field(
        default=None,
        alias="nummer",
        description="Category-agnostic ordinal (volume, episode, ...)",
    )

    details_cls: ClassVar[type[ProductDetails]]

    def to_details(self) -> ProductDetails:
        """Category payload for the use case (fields named as on the DTO)."""
        return self.details_cls(**self.model_dump(exclude={"id", "name", "sequence_number"}))

    @classmethod
    def from_result(cls, result: ProductResult) -> Any:
        """Build the response model from the merged (product, details) view."""
        return cls.model_validate(
            {
                "id": result.id,
                "name": result.name,
                "sequence_number": result.sequence_number,
                **asdict(result.details),
            }
        )


class BookRequest(ProductFields):
    """Request body for creating/updating a book."""

    details_cls: ClassVar[type[ProductDetails]] = BookDetails

    author: str | None = Field(default=None, alias="autor", max_length=255)
    language: str | None = Field(default=None, alias="sprache", max_length=50)
    genre: str | None = Field(default=None, max_length=100)


class BookResponse(BookRequest):
    id: int


class MangaRequest(ProductFields):
    """Request body for creating/updating a manga."""

    details_cls: ClassVar[type[ProductDetails]] = MangaDetails

    mangaka: str | None = Field(default=None, max_length=255)
    language: str | None = Field(default=None, alias="sprache", max_length=50)
    genre: str | None = Field(default=None, max_length=100)


class MangaResponse(MangaRequest):
    id: int


class GameRequest(ProductFields):
    """Request body for creating/updating a game."""

    details_cls: ClassVar[type[ProductDetails]] = GameDetails

    platform: str | None = Field(default=None, alias="konsole", max_length=100)
    genre: str | None = Field(default=None, max_length=100)


class GameResponse(GameRequest):
    id: int


class FilmSeriesRequest(ProductFields):
    """Request body for creating/updating a film or series. art is 'Film', 'Serie' or null."""

    details_cls: ClassVar[type[ProductDetails]] = FilmSeriesDetails

    kind: Literal["Film", "Serie"] | None = Field(default=None, alias="art")
    genre: str | None = Field(default=None, max_length=100)


class FilmSeriesResponse(FilmSeriesRequest):
    id: int


class ProductSummaryResponse(BaseModel):
    """Shared product fields only (collection members)."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    name: str
    sequence_number: int | None = Field(default=None, alias="nummer")
    category: str
