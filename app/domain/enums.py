"""Domain enumerations for the media catalog.

Enums represent fixed sets of domain values. Both are persisted as plain
strings, not database enum types.
"""

from enum import Enum


class ProductCategory(str, Enum):
    """Product discriminator: decides which detail table extends a product row.

    Set once when the product is created; no update path changes it.
    """

    BOOK = "Book"
    MANGA = "Manga"
    GAME = "Game"
    FILM_SERIES = "FilmSeries"


class FilmSeriesKind(str, Enum):
    """Whether a film/series product is a single film or a series."""

    FILM = "Film"
    SERIE = "Serie"

    @classmethod
    def values(cls) -> list[str]:
        return [kind.value for kind in cls]
