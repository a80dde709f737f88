"""Product field validation (runs before any transaction opens)."""

import pytest

from app.application.dtos.product import BookDetails, FilmSeriesDetails, GameDetails
from app.application.services.product_validator import normalize_name, validate_details
from app.domain.enums import ProductCategory
from app.domain.exceptions import ValidationException


def test_normalize_name_trims() -> None:
    assert normalize_name("  Dune ") == "Dune"


@pytest.mark.parametrize("name", [None, "", "   "])
def test_normalize_name_rejects_missing(name) -> None:
    with pytest.raises(ValidationException) as exc_info:
        normalize_name(name)
    assert exc_info.value.details == {"field": "name"}


@pytest.mark.parametrize("kind", ["Film", "Serie", None])
def test_film_series_kind_accepts_known_values(kind) -> None:
    validate_details(ProductCategory.FILM_SERIES, FilmSeriesDetails(kind=kind))


@pytest.mark.parametrize("kind", ["Documentary", "film", ""])
def test_film_series_kind_rejects_other_values(kind) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_details(ProductCategory.FILM_SERIES, FilmSeriesDetails(kind=kind))
    assert exc_info.value.details == {"field": "art"}


def test_details_must_match_category() -> None:
    with pytest.raises(ValidationException):
        validate_details(ProductCategory.BOOK, GameDetails(platform="PS5"))


def test_matching_details_pass() -> None:
    validate_details(ProductCategory.BOOK, BookDetails(author="Frank Herbert"))
