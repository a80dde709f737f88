"""Field validation for product writes.

Runs before any transaction is opened, so invalid input never touches
storage. The HTTP schemas enforce the same rules; these checks guard
every other caller of the use cases.
"""

from app.application.dtos.product import DETAILS_BY_CATEGORY, FilmSeriesDetails, ProductDetails
from app.domain.enums import FilmSeriesKind, ProductCategory
from app.domain.exceptions import ValidationException


def normalize_name(name: str | None) -> str:
    """Return the trimmed product name; raise ValidationException if empty."""
    if name is None or not name.strip():
        raise ValidationException("Field 'name' is required", field="name")
    return name.strip()


def validate_details(category: ProductCategory, details: ProductDetails) -> None:
    """Check that details match the category and that enumerated fields are valid."""
    expected = DETAILS_BY_CATEGORY[category]
    if not isinstance(details, expected):
        raise ValidationException(
            f"{category.value} requires {expected.__name__}, got {type(details).__name__}",
            field="details",
        )
    if isinstance(details, FilmSeriesDetails) and details.kind is not None:
        if details.kind not in FilmSeriesKind.values():
            raise ValidationException(
                "Field 'art' must be either 'Film' or 'Serie'", field="art"
            )
