"""SQLAlchemy mixins for the category detail tables (DRY).

Provides: ProductExtensionMixin (shared primary key with product) and
GenreMixin. Every detail table combines both.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class ProductExtensionMixin:
    """Mixin for 1:1 extension tables. product_id is both PK and FK to product.

    ON DELETE CASCADE: deleting the product row deletes the detail row in the
    same statement.
    """

    @declared_attr
    def product_id(cls) -> Mapped[int]:
        return mapped_column(
            Integer,
            ForeignKey("product.id", ondelete="CASCADE"),
            primary_key=True,
            autoincrement=False,
        )


class GenreMixin:
    """Mixin for the optional genre column shared by all categories."""

    @declared_attr
    def genre(cls) -> Mapped[str | None]:
        return mapped_column(String(100), nullable=True)


class ProductDetailModel(ProductExtensionMixin, GenreMixin):
    """Combined mixin: shared-key extension + genre. Base for Book, Manga, Game, FilmSeries."""

    __abstract__ = True
