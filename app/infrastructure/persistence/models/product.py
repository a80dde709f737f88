"""Product ORM models: base product row and the four category detail tables."""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import ProductDetailModel


class Product(Base):
    """Base catalog record. Table: product.

    category is the discriminator (plain string: Book, Manga, Game, FilmSeries);
    the same id must exist in exactly the matching detail table.
    """

    __tablename__ = "product"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sequence_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    category: Mapped[str] = mapped_column(String(255), nullable=False, index=True)


class Book(ProductDetailModel, Base):
    """Book details. Table: book."""

    __tablename__ = "book"

    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    language: Mapped[str | None] = mapped_column(String(50), nullable=True)


class Manga(ProductDetailModel, Base):
    """Manga details. Table: manga."""

    __tablename__ = "manga"

    mangaka: Mapped[str | None] = mapped_column(String(255), nullable=True)
    language: Mapped[str | None] = mapped_column(String(50), nullable=True)


class Game(ProductDetailModel, Base):
    """Game details. Table: game."""

    __tablename__ = "game"

    platform: Mapped[str | None] = mapped_column(String(100), nullable=True)


class FilmSeries(ProductDetailModel, Base):
    """Film/series details. Table: film_series. kind is 'Film', 'Serie' or null."""

    __tablename__ = "film_series"

    kind: Mapped[str | None] = mapped_column(String(16), nullable=True)

    __table_args__ = (
        CheckConstraint(
            "kind IS NULL OR kind IN ('Film', 'Serie')",
            name="ck_film_series_kind",
        ),
    )
