"""Product persistence on SQLite: atomic create/update/delete of (product, detail) pairs.

Uses the real repository and transaction scope over one session.
"""

import pytest
from sqlalchemy import func, select

from app.application.dtos.product import (
    BookDetails,
    FilmSeriesDetails,
    GameDetails,
    MangaDetails,
)
from app.application.use_cases.products import ProductService
from app.domain.enums import ProductCategory
from app.domain.exceptions import (
    IntegrityViolationException,
    ResourceNotFoundException,
    StorageException,
    ValidationException,
)
from app.infrastructure.persistence.models import (
    Book,
    FilmSeries,
    Game,
    Manga,
    Product,
)
from app.infrastructure.persistence.repositories import ProductRepository
from app.infrastructure.persistence.transaction import SqlTransactionScope, transaction


async def _count(session, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return int(result.scalar_one())


@pytest.fixture
def product_svc(db_session) -> ProductService:
    return ProductService(ProductRepository(db_session), SqlTransactionScope(db_session))


@pytest.mark.requires_db
@pytest.mark.parametrize(
    ("category", "details", "detail_model"),
    [
        (ProductCategory.BOOK, BookDetails("Frank Herbert", "en", "SciFi"), Book),
        (ProductCategory.MANGA, MangaDetails("Eiichiro Oda", "ja", "Shonen"), Manga),
        (ProductCategory.GAME, GameDetails("Switch", "Adventure"), Game),
        (ProductCategory.FILM_SERIES, FilmSeriesDetails("Serie", "Drama"), FilmSeries),
    ],
)
async def test_create_then_get_each_category(
    product_svc, db_session, category, details, detail_model
) -> None:
    created = await product_svc.create(category, "Title", 2, details)

    found = await product_svc.get(category, created.id)

    assert found == created
    assert found.details == details
    assert await _count(db_session, Product) == 1
    assert await _count(db_session, detail_model) == 1


@pytest.mark.requires_db
async def test_get_with_other_category_is_not_found(product_svc) -> None:
    created = await product_svc.create(ProductCategory.BOOK, "Dune", None, BookDetails())

    with pytest.raises(ResourceNotFoundException):
        await product_svc.get(ProductCategory.MANGA, created.id)


@pytest.mark.requires_db
async def test_failed_detail_insert_leaves_no_product_row(db_session) -> None:
    """A detail row rejected by the database rolls back the product row too."""
    repo = ProductRepository(db_session)

    with pytest.raises(StorageException):
        async with transaction(db_session, "FilmSeries.create"):
            # Bypasses the validator; the CHECK constraint rejects the row.
            await repo.insert(
                ProductCategory.FILM_SERIES, "Heat", None, FilmSeriesDetails(kind="Documentary")
            )

    assert await _count(db_session, Product) == 0
    assert await _count(db_session, FilmSeries) == 0


@pytest.mark.requires_db
async def test_validation_failure_persists_nothing(product_svc, db_session) -> None:
    with pytest.raises(ValidationException):
        await product_svc.create(ProductCategory.BOOK, "   ", None, BookDetails())

    assert await _count(db_session, Product) == 0
    assert await _count(db_session, Book) == 0


@pytest.mark.requires_db
async def test_update_overwrites_all_fields(product_svc) -> None:
    created = await product_svc.create(
        ProductCategory.BOOK, "Dune", 1, BookDetails("Frank Herbert", "en", "SciFi")
    )

    updated = await product_svc.update(
        ProductCategory.BOOK, created.id, "Dune Messiah", None, BookDetails(author="F. Herbert")
    )

    assert updated.name == "Dune Messiah"
    assert updated.sequence_number is None
    assert updated.details == BookDetails(author="F. Herbert", language=None, genre=None)
    assert await product_svc.get(ProductCategory.BOOK, created.id) == updated


@pytest.mark.requires_db
async def test_update_missing_is_not_found(product_svc) -> None:
    with pytest.raises(ResourceNotFoundException):
        await product_svc.update(ProductCategory.GAME, 404, "Nope", None, GameDetails())


@pytest.mark.requires_db
async def test_delete_removes_detail_row(product_svc, db_session) -> None:
    created = await product_svc.create(ProductCategory.GAME, "Zelda", None, GameDetails("Switch"))

    assert await product_svc.delete(ProductCategory.GAME, created.id) is True

    assert await _count(db_session, Product) == 0
    assert await _count(db_session, Game) == 0
    with pytest.raises(ResourceNotFoundException):
        await product_svc.get(ProductCategory.GAME, created.id)


@pytest.mark.requires_db
async def test_delete_with_other_category_deletes_nothing(product_svc, db_session) -> None:
    created = await product_svc.create(ProductCategory.GAME, "Zelda", None, GameDetails())

    assert await product_svc.delete(ProductCategory.BOOK, created.id, missing_ok=True) is False
    assert await _count(db_session, Product) == 1


@pytest.mark.requires_db
async def test_list_returns_only_category_ordered_by_id(product_svc) -> None:
    first = await product_svc.create(ProductCategory.MANGA, "One Piece", 1, MangaDetails())
    await product_svc.create(ProductCategory.BOOK, "Dune", None, BookDetails())
    second = await product_svc.create(ProductCategory.MANGA, "Naruto", 1, MangaDetails())

    listed = await product_svc.list_products(ProductCategory.MANGA)

    assert [p.id for p in listed] == [first.id, second.id]


@pytest.mark.requires_db
async def test_product_without_detail_row(product_svc, db_session) -> None:
    """get reports an integrity violation; list still returns the product."""
    async with transaction(db_session, "seed"):
        orphan = Product(name="Orphan", sequence_number=None, category="Book")
        db_session.add(orphan)

    with pytest.raises(IntegrityViolationException):
        await product_svc.get(ProductCategory.BOOK, orphan.id)
    listed = await product_svc.list_products(ProductCategory.BOOK)
    assert [(p.id, p.details) for p in listed] == [(orphan.id, BookDetails())]
    with pytest.raises(IntegrityViolationException):
        await product_svc.update(ProductCategory.BOOK, orphan.id, "Orphan", None, BookDetails())


@pytest.mark.requires_db
async def test_failed_detail_update_rolls_back_product_fields(
    product_svc, db_session, session_factory
) -> None:
    async with transaction(db_session, "seed"):
        orphan = Product(name="Orphan", sequence_number=1, category="Book")
        db_session.add(orphan)

    with pytest.raises(IntegrityViolationException):
        await product_svc.update(
            ProductCategory.BOOK, orphan.id, "Renamed", 7, BookDetails(author="X")
        )

    async with session_factory() as fresh:
        stored = await fresh.get(Product, orphan.id)
    assert (stored.name, stored.sequence_number) == ("Orphan", 1)
