"""Seed sample catalog products from scripts/seed-data.json.

The file maps category keys (books, mangas, games, film_series) to lists of
products in the API's wire format (name, nummer, autor, sprache, ...). Each
product is validated with the same request schema as POST and written through
ProductService, so product and detail rows are created atomically. Products
whose name already exists in the category are skipped.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Requires: DATABASE_URL, schema in place (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from app.application.use_cases.products import ProductService
from app.domain.enums import ProductCategory
from app.infrastructure.persistence.repositories import ProductRepository
from app.infrastructure.persistence.transaction import SqlTransactionScope
from app.schemas.product import (
    BookRequest,
    FilmSeriesRequest,
    GameRequest,
    MangaRequest,
    ProductFields,
)

SEED_SECTIONS: dict[str, tuple[ProductCategory, type[ProductFields]]] = {
    "books": (ProductCategory.BOOK, BookRequest),
    "mangas": (ProductCategory.MANGA, MangaRequest),
    "games": (ProductCategory.GAME, GameRequest),
    "film_series": (ProductCategory.FILM_SERIES, FilmSeriesRequest),
}


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)

    from app.infrastructure.persistence import database as db_mod

    db_mod._ensure_engine()
    if db_mod.AsyncSessionLocal is None:
        print(
            "AsyncSessionLocal not configured. Set DATABASE_URL and run: alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    created_count = 0
    async with db_mod.AsyncSessionLocal() as session:
        svc = ProductService(ProductRepository(session), SqlTransactionScope(session))
        for section, (category, schema) in SEED_SECTIONS.items():
            existing = {p.name for p in await svc.list_products(category)}
            for item in data.get(section, []):
                try:
                    body = schema.model_validate(item)
                except ValidationError as e:
                    print(f"  Invalid {category.value} entry {item!r}: {e}", file=sys.stderr)
                    continue
                if body.name in existing:
                    print(f"  {category.value} {body.name!r} already exists, skip")
                    continue
                created = await svc.create(
                    category, body.name, body.sequence_number, body.to_details()
                )
                existing.add(created.name)
                created_count += 1
                print(f"  {category.value} {created.name!r} -> {created.id}")

    if db_mod.engine is not None:
        await db_mod.engine.dispose()
    print(f"Seeded {created_count} products.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
