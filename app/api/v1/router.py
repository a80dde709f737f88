"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    books,
    collections,
    film_series,
    games,
    health,
    mangas,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(books.router, prefix="/books", tags=["books"])
api_router.include_router(mangas.router, prefix="/mangas", tags=["mangas"])
api_router.include_router(games.router, prefix="/games", tags=["games"])
api_router.include_router(film_series.router, prefix="/film-series", tags=["film-series"])
api_router.include_router(collections.router, prefix="/collections", tags=["collections"])
