"""Pydantic request/response schemas for the API."""

from app.schemas.collection import (
    AddProductRequest,
    CollectionCreateRequest,
    CollectionResponse,
    MembershipStatusResponse,
)
from app.schemas.health import HealthResponse, ReadinessErrorResponse, ReadinessResponse
from app.schemas.product import (
    BookRequest,
    BookResponse,
    FilmSeriesRequest,
    FilmSeriesResponse,
    GameRequest,
    GameResponse,
    MangaRequest,
    MangaResponse,
    ProductSummaryResponse,
)
from app.schemas.user import SyncStatusResponse, UserResponse

__all__ = [
    "AddProductRequest",
    "BookRequest",
    "BookResponse",
    "CollectionCreateRequest",
    "CollectionResponse",
    "FilmSeriesRequest",
    "FilmSeriesResponse",
    "GameRequest",
    "GameResponse",
    "HealthResponse",
    "MangaRequest",
    "MangaResponse",
    "MembershipStatusResponse",
    "ProductSummaryResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SyncStatusResponse",
    "UserResponse",
]
