"""Films and series API: CRUD routes delegating to ProductService."""

from app.api.v1.endpoints._product_routes import build_product_router
from app.domain.enums import ProductCategory
from app.schemas.product import FilmSeriesRequest, FilmSeriesResponse

router = build_product_router(ProductCategory.FILM_SERIES, FilmSeriesRequest, FilmSeriesResponse)
