"""Books API: CRUD routes delegating to ProductService."""

from app.api.v1.endpoints._product_routes import build_product_router
from app.domain.enums import ProductCategory
from app.schemas.product import BookRequest, BookResponse

router = build_product_router(ProductCategory.BOOK, BookRequest, BookResponse)
