"""Games API: CRUD routes delegating to ProductService."""

from app.api.v1.endpoints._product_routes import build_product_router
from app.domain.enums import ProductCategory
from app.schemas.product import GameRequest, GameResponse

router = build_product_router(ProductCategory.GAME, GameRequest, GameResponse)
