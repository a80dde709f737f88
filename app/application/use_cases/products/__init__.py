"""Product use cases."""

from app.application.use_cases.products.product_operations import ProductService

__all__ = ["ProductService"]
