"""Application services: user registry sync and product validation."""

from app.application.services.product_validator import normalize_name, validate_details
from app.application.services.user_service import UserSyncService

__all__ = [
    "UserSyncService",
    "normalize_name",
    "validate_details",
]
