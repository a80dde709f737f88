"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions. Infrastructure implements
the interfaces (repositories, transaction scope, identity resolver).
"""

from app.application.interfaces import (
    ICollectionRepository,
    IIdentityResolver,
    IProductRepository,
    ITransactionScope,
    IUserRepository,
)
from app.application.services.user_service import UserSyncService
from app.application.use_cases.collections import CollectionService
from app.application.use_cases.products import ProductService

__all__ = [
    "CollectionService",
    "ICollectionRepository",
    "IIdentityResolver",
    "IProductRepository",
    "ITransactionScope",
    "IUserRepository",
    "ProductService",
    "UserSyncService",
]
