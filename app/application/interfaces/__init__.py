"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    ICollectionRepository,
    IProductRepository,
    IUserRepository,
)
from app.application.interfaces.services import IIdentityResolver, ITransactionScope

__all__ = [
    "ICollectionRepository",
    "IIdentityResolver",
    "IProductRepository",
    "ITransactionScope",
    "IUserRepository",
]
