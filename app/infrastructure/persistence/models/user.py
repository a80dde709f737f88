"""User ORM model: local projection of an externally authenticated identity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class User(Base):
    """User model. Table: app_user. id is the identity provider's subject id (not generated)."""

    __tablename__ = "app_user"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
