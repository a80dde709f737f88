"""Collection ORM models: user-owned collection and the collection/product join."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.product import Product


class CollectionProduct(Base):
    """Membership row. Table: collection_product. Composite PK, no payload.

    Cascades from both sides: deleting the collection or the product removes
    the membership.
    """

    __tablename__ = "collection_product"

    collection_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("collection.id", ondelete="CASCADE"),
        primary_key=True,
    )
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("product.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )


class Collection(Base):
    """Named or unnamed list of products owned by one user. Table: collection."""

    __tablename__ = "collection"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Loaded only on request (selectinload); lazy loads are an error in async code.
    products: Mapped[list[Product]] = relationship(
        Product,
        secondary="collection_product",
        order_by=Product.id,
        lazy="raise",
        viewonly=True,
    )
