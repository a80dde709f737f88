"""initial catalog schema

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-19

product + one detail table per category (shared primary key, ON DELETE
CASCADE), app_user, collection, and the collection_product join table.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DETAIL_TABLES = ("book", "manga", "game", "film_series")


def _create_detail_table(name: str, *items: sa.Column | sa.Constraint) -> None:
    """Detail table sharing product's primary key, plus genre."""
    op.create_table(
        name,
        sa.Column("product_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("genre", sa.String(length=100), nullable=True),
        *items,
        sa.PrimaryKeyConstraint("product_id"),
        sa.ForeignKeyConstraint(["product_id"], ["product.id"], ondelete="CASCADE"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "product",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("sequence_number", sa.Integer(), nullable=True),
        sa.Column("category", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_product_category", "product", ["category"])

    _create_detail_table(
        "book",
        sa.Column("author", sa.String(length=255), nullable=True),
        sa.Column("language", sa.String(length=50), nullable=True),
    )
    _create_detail_table(
        "manga",
        sa.Column("mangaka", sa.String(length=255), nullable=True),
        sa.Column("language", sa.String(length=50), nullable=True),
    )
    _create_detail_table(
        "game",
        sa.Column("platform", sa.String(length=100), nullable=True),
    )
    _create_detail_table(
        "film_series",
        sa.Column("kind", sa.String(length=16), nullable=True),
        sa.CheckConstraint(
            "kind IS NULL OR kind IN ('Film', 'Serie')",
            name="ck_film_series_kind",
        ),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "collection",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_user_id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["owner_user_id"], ["app_user.id"], ondelete="CASCADE"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_collection_owner_user_id", "collection", ["owner_user_id"])

    op.create_table(
        "collection_product",
        sa.Column("collection_id", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("collection_id", "product_id"),
        sa.ForeignKeyConstraint(["collection_id"], ["collection.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["product_id"], ["product.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_collection_product_product_id", "collection_product", ["product_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_collection_product_product_id", table_name="collection_product")
    op.drop_table("collection_product")
    op.drop_index("ix_collection_owner_user_id", table_name="collection")
    op.drop_table("collection")
    op.drop_table("app_user")
    for name in reversed(DETAIL_TABLES):
        op.drop_table(name)
    op.drop_index("ix_product_category", table_name="product")
    op.drop_table("product")
