"""Initial schema: listings and interests.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "listings",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("image_url", sa.String(1000), nullable=True),
        sa.Column("tags", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("mode", sa.String(10), nullable=False, server_default="loan"),
        sa.Column("is_borrowed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("price > 0", name="ck_listings_price_positive"),
    )
    op.create_index("ix_listings_owner_id", "listings", ["owner_id"])
    op.create_index("ix_listings_created_at", "listings", ["created_at"])

    op.create_table(
        "interests",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "listing_id", UUID(as_uuid=True),
            sa.ForeignKey("listings.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("borrower_id", sa.String(64), nullable=False),
        sa.Column("contact_name", sa.String(200), nullable=False),
        sa.Column("contact_email", sa.String(320), nullable=False),
        sa.Column("contact_phone", sa.String(50), nullable=True),
        sa.Column("message", sa.Text, nullable=True),
        sa.Column("borrow_start_date", sa.Date, nullable=True),
        sa.Column("borrow_end_date", sa.Date, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint(
            "listing_id", "borrower_id", name="uq_interests_listing_borrower",
        ),
        sa.CheckConstraint(
            "borrow_end_date IS NULL OR borrow_start_date IS NULL "
            "OR borrow_end_date >= borrow_start_date",
            name="ck_interests_date_order",
        ),
    )
    op.create_index("ix_interests_borrower_id", "interests", ["borrower_id"])


def downgrade() -> None:
    op.drop_index("ix_interests_borrower_id", table_name="interests")
    op.drop_table("interests")
    op.drop_index("ix_listings_created_at", table_name="listings")
    op.drop_index("ix_listings_owner_id", table_name="listings")
    op.drop_table("listings")
