"""Listing ORM: persists an item offered for sale or loan.

Invariants:
    - id is UUID primary key
    - owner_id is the identity provider's opaque user id; never reassigned
    - price is a positive NUMERIC(10, 2) (checked in core/listing_rules.py)
    - tags is an ordered JSON list without duplicates
    - Deleting a listing deletes its interests (FK ON DELETE CASCADE on interests)

Design Decisions:
    - No ORM relationship to interests: the store deletes them explicitly through
      the ledger, and the FK cascade covers anything that slips past the ORM
    - JSON for tags: portable across PostgreSQL and the SQLite test database
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    String, Text, Boolean, DateTime, Numeric, JSON, Index, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from lendshelf.db.base import Base


class Listing(Base):
    """An item published by its owner."""
    __tablename__ = "listings"
    __table_args__ = (
        Index("ix_listings_owner_id", "owner_id"),
        Index("ix_listings_created_at", "created_at"),
        CheckConstraint("price > 0", name="ck_listings_price_positive"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    owner_id: Mapped[str] = mapped_column(String(64), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    mode: Mapped[str] = mapped_column(
        String(10), nullable=False, default="loan",
    )
    is_borrowed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
