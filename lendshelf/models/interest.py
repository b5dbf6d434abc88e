"""Interest ORM: a borrower's recorded interest in a listing.

Invariants:
    - Always references a Listing (listing_id FK, ON DELETE CASCADE)
    - At most one row per (listing_id, borrower_id): uq_interests_listing_borrower
    - borrow_end_date >= borrow_start_date when both present (checked before insert)
    - Never updated after creation

Design Decisions:
    - Uniqueness lives in the database, not in a check-then-insert: concurrent
      double submissions leave exactly one row
    - listing relationship loads eagerly (lazy="joined"): every read returns the
      interest with its listing snapshot, and async sessions cannot lazy-load
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import (
    String, Text, Date, DateTime, ForeignKey, UniqueConstraint, Index,
    CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from lendshelf.db.base import Base

UNIQUE_LISTING_BORROWER = "uq_interests_listing_borrower"


class Interest(Base):
    """Interest entity: who wants which listing, how to reach them, and when."""
    __tablename__ = "interests"
    __table_args__ = (
        UniqueConstraint(
            "listing_id", "borrower_id", name=UNIQUE_LISTING_BORROWER,
        ),
        Index("ix_interests_borrower_id", "borrower_id"),
        CheckConstraint(
            "borrow_end_date IS NULL OR borrow_start_date IS NULL "
            "OR borrow_end_date >= borrow_start_date",
            name="ck_interests_date_order",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    listing_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("listings.id", ondelete="CASCADE"),
        nullable=False,
    )
    borrower_id: Mapped[str] = mapped_column(String(64), nullable=False)
    contact_name: Mapped[str] = mapped_column(String(200), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(320), nullable=False)
    contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    borrow_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    borrow_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    listing: Mapped["Listing"] = relationship("Listing", lazy="joined")
