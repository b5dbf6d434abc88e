"""Dashboard Schemas: entries of the "received" and "mine" projections."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ListingSnapshot(BaseModel):
    """The listing as it looks at read time."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    price: Decimal
    image_url: str | None
    is_borrowed: bool
    mode: str


class ReceivedInterestEntry(BaseModel):
    """Someone's interest in one of the viewer's listings."""
    id: UUID
    listing_id: UUID
    listing_title: str
    listing_image_url: str | None
    contact_name: str
    contact_email: str
    contact_phone: str | None
    message: str | None
    borrow_start_date: date | None
    borrow_end_date: date | None
    created_at: datetime


class MyInterestEntry(BaseModel):
    """An interest the viewer expressed in someone else's listing."""
    id: UUID
    created_at: datetime
    borrow_start_date: date | None
    borrow_end_date: date | None
    listing: ListingSnapshot
