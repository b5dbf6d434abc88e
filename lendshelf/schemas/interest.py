"""Interest Schemas: the "show interest" form and its response.

Invariants:
    - Field sizes bounded here; required/blank/date rules enforced in core/enforce_interest.py
    - Dates are calendar dates (YYYY-MM-DD), no times
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from lendshelf.core.domain_types import ContactDetails


class InterestCreate(BaseModel):
    """Interest submission body."""
    contact_name: str = Field(max_length=200)
    contact_email: str = Field(max_length=320)
    contact_phone: str | None = Field(None, max_length=50)
    message: str | None = Field(None, max_length=2000)
    borrow_start_date: date | None = None
    borrow_end_date: date | None = None

    def contact(self) -> ContactDetails:
        return ContactDetails(
            name=self.contact_name,
            email=self.contact_email,
            phone=self.contact_phone,
        )


class InterestResponse(BaseModel):
    """A stored interest, as seen by the borrower who created it."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    listing_id: UUID
    borrower_id: str
    contact_name: str
    contact_email: str
    contact_phone: str | None
    message: str | None
    borrow_start_date: date | None
    borrow_end_date: date | None
    created_at: datetime
