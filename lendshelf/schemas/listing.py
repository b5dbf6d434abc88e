"""Listing Schemas: request bodies and responses for listing endpoints.

Invariants:
    - ListingUpdate only carries fields the client actually sent (exclude_unset)
    - tags accept a list or a comma-separated string; normalized in core/listing_rules.py
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ListingCreate(BaseModel):
    """New listing body."""
    title: str = Field(max_length=200)
    description: str = Field("", max_length=10_000)
    price: Decimal
    image_url: str | None = Field(None, max_length=1000)
    tags: list[str] | str = Field(default_factory=list)
    mode: Literal["sale", "loan"] = "loan"


class ListingUpdate(BaseModel):
    """Partial update: any subset of editable fields."""
    title: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=10_000)
    price: Decimal | None = None
    image_url: str | None = Field(None, max_length=1000)
    tags: list[str] | str | None = None
    mode: Literal["sale", "loan"] | None = None
    is_borrowed: bool | None = None


class ListingResponse(BaseModel):
    """Public listing data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: str
    title: str
    description: str
    price: Decimal
    image_url: str | None
    tags: list[str]
    mode: str
    is_borrowed: bool
    created_at: datetime


class ListingPage(BaseModel):
    listings: list[ListingResponse]
    pagination: dict
