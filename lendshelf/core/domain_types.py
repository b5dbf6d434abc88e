"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ListingId, InterestId wrap UUIDs; UserId wraps the provider's opaque string id
    - All valid listing modes encoded as an Enum (no raw string matching)
    - DateRange is only constructed from already-paired dates

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ListingId = NewType("ListingId", UUID)
InterestId = NewType("InterestId", UUID)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ListingMode(str, Enum):
    """How an item is offered. Loans carry a borrow window, sales may not."""
    SALE = "sale"
    LOAN = "loan"

    @property
    def requires_date_range(self) -> bool:
        return self is ListingMode.LOAN


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class DateRange:
    """Inclusive borrow window."""
    start: date
    end: date


@dataclass(frozen=True)
class ContactDetails:
    """How the owner reaches the interested party."""
    name: str
    email: str
    phone: str | None = None
