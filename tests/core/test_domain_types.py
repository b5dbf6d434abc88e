"""Domain Types: tests for enums and value types."""

from dataclasses import FrozenInstanceError
from datetime import date
from uuid import uuid4

import pytest

from lendshelf.core.domain_types import (
    DateRange, InterestId, ListingId, ListingMode, UserId,
)


def test_identity_types_wrap_values():
    uid = uuid4()
    assert ListingId(uid) == uid
    assert InterestId(uid) == uid
    assert UserId("abc") == "abc"


def test_listing_modes():
    assert {m.value for m in ListingMode} == {"sale", "loan"}
    assert ListingMode.LOAN.requires_date_range
    assert not ListingMode.SALE.requires_date_range



def test_date_range_is_immutable_value():
    window = DateRange(date(2026, 1, 1), date(2026, 1, 3))
    assert window == DateRange(date(2026, 1, 1), date(2026, 1, 3))
    with pytest.raises(FrozenInstanceError):
        window.end = date(2026, 1, 4)
