"""Interest Schemas: boundary validation for the show-interest form."""

from datetime import date

import pytest
from pydantic import ValidationError

from lendshelf.core.domain_types import ContactDetails
from lendshelf.schemas.interest import InterestCreate


def test_dates_parse_from_iso_strings():
    body = InterestCreate(
        contact_name="Alice", contact_email="a@x.com",
        borrow_start_date="2026-10-20", borrow_end_date="2026-10-22",
    )
    assert body.borrow_start_date == date(2026, 10, 20)
    assert body.borrow_end_date == date(2026, 10, 22)


def test_blank_contact_passes_schema_and_is_left_to_core_rules():
    body = InterestCreate(contact_name="", contact_email="")
    assert body.contact() == ContactDetails(name="", email="", phone=None)


def test_invalid_date_rejected():
    with pytest.raises(ValidationError):
        InterestCreate(
            contact_name="Alice", contact_email="a@x.com",
            borrow_start_date="not-a-date",
        )


def test_message_max_length():
    with pytest.raises(ValidationError):
        InterestCreate(contact_name="A", contact_email="a@x.com", message="x" * 2001)
