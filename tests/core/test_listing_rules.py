"""Listing Rules: tests for price, title, mode, and tag handling."""

from decimal import Decimal

import pytest

from lendshelf.core.listing_rules import (
    check_price,
    normalize_listing_fields,
    normalize_tags,
    reject_unknown_fields,
    validate_listing_fields,
)


@pytest.mark.parametrize("price", [0, -1, "0.00", "abc", None, "NaN"])
def test_non_positive_or_invalid_price_is_rejected(price):
    error = check_price(price)
    assert error is not None
    assert error.field == "price"


@pytest.mark.parametrize("price", ["0.004", "0.001", "12.345", "100000000", 10 ** 9])
def test_price_that_does_not_fit_numeric_10_2_is_rejected(price):
    error = check_price(price)
    assert error is not None
    assert error.field == "price"


@pytest.mark.parametrize("price", [25, "25.00", "25.000", Decimal("0.01"), 9.5, "99999999.99"])
def test_positive_price_passes(price):
    assert check_price(price) is None


def test_blank_title_is_rejected():
    error = validate_listing_fields({"title": "  ", "price": 5})
    assert error.field == "title"


def test_unknown_mode_is_rejected():
    error = validate_listing_fields({"mode": "rent"})
    assert error.field == "mode"


def test_is_borrowed_must_be_bool():
    error = validate_listing_fields({"is_borrowed": None})
    assert error.field == "is_borrowed"


def test_partial_patch_only_checks_present_fields():
    assert validate_listing_fields({"is_borrowed": True}) is None


def test_tags_are_an_ordered_set():
    assert normalize_tags(["tools", " garden ", "tools", ""]) == ["tools", "garden"]


def test_tags_accept_comma_separated_string():
    assert normalize_tags("drill, power tools,,drill") == ["drill", "power tools"]


def test_no_tags_is_empty_list():
    assert normalize_tags(None) == []


def test_unknown_fields_are_rejected():
    error = reject_unknown_fields({"owner_id": "someone-else"})
    assert error.field == "owner_id"


def test_normalize_listing_fields():
    normalized = normalize_listing_fields({
        "title": " Drill ",
        "description": None,
        "price": "25",
        "mode": "sale",
        "image_url": "",
    })
    assert normalized == {
        "title": "Drill",
        "description": "",
        "price": Decimal("25"),
        "mode": "sale",
        "image_url": None,
    }
