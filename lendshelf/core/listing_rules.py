"""Listing Rules: pure validation and normalization for listing fields.

Invariants:
    - Price is a positive decimal
    - Title is non-blank after stripping
    - Tags are an ordered set: trimmed, blanks dropped, first occurrence wins
    - All functions are PURE (no IO)
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from lendshelf.core.domain_types import ListingMode
from lendshelf.core.errors import ValidationError

# Fields an owner may change after creation
EDITABLE_FIELDS = (
    "title", "description", "price", "tags", "image_url", "is_borrowed", "mode",
)

# NUMERIC(10, 2)
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
PRICE_LIMIT = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES)
PRICE_STEP = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)


def check_price(price: Any) -> ValidationError | None:
    """Price must be a positive decimal that fits the stored NUMERIC(10, 2) exactly."""
    try:
        value = Decimal(str(price))
    except (InvalidOperation, ValueError, TypeError):
        return ValidationError("Price must be a number", "price")
    if not value.is_finite() or value <= 0:
        return ValidationError("Price must be greater than zero", "price")
    if value >= PRICE_LIMIT:
        return ValidationError(f"Price must be less than {PRICE_LIMIT}", "price")
    if value != value.quantize(PRICE_STEP):
        return ValidationError(
            f"Price may have at most {PRICE_DECIMAL_PLACES} decimal places", "price",
        )
    return None


def check_title(title: Any) -> ValidationError | None:
    if not isinstance(title, str) or not title.strip():
        return ValidationError("Title is required", "title")
    return None


def check_mode(mode: Any) -> ValidationError | None:
    try:
        ListingMode(mode)
    except ValueError:
        return ValidationError(
            f"Mode must be one of: {', '.join(m.value for m in ListingMode)}", "mode",
        )
    return None


def check_is_borrowed(value: Any) -> ValidationError | None:
    if not isinstance(value, bool):
        return ValidationError("is_borrowed must be true or false", "is_borrowed")
    return None


def normalize_tags(tags: Iterable[str] | str | None) -> list[str]:
    """Accept a list or a comma-separated string and return an ordered set."""
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    seen: list[str] = []
    for tag in tags:
        cleaned = tag.strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


def validate_listing_fields(fields: dict) -> ValidationError | None:
    """Check every listing field present in `fields`. First error wins."""
    checks = (
        ("title", check_title),
        ("price", check_price),
        ("mode", check_mode),
        ("is_borrowed", check_is_borrowed),
    )
    for name, check in checks:
        if name in fields:
            error = check(fields[name])
            if error:
                return error
    return None


def normalize_listing_fields(fields: dict) -> dict:
    """Return a copy of `fields` with values in their stored shape."""
    normalized = dict(fields)
    if "title" in normalized:
        normalized["title"] = normalized["title"].strip()
    if "description" in normalized:
        normalized["description"] = (normalized["description"] or "").strip()
    if "price" in normalized:
        normalized["price"] = Decimal(str(normalized["price"]))
    if "tags" in normalized:
        normalized["tags"] = normalize_tags(normalized["tags"])
    if "mode" in normalized:
        normalized["mode"] = ListingMode(normalized["mode"]).value
    if "image_url" in normalized and not normalized["image_url"]:
        normalized["image_url"] = None
    return normalized


def reject_unknown_fields(patch: dict) -> ValidationError | None:
    unknown = sorted(set(patch) - set(EDITABLE_FIELDS))
    if unknown:
        return ValidationError(
            f"Unknown listing fields: {', '.join(unknown)}", unknown[0],
        )
    return None
