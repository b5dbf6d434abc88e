"""Interest Rule Enforcement: validates a submission before any store call.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - check_* functions return a ValidationError on violation, None on success
    - validate_interest_fields chains the field checks; first error wins
    - "today" is always passed in, never read from the clock here

Design Decisions:
    - Pure functions over method dispatch: testable without mocks
    - Return errors instead of raising them: callers can collect or chain checks,
      and the single raise site lives in the submission service
    - Email syntax via email-validator with deliverability checks off: no DNS lookups
"""

from datetime import date

from email_validator import EmailNotValidError, validate_email

from lendshelf.core.domain_types import ContactDetails, DateRange, ListingMode
from lendshelf.core.errors import AuthenticationError, ValidationError
from lendshelf.core.identity import Identity


def check_identity(viewer: Identity | None) -> AuthenticationError | None:
    """Anonymous viewers cannot submit interest."""
    if viewer is None:
        return AuthenticationError("Sign in to show interest")
    return None


def check_contact(contact: ContactDetails) -> ValidationError | None:
    """Name and email are required; email must be a syntactically valid address."""
    if not contact.name or not contact.name.strip():
        return ValidationError("Contact name is required", "contact_name")
    if not contact.email or not contact.email.strip():
        return ValidationError("Contact email is required", "contact_email")
    try:
        validate_email(contact.email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return ValidationError("Contact email is not a valid address", "contact_email")
    return None


def check_date_pair(
    start: date | None, end: date | None,
) -> ValidationError | None:
    """Either both borrow dates are supplied or neither is."""
    if (start is None) != (end is None):
        missing = "borrow_end_date" if end is None else "borrow_start_date"
        return ValidationError(
            "Both borrow dates are required when either is given", missing,
        )
    return None


def check_date_order(
    date_range: DateRange | None, today: date,
) -> ValidationError | None:
    """Start may not be in the past; end may not precede start."""
    if date_range is None:
        return None
    if date_range.start < today:
        return ValidationError(
            "Borrow start date cannot be in the past", "borrow_start_date",
        )
    if date_range.end < date_range.start:
        return ValidationError(
            "Borrow end date must be on or after the start date", "borrow_end_date",
        )
    return None


def check_mode_requirements(
    mode: ListingMode, date_range: DateRange | None,
) -> ValidationError | None:
    """Loan listings need a borrow window; sale listings take one optionally."""
    if mode.requires_date_range and date_range is None:
        return ValidationError(
            "Borrow dates are required for items offered on loan", "borrow_start_date",
        )
    return None


def check_not_owner(
    viewer: Identity, owner_id: str, allow_self_interest: bool,
) -> ValidationError | None:
    if not allow_self_interest and viewer.id == owner_id:
        return ValidationError(
            "You cannot show interest in your own listing", "listing_id",
        )
    return None


def to_date_range(start: date | None, end: date | None) -> DateRange | None:
    """Pair dates into a DateRange. Call only after check_date_pair passed."""
    if start is None or end is None:
        return None
    return DateRange(start=start, end=end)


def validate_interest_fields(
    contact: ContactDetails,
    start: date | None,
    end: date | None,
    today: date,
) -> ValidationError | None:
    """Chain field-level checks. Returns first error or None."""
    error = check_contact(contact) or check_date_pair(start, end)
    if error:
        return error
    return check_date_order(to_date_range(start, end), today)


def normalize_contact(contact: ContactDetails) -> ContactDetails:
    """Trim contact fields; blank phone becomes None."""
    phone = contact.phone.strip() if contact.phone else None
    return ContactDetails(
        name=contact.name.strip(),
        email=contact.email.strip(),
        phone=phone or None,
    )


def normalize_message(message: str | None) -> str | None:
    if message is None:
        return None
    return message.strip() or None
