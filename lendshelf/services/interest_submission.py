"""Interest Submission: validates a viewer's request and records it in the ledger.

Invariants:
    - Anonymous viewers fail with AuthenticationError before anything else runs
    - Field and date checks run before any store call (fail fast)
    - Loan listings require a borrow window; sale listings accept one optionally
    - Exactly one interest row on success; nothing written on failure
    - DuplicateError, NotFoundError and StoreError propagate verbatim (no retries)

Design Decisions:
    - today is injectable: the "start not in the past" rule is testable without
      freezing the clock
    - Self-interest allowed by default (matches observed product behavior), disabled
      through settings.allow_self_interest
"""

import logging
from datetime import date

from lendshelf.core.domain_types import ContactDetails, ListingId, ListingMode
from lendshelf.core.enforce_interest import (
    check_identity,
    check_mode_requirements,
    check_not_owner,
    normalize_contact,
    normalize_message,
    to_date_range,
    validate_interest_fields,
)
from lendshelf.core.errors import ErrorContext, ValidationError
from lendshelf.core.identity import Identity
from lendshelf.models.interest import Interest
from lendshelf.services.interest_ledger import InterestCandidate, InterestLedger
from lendshelf.services.listing_store import ListingStore

logger = logging.getLogger(__name__)


class InterestSubmission:
    """The only write path into the interest ledger for end users."""

    def __init__(
        self,
        listings: ListingStore,
        ledger: InterestLedger,
        allow_self_interest: bool = True,
    ):
        self.listings = listings
        self.ledger = ledger
        self.allow_self_interest = allow_self_interest

    async def submit(
        self,
        viewer: Identity | None,
        listing_id: ListingId,
        contact: ContactDetails,
        message: str | None = None,
        borrow_start: date | None = None,
        borrow_end: date | None = None,
        today: date | None = None,
    ) -> Interest:
        today = today or date.today()

        auth_error = check_identity(viewer)
        if auth_error:
            auth_error.context = ErrorContext(listing_id=str(listing_id))
            raise auth_error
        error = validate_interest_fields(contact, borrow_start, borrow_end, today)
        if error:
            raise self._rejected(error, listing_id, viewer)

        date_range = to_date_range(borrow_start, borrow_end)
        listing = await self.listings.get(listing_id)
        error = check_mode_requirements(
            ListingMode(listing.mode), date_range,
        ) or check_not_owner(viewer, listing.owner_id, self.allow_self_interest)
        if error:
            raise self._rejected(error, listing_id, viewer)

        candidate = InterestCandidate(
            listing_id=listing_id,
            borrower_id=viewer.id,
            contact=normalize_contact(contact),
            message=normalize_message(message),
            date_range=date_range,
        )
        return await self.ledger.insert(candidate, today=today)

    @staticmethod
    def _rejected(
        error: ValidationError, listing_id: ListingId, viewer: Identity,
    ) -> ValidationError:
        logger.info(
            f"Interest rejected: {error.message}",
            extra={"listing_id": listing_id, "user_id": viewer.id},
        )
        error.context = ErrorContext(listing_id=str(listing_id), user_id=viewer.id)
        return error
