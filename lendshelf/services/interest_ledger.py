"""Interest Ledger: persistence for interests with store-enforced uniqueness.

Invariants:
    - insert never does a check-then-insert for duplicates: the unique constraint
      uq_interests_listing_borrower decides, and a violation becomes DuplicateError
    - insert re-reads the listing after an IntegrityError: a missing listing means the
      FK lost a race with deletion and becomes NotFoundError
    - Every read returns interests joined with their listing as it is now
    - list_by_listing_ids([]) returns [] without touching the database
    - delete_by_listing_id does not commit: it runs inside the caller's transaction

Design Decisions:
    - Classify IntegrityError by re-query instead of parsing driver messages: works the
      same on asyncpg and aiosqlite
    - list_by_borrower uses an inner join, so an interest whose listing vanished can
      never be returned
"""

import logging
from dataclasses import dataclass
from datetime import date
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from lendshelf.core.domain_types import (
    ContactDetails, DateRange, InterestId, ListingId, UserId,
)
from lendshelf.core.enforce_interest import check_contact, check_date_order
from lendshelf.core.errors import DuplicateError, ErrorContext, NotFoundError
from lendshelf.models.interest import Interest
from lendshelf.models.listing import Listing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterestCandidate:
    """A validated-shape interest waiting to be recorded."""
    listing_id: ListingId
    borrower_id: UserId
    contact: ContactDetails
    message: str | None = None
    date_range: DateRange | None = None

    def error_context(self) -> ErrorContext:
        return ErrorContext(
            listing_id=str(self.listing_id), user_id=self.borrower_id,
        )


class InterestLedger:
    """Reads and writes the interests relation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self, candidate: InterestCandidate, today: date | None = None,
    ) -> Interest:
        """Record an interest. Raises ValidationError, NotFoundError, DuplicateError."""
        error = check_contact(candidate.contact) or check_date_order(
            candidate.date_range, today or date.today(),
        )
        if error:
            error.context = candidate.error_context()
            raise error
        if not await self._listing_exists(candidate.listing_id):
            raise NotFoundError(
                "Listing", str(candidate.listing_id), candidate.error_context(),
            )

        date_range = candidate.date_range
        interest = Interest(
            listing_id=candidate.listing_id,
            borrower_id=candidate.borrower_id,
            contact_name=candidate.contact.name,
            contact_email=candidate.contact.email,
            contact_phone=candidate.contact.phone,
            message=candidate.message,
            borrow_start_date=date_range.start if date_range else None,
            borrow_end_date=date_range.end if date_range else None,
        )
        self.db.add(interest)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise await self._classify_conflict(candidate)

        logger.info(
            "Interest recorded",
            extra={
                "interest_id": interest.id,
                "listing_id": candidate.listing_id,
                "user_id": candidate.borrower_id,
            },
        )
        return await self.get(interest.id)

    async def get(self, interest_id: InterestId) -> Interest:
        result = await self.db.execute(
            select(Interest)
            .where(Interest.id == interest_id)
            .execution_options(populate_existing=True),
        )
        interest = result.scalar_one_or_none()
        if not interest:
            raise NotFoundError("Interest", str(interest_id))
        return interest

    async def list_by_listing_ids(self, listing_ids: list[ListingId]) -> list[Interest]:
        """All interests on the given listings, newest first."""
        if not listing_ids:
            return []
        result = await self.db.execute(
            select(Interest)
            .where(Interest.listing_id.in_(listing_ids))
            .order_by(Interest.created_at.desc()),
        )
        return list(result.scalars().all())

    async def list_by_borrower(self, borrower_id: UserId) -> list[Interest]:
        """All interests expressed by `borrower_id`, newest first."""
        result = await self.db.execute(
            select(Interest)
            .join(Interest.listing)
            .options(contains_eager(Interest.listing))
            .where(Interest.borrower_id == borrower_id)
            .order_by(Interest.created_at.desc()),
        )
        return list(result.scalars().all())

    async def delete_by_listing_id(self, listing_id: ListingId) -> int:
        """Remove every interest on `listing_id`. Caller commits."""
        result = await self.db.execute(
            delete(Interest).where(Interest.listing_id == listing_id),
        )
        return result.rowcount or 0

    async def _listing_exists(self, listing_id: ListingId) -> bool:
        result = await self.db.execute(
            select(Listing.id).where(Listing.id == listing_id),
        )
        return result.scalar_one_or_none() is not None

    async def _classify_conflict(
        self, candidate: InterestCandidate,
    ) -> DuplicateError | NotFoundError:
        if not await self._listing_exists(candidate.listing_id):
            logger.info(
                "Interest rejected: listing deleted during submission",
                extra={"listing_id": candidate.listing_id},
            )
            return NotFoundError(
                "Listing", str(candidate.listing_id), candidate.error_context(),
            )
        logger.info(
            "Interest rejected: duplicate",
            extra={
                "listing_id": candidate.listing_id,
                "user_id": candidate.borrower_id,
            },
        )
        return DuplicateError(
            str(candidate.listing_id), candidate.borrower_id,
            candidate.error_context(),
        )
