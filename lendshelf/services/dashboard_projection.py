"""Dashboard Projections: "interests received" and "my interests" per identity.

Invariants:
    - received() reads only interests on listings owned by the viewer
    - mine() reads only interests whose borrower is the viewer
    - received() for an owner without listings never queries the ledger
    - Both are pure reads: no writes, no caching

Design Decisions:
    - Scoping happens in the queries (owner's listing ids, borrower id), never by
      filtering a global scan after the fact
    - Depends on protocols, not concrete stores: tests can count ledger calls
"""

import logging

from lendshelf.core.domain_types import UserId
from lendshelf.core.repository_protocols import InterestReader, ListingOwnership
from lendshelf.schemas.dashboard import (
    ListingSnapshot, MyInterestEntry, ReceivedInterestEntry,
)

logger = logging.getLogger(__name__)


class DashboardProjection:
    """Derives both dashboard views from the ledger joined with listings."""

    def __init__(self, listings: ListingOwnership, ledger: InterestReader):
        self.listings = listings
        self.ledger = ledger

    async def received(self, owner_id: UserId) -> list[ReceivedInterestEntry]:
        listing_ids = await self.listings.listing_ids_for_owner(owner_id)
        if not listing_ids:
            return []
        interests = await self.ledger.list_by_listing_ids(listing_ids)
        entries = [
            ReceivedInterestEntry(
                id=interest.id,
                listing_id=interest.listing_id,
                listing_title=interest.listing.title,
                listing_image_url=interest.listing.image_url,
                contact_name=interest.contact_name,
                contact_email=interest.contact_email,
                contact_phone=interest.contact_phone,
                message=interest.message,
                borrow_start_date=interest.borrow_start_date,
                borrow_end_date=interest.borrow_end_date,
                created_at=interest.created_at,
            )
            for interest in interests
        ]
        logger.debug(
            f"Projected {len(entries)} received interest(s)",
            extra={"user_id": owner_id},
        )
        return entries

    async def mine(self, borrower_id: UserId) -> list[MyInterestEntry]:
        interests = await self.ledger.list_by_borrower(borrower_id)
        return [
            MyInterestEntry(
                id=interest.id,
                created_at=interest.created_at,
                borrow_start_date=interest.borrow_start_date,
                borrow_end_date=interest.borrow_end_date,
                listing=ListingSnapshot.model_validate(interest.listing),
            )
            for interest in interests
        ]
