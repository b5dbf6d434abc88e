"""Listing Store: owner-scoped CRUD for listings.

Invariants:
    - Only the owner may update, delete, or change the image of a listing
    - Field rules (core/listing_rules.py) run before any write
    - delete removes the listing and all its interests in ONE transaction
    - list() is lazy and restartable: nothing runs until iteration, and every
      iteration re-executes the query

Design Decisions:
    - The ledger is injected so deletion goes through its cascade primitive instead
      of issuing interest SQL here
    - Search uses ILIKE on title and description: filtering happens in the database
"""

import logging
import uuid
from typing import AsyncIterator

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from lendshelf.core.domain_types import ListingId, UserId
from lendshelf.core.errors import (
    AuthorizationError, ErrorContext, NotFoundError, ValidationError,
)
from lendshelf.core.listing_rules import (
    normalize_listing_fields, reject_unknown_fields, validate_listing_fields,
)
from lendshelf.core.repository_protocols import BlobStore
from lendshelf.models.listing import Listing
from lendshelf.services.interest_ledger import InterestLedger

logger = logging.getLogger(__name__)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ListingSequence:
    """Deferred, re-iterable listing query."""

    def __init__(self, db: AsyncSession, query: Select):
        self._db = db
        self._query = query

    def __aiter__(self) -> AsyncIterator[Listing]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[Listing]:
        result = await self._db.execute(self._query)
        for listing in result.scalars():
            yield listing

    async def all(self) -> list[Listing]:
        return [listing async for listing in self]


class ListingStore:
    """Persistence and ownership rules for listings."""

    def __init__(
        self,
        db: AsyncSession,
        ledger: InterestLedger | None = None,
        blob_store: BlobStore | None = None,
    ):
        self.db = db
        self.ledger = ledger or InterestLedger(db)
        self.blob_store = blob_store

    async def create(self, owner_id: UserId, fields: dict) -> Listing:
        error = reject_unknown_fields(fields)
        if not error and "title" not in fields:
            error = ValidationError("Title is required", "title")
        if not error and "price" not in fields:
            error = ValidationError("Price is required", "price")
        error = error or validate_listing_fields(fields)
        if error:
            raise error

        listing = Listing(owner_id=owner_id, **normalize_listing_fields(fields))
        self.db.add(listing)
        await self.db.commit()
        await self.db.refresh(listing)
        logger.info(
            "Listing created",
            extra={"listing_id": listing.id, "user_id": owner_id},
        )
        return listing

    async def get(self, listing_id: ListingId) -> Listing:
        result = await self.db.execute(
            select(Listing).where(Listing.id == listing_id),
        )
        listing = result.scalar_one_or_none()
        if not listing:
            raise NotFoundError(
                "Listing", str(listing_id), ErrorContext(listing_id=str(listing_id)),
            )
        return listing

    async def update(self, listing_id: ListingId, caller_id: UserId, patch: dict) -> Listing:
        error = reject_unknown_fields(patch) or validate_listing_fields(patch)
        if error:
            raise error
        listing = await self._get_owned(listing_id, caller_id)
        for name, value in normalize_listing_fields(patch).items():
            setattr(listing, name, value)
        await self.db.commit()
        await self.db.refresh(listing)
        logger.info(
            "Listing updated",
            extra={"listing_id": listing_id, "user_id": caller_id},
        )
        return listing

    async def delete(self, listing_id: ListingId, caller_id: UserId) -> int:
        """Delete a listing and its interests. Returns the number of interests removed."""
        listing = await self._get_owned(listing_id, caller_id)
        removed = await self.ledger.delete_by_listing_id(listing_id)
        await self.db.delete(listing)
        await self.db.commit()
        logger.info(
            f"Listing deleted with {removed} interest(s)",
            extra={"listing_id": listing_id, "user_id": caller_id},
        )
        return removed

    async def list_by_owner(self, owner_id: UserId) -> list[Listing]:
        result = await self.db.execute(
            select(Listing)
            .where(Listing.owner_id == owner_id)
            .order_by(Listing.created_at.desc()),
        )
        return list(result.scalars().all())

    async def listing_ids_for_owner(self, owner_id: UserId) -> list[ListingId]:
        result = await self.db.execute(
            select(Listing.id).where(Listing.owner_id == owner_id),
        )
        return list(result.scalars().all())

    async def set_image(
        self,
        listing_id: ListingId,
        caller_id: UserId,
        filename: str,
        data: bytes,
        content_type: str,
    ) -> Listing:
        """Upload an image for the listing and point image_url at it."""
        if self.blob_store is None:
            raise RuntimeError("ListingStore has no blob store configured")
        listing = await self._get_owned(listing_id, caller_id)
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
        path = f"{listing.owner_id}/{uuid.uuid4().hex}.{ext}"
        url = await self.blob_store.upload(path, data, content_type)
        listing.image_url = url
        await self.db.commit()
        await self.db.refresh(listing)
        return listing

    async def _get_owned(self, listing_id: ListingId, caller_id: UserId) -> Listing:
        listing = await self.get(listing_id)
        if listing.owner_id != caller_id:
            logger.warning(
                "Rejected change by non-owner",
                extra={"listing_id": listing_id, "user_id": caller_id},
            )
            raise AuthorizationError(
                f"Listing '{listing_id}' is not owned by the caller",
                ErrorContext(listing_id=str(listing_id), user_id=caller_id),
            )
        return listing

    def list(
        self,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> ListingSequence:
        """Listings newest first, optionally filtered by a title/description substring."""
        query = select(Listing).order_by(Listing.created_at.desc())
        term = (search or "").strip()
        if term:
            pattern = f"%{_escape_like(term)}%"
            query = query.where(or_(
                Listing.title.ilike(pattern, escape="\\"),
                Listing.description.ilike(pattern, escape="\\"),
            ))
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return ListingSequence(self.db, query)
