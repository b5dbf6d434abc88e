"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Store and blob IO accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Any, Protocol
from uuid import UUID

from lendshelf.core.domain_types import ListingId, UserId
from lendshelf.core.identity import Identity


class ListingLike(Protocol):
    """Structural contract for Listing objects handed to projections."""
    id: UUID
    owner_id: str
    title: str
    price: Any
    image_url: str | None
    is_borrowed: bool
    mode: str


class InterestLike(Protocol):
    """Structural contract for Interest rows joined with their listing."""
    id: UUID
    listing_id: UUID
    borrower_id: str
    listing: ListingLike


class ListingOwnership(Protocol):
    """The slice of the listing store the dashboard needs."""
    async def listing_ids_for_owner(self, owner_id: UserId) -> list[ListingId]: ...


class InterestReader(Protocol):
    """Read side of the interest ledger."""
    async def list_by_listing_ids(
        self, listing_ids: list[ListingId],
    ) -> list[InterestLike]: ...
    async def list_by_borrower(self, borrower_id: UserId) -> list[InterestLike]: ...


class IdentityProvider(Protocol):
    """Resolves the caller's identity for one request."""
    def current_identity(self, headers: Any) -> Identity | None: ...


class BlobStore(Protocol):
    """Stores binary payloads and returns a retrievable URL."""
    async def upload(self, path: str, data: bytes, content_type: str) -> str: ...
