"""Listings: browse, publish, edit, and remove items.

Invariants:
    - Browsing (list/get) is public; every write requires a signed-in identity
    - Ownership checks happen in ListingStore, not here
    - DELETE is synchronous: when it returns 204 the listing's interests are gone
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from lendshelf.api.dependencies import get_listing_store, require_identity
from lendshelf.config import get_settings
from lendshelf.core.identity import Identity
from lendshelf.schemas.listing import (
    ListingCreate, ListingPage, ListingResponse, ListingUpdate,
)
from lendshelf.services.listing_store import ListingStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/listings", tags=["listings"])


@router.post(
    "", response_model=ListingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_listing(
    body: ListingCreate,
    identity: Identity = Depends(require_identity),
    store: ListingStore = Depends(get_listing_store),
):
    """Publish a new listing owned by the caller."""
    listing = await store.create(identity.id, body.model_dump())
    return ListingResponse.model_validate(listing)


@router.get("", response_model=ListingPage)
async def list_listings(
    q: str | None = Query(None, max_length=200),
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    store: ListingStore = Depends(get_listing_store),
):
    """Browse listings, newest first, optionally filtered by a search term."""
    settings = get_settings()
    limit = min(limit or settings.default_page_size, settings.max_page_size)
    listings = await store.list(search=q, limit=limit, offset=offset).all()
    return ListingPage(
        listings=[ListingResponse.model_validate(l) for l in listings],
        pagination={"limit": limit, "offset": offset},
    )


@router.get("/{listing_id}", response_model=ListingResponse)
async def get_listing(
    listing_id: UUID, store: ListingStore = Depends(get_listing_store),
):
    listing = await store.get(listing_id)
    return ListingResponse.model_validate(listing)


@router.patch("/{listing_id}", response_model=ListingResponse)
async def update_listing(
    listing_id: UUID,
    body: ListingUpdate,
    identity: Identity = Depends(require_identity),
    store: ListingStore = Depends(get_listing_store),
):
    """Apply a partial update. Only fields present in the body change."""
    listing = await store.update(
        listing_id, identity.id, body.model_dump(exclude_unset=True),
    )
    return ListingResponse.model_validate(listing)


@router.delete("/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_listing(
    listing_id: UUID,
    identity: Identity = Depends(require_identity),
    store: ListingStore = Depends(get_listing_store),
):
    """Delete the listing and every interest recorded on it."""
    await store.delete(listing_id, identity.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{listing_id}/image", response_model=ListingResponse)
async def upload_listing_image(
    listing_id: UUID,
    file: UploadFile = File(...),
    identity: Identity = Depends(require_identity),
    store: ListingStore = Depends(get_listing_store),
):
    """Upload a new image and attach it to the listing."""
    data = await file.read()
    listing = await store.set_image(
        listing_id, identity.id,
        filename=file.filename or "",
        data=data,
        content_type=file.content_type or "",
    )
    return ListingResponse.model_validate(listing)
