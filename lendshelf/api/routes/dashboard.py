"""Dashboard: the signed-in user's listings, interests received, and interests expressed.

Invariants:
    - Every endpoint requires a signed-in identity
    - Views are scoped to that identity by the projection queries
"""

from fastapi import APIRouter, Depends

from lendshelf.api.dependencies import (
    get_listing_store, get_projection, require_identity,
)
from lendshelf.core.identity import Identity
from lendshelf.schemas.dashboard import MyInterestEntry, ReceivedInterestEntry
from lendshelf.schemas.listing import ListingResponse
from lendshelf.services.dashboard_projection import DashboardProjection
from lendshelf.services.listing_store import ListingStore

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/listings", response_model=list[ListingResponse])
async def my_listings(
    identity: Identity = Depends(require_identity),
    store: ListingStore = Depends(get_listing_store),
):
    listings = await store.list_by_owner(identity.id)
    return [ListingResponse.model_validate(l) for l in listings]


@router.get("/received", response_model=list[ReceivedInterestEntry])
async def interests_received(
    identity: Identity = Depends(require_identity),
    projection: DashboardProjection = Depends(get_projection),
):
    """Interests other people registered on the caller's listings."""
    return await projection.received(identity.id)


@router.get("/mine", response_model=list[MyInterestEntry])
async def my_interests(
    identity: Identity = Depends(require_identity),
    projection: DashboardProjection = Depends(get_projection),
):
    """Listings the caller has shown interest in."""
    return await projection.mine(identity.id)
