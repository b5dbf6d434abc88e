"""Request Dependencies: identity resolution and per-request service wiring.

Invariants:
    - Identity comes from HeaderIdentityProvider; None means anonymous
    - require_identity raises AuthenticationError (401) for anonymous callers
    - Every service in one request shares the same AsyncSession
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from lendshelf.config import get_settings
from lendshelf.core.errors import AuthenticationError
from lendshelf.core.identity import Identity
from lendshelf.core.repository_protocols import IdentityProvider
from lendshelf.infrastructure.blob_store import LocalBlobStore
from lendshelf.infrastructure.database import get_db
from lendshelf.infrastructure.identity_provider import HeaderIdentityProvider
from lendshelf.services.dashboard_projection import DashboardProjection
from lendshelf.services.interest_ledger import InterestLedger
from lendshelf.services.interest_submission import InterestSubmission
from lendshelf.services.listing_store import ListingStore


def get_identity_provider() -> HeaderIdentityProvider:
    settings = get_settings()
    return HeaderIdentityProvider(
        settings.identity_header, settings.identity_email_header,
    )


def get_identity(
    request: Request,
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity | None:
    return provider.current_identity(request.headers)


def require_identity(
    identity: Identity | None = Depends(get_identity),
) -> Identity:
    if identity is None:
        raise AuthenticationError()
    return identity


def get_blob_store() -> LocalBlobStore:
    settings = get_settings()
    return LocalBlobStore(
        settings.blob_storage_dir,
        settings.blob_public_base_url,
        settings.max_upload_bytes,
    )


def get_ledger(db: AsyncSession = Depends(get_db)) -> InterestLedger:
    return InterestLedger(db)


def get_listing_store(
    db: AsyncSession = Depends(get_db),
    ledger: InterestLedger = Depends(get_ledger),
    blob_store: LocalBlobStore = Depends(get_blob_store),
) -> ListingStore:
    return ListingStore(db, ledger=ledger, blob_store=blob_store)


def get_submission(
    listings: ListingStore = Depends(get_listing_store),
    ledger: InterestLedger = Depends(get_ledger),
) -> InterestSubmission:
    return InterestSubmission(
        listings, ledger,
        allow_self_interest=get_settings().allow_self_interest,
    )


def get_projection(
    listings: ListingStore = Depends(get_listing_store),
    ledger: InterestLedger = Depends(get_ledger),
) -> DashboardProjection:
    return DashboardProjection(listings, ledger)
