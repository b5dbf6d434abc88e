"""Service test fixtures: async DB, stores, and a FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test DB
    - Blob uploads land in a per-test temporary directory

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Identity is sent the way the auth gateway sends it: an X-User-Id header
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from lendshelf.api.dependencies import get_blob_store
from lendshelf.core.domain_types import ContactDetails
from lendshelf.db.base import Base
from lendshelf.db.session import create_engine_for, create_session_factory
from lendshelf.infrastructure.blob_store import LocalBlobStore
from lendshelf.infrastructure.database import get_db
import lendshelf.models  # noqa: F401
from lendshelf.main import app
from lendshelf.services.dashboard_projection import DashboardProjection
from lendshelf.services.interest_ledger import InterestLedger
from lendshelf.services.interest_submission import InterestSubmission
from lendshelf.services.listing_store import ListingStore

from tests.services.actors import OWNER


@pytest.fixture
def today() -> date:
    return date.today()


@pytest.fixture
def tomorrow(today) -> date:
    return today + timedelta(days=1)


@pytest.fixture
def alice() -> ContactDetails:
    return ContactDetails(name="Alice", email="a@x.com")


@pytest.fixture
async def test_engine():
    engine = create_engine_for("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def ledger(test_db) -> InterestLedger:
    return InterestLedger(test_db)


@pytest.fixture
def blob_store(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(str(tmp_path / "blobs"), "/uploads", 1024)


@pytest.fixture
def listings(test_db, ledger, blob_store) -> ListingStore:
    return ListingStore(test_db, ledger=ledger, blob_store=blob_store)


@pytest.fixture
def submission(listings, ledger) -> InterestSubmission:
    return InterestSubmission(listings, ledger)


@pytest.fixture
def projection(listings, ledger) -> DashboardProjection:
    return DashboardProjection(listings, ledger)


@pytest.fixture
async def drill(listings):
    """Owner's loan listing used by most scenarios."""
    return await listings.create(
        OWNER.id, {"title": "Drill", "description": "Cordless", "price": Decimal("25.00")},
    )


@pytest.fixture
async def client(test_session_factory, blob_store):
    """FastAPI test client with DB and blob store dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
