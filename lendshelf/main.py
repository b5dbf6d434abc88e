"""LendShelf API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LendShelfError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Uploaded images served from blob_storage_dir when it exists locally
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from lendshelf.api.error_handlers import register_error_handlers
from lendshelf.infrastructure import database
from lendshelf.infrastructure.observability import setup_logging
from lendshelf.config import get_settings
from lendshelf.api.routes import dashboard, health, interests, listings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("LendShelf API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("LendShelf API shutting down")


app = FastAPI(
    title="LendShelf API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(listings.router)
app.include_router(interests.router)
app.include_router(dashboard.router)

register_error_handlers(app)

# Local blob store: serve uploaded images
# ADR: mounted AFTER API routes so /api/v1/* takes precedence
if os.path.isdir(settings.blob_storage_dir):
    app.mount(
        settings.blob_public_base_url,
        StaticFiles(directory=settings.blob_storage_dir),
        name="uploads",
    )
