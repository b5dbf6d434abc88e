"""Async Session Factory: async DB sessions for direct usage outside FastAPI.

Invariants:
    - SQLite connections always run with foreign keys enforced, so the
      interests -> listings cascade behaves the same as on PostgreSQL
    - Meant for scripts, migrations, and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: this is a convenience for non-FastAPI
      contexts (ADR: alembic and test fixtures need a raw session factory)
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on PRAGMA foreign_keys for every new SQLite connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine_for(database_url: str, **kwargs) -> AsyncEngine:
    """Create an async engine with dialect-specific connection setup applied."""
    engine = create_async_engine(database_url, **kwargs)
    enable_sqlite_foreign_keys(engine)
    return engine


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to `engine`."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
