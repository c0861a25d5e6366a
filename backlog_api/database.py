"""
Backlog API - Database Engine & Session Management
==================================================

What:  Async SQLAlchemy engine, session factory, declarative base, and the
       per-request session dependency.
How:   `create_app()` builds one engine and one session factory at startup and
       stores both on `app.state`. `get_db_session()` reads them back from the
       current request, so handlers never reach for a module-level engine.
When:  Engine once per process; sessions once per request.

Connection Pooling:
    PostgreSQL: pool_size + max_overflow connections, pre-ping, hourly recycle.
    SQLite:     driver defaults (pool sizing does not apply to file databases).
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from backlog_api.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for autogenerate.
    """
    pass


# ── Engine Construction ───────────────────────────────────────────────────
def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine (connection pool) for the configured database.

    SQL echo follows LOG_LEVEL=DEBUG.
    """
    engine_kwargs = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to `engine`.

    expire_on_commit=False keeps entity attributes readable after the
    service commits, while the response is being serialized.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the factory held on `request.app.state`
        2. Yields it to the route handler
        3. On error: rolls back and re-raises for the global handlers
        4. Always: closes the session (returns the connection to the pool)

    The session is never committed here. Cleanup of a yield dependency runs
    after the response has been sent, so write operations commit in the
    service layer (see BacklogItemService).

    Example usage in a route:
        async def list_items(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_all(engine: AsyncEngine) -> None:
    """Create every table registered on `Base.metadata` that does not exist yet."""
    # Model modules must be imported so their tables are registered.
    from backlog_api.models import backlog_item  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(engine: AsyncEngine) -> None:
    """Run `SELECT 1`; raises whatever the driver raises when the database is unreachable."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close all pooled connections. Called during application shutdown."""
    await engine.dispose()
