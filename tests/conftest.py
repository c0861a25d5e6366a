"""
Backlog API - Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the test suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── test_settings:   Settings pointing at a SQLite file under tmp_path
    ├── test_app:        App built from test_settings, tables created
    ├── db_session:      Real AsyncSession on the test database
    ├── test_client:     HTTPX AsyncClient talking to test_app
    └── sample_payload:  Valid create/update body
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before any backlog_api import, so code that falls back to get_settings()
# never reads a developer .env or reaches a live database.
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from backlog_api.config import Settings  # noqa: E402
from backlog_api.database import create_all, dispose_engine  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Mock async database session.

    Usage:
        mock_db_session.get.return_value = item
        result = await service.get_item(mock_db_session, item_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def test_settings(tmp_path):
    """Settings for an isolated SQLite database file per test."""
    return Settings(
        app_env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'backlog.db'}",
        log_level="WARNING",
        _env_file=None,
    )


@pytest_asyncio.fixture
async def test_app(test_settings):
    """
    Application wired to the test database, with tables created.

    ASGITransport does not run the lifespan, so the schema is created and the
    engine disposed here.
    """
    from backlog_api.main import create_app

    app = create_app(test_settings)
    await create_all(app.state.engine)
    yield app
    await dispose_engine(app.state.engine)


@pytest_asyncio.fixture
async def db_session(test_app):
    """A real session on the test database, rolled back after the test."""
    async with test_app.state.session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed directly into the app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/backlog-items")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_payload():
    return {"title": "first item", "type": "story", "status": "unstarted"}
