"""Service test fixtures: async DB + FastAPI test clients in both error modes.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so the readiness probe sees the test engine
    - client serves the default (legacy) app; typed_client a typed-mode app
    - file_client serves the legacy app on a file-backed DB for concurrency tests

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so rows committed by a request are visible to test_db
    - PostgreSQL-only behavior (row locks) not exercised here
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
from app.config import Settings
from app.core.domain_types import ErrorMode
from app.db.base import Base
from app.db.session import create_session_factory
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.main import app, create_app
from app.models.event import Event

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL, echo=False, poolclass=StaticPool,
    )
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


async def _serve(application, test_engine, test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    try:
        async with AsyncClient(
            transport=ASGITransport(app=application), base_url="http://test",
        ) as c:
            yield c
    finally:
        application.dependency_overrides.clear()
        db_module.db_manager = original_manager


@pytest.fixture
async def client(test_engine, test_session_factory):
    """Legacy-mode client: every failure is a 500 "Error!"."""
    async for c in _serve(app, test_engine, test_session_factory):
        yield c


@pytest.fixture
async def typed_client(test_engine, test_session_factory):
    """Typed-mode client: failures carry their taxonomy status."""
    typed_app = create_app(Settings(
        database_url=TEST_DATABASE_URL, error_mode=ErrorMode.TYPED,
    ))
    async for c in _serve(typed_app, test_engine, test_session_factory):
        yield c


@pytest.fixture
async def seed_event(test_db):
    """Insert one event directly into the test DB."""
    event = Event(
        event_id="launch-2026",
        attributes={"name": "Product launch", "venue": "Hall A"},
    )
    test_db.add(event)
    await test_db.commit()
    return event


@pytest.fixture
async def file_client(tmp_path):
    """Legacy-mode client on a file-backed SQLite database.

    Each session opens its own connection, so concurrent requests contend
    for the database write lock the way separate workers would.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'roster.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        async for c in _serve(app, engine, create_session_factory(engine)):
            yield c
    finally:
        await engine.dispose()
