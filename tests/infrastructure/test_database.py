"""Database Session Manager: fallback error mapping and readiness check."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from app.core.errors import ResourceNotFoundError, StorageError
from app.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_unmapped_sqlalchemy_error_becomes_storage_error(manager):
    with pytest.raises(StorageError) as exc:
        async with manager.session():
            raise OperationalError("SELECT 1", {}, Exception("down"))

    assert exc.value.http_status == 503
    assert exc.value.operation == "execute"
    assert isinstance(exc.value.__cause__, OperationalError)


async def test_domain_errors_pass_through_session_unchanged(manager):
    with pytest.raises(ResourceNotFoundError):
        async with manager.session():
            raise ResourceNotFoundError("Event", "missing")


async def test_session_executes_queries(manager):
    async with manager.session() as db:
        result = await db.execute(text("SELECT 1"))
        assert result.scalar_one() == 1


async def test_health_check_reports_working_database(manager):
    assert await manager.health_check() is True
