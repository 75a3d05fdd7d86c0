"""Settings: URL normalization and error mode parsing from the environment."""

from app.config import Settings
from app.core.domain_types import ErrorMode


def test_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@host:5432/roster")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/roster"


def test_sqlite_url_left_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///roster.db")
    assert settings.database_url == "sqlite+aiosqlite:///roster.db"


def test_error_mode_defaults_to_legacy(monkeypatch):
    monkeypatch.delenv("ERROR_MODE", raising=False)
    assert Settings().error_mode == ErrorMode.LEGACY


def test_error_mode_read_from_env(monkeypatch):
    monkeypatch.setenv("ERROR_MODE", "typed")
    assert Settings().error_mode == ErrorMode.TYPED
