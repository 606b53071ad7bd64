"""Settings — environment overrides and URL rewriting."""

from usercrud.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    s = Settings(database_url="postgresql://u:p@db:5432/users")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/users"


def test_sqlite_url_left_alone():
    s = Settings(database_url="sqlite+aiosqlite:///./users.db")
    assert s.database_url == "sqlite+aiosqlite:///./users.db"


def test_env_override(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE_CREATE_TABLES", "false")
    s = Settings()
    assert s.log_level == "DEBUG"
    assert s.database_create_tables is False
