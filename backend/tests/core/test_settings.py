"""Settings: database URL normalization and defaults."""

from app.config import Settings


def test_default_database_is_file_sqlite():
    settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///./data/x.db")
    assert settings.database_url.startswith("sqlite+aiosqlite:///")


def test_prisma_file_url_maps_to_aiosqlite():
    settings = Settings(_env_file=None, database_url="file:/app/prisma/data/ice_breakun.db")
    assert settings.database_url == "sqlite+aiosqlite:////app/prisma/data/ice_breakun.db"


def test_plain_sqlite_url_maps_to_aiosqlite():
    settings = Settings(_env_file=None, database_url="sqlite:///./data/app.db")
    assert settings.database_url == "sqlite+aiosqlite:///./data/app.db"


def test_postgres_url_maps_to_asyncpg():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@db:5432/ice")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/ice"


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.port == 3001
    assert settings.seed_sample_users is False
    assert "http://localhost:3000" in settings.cors_origins
