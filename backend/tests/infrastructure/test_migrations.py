"""Alembic migrations — upgrade/downgrade against a fresh SQLite file.

Invariants:
    - upgrade head creates exactly the tables the ORM models declare
    - every model column exists in the migrated table
    - messages.user_id cascades on user delete
    - downgrade base removes both tables
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text

from app.config import get_settings
from app.db.base import Base

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "alembic"


@pytest.fixture
def migration_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temp file for alembic's env.py."""
    db_file = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")
    get_settings.cache_clear()
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    yield config, db_file
    get_settings.cache_clear()


def _sync_engine(db_file: Path):
    return create_engine(f"sqlite:///{db_file}")


def test_upgrade_matches_models(migration_db):
    config, db_file = migration_db
    command.upgrade(config, "head")

    engine = _sync_engine(db_file)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names()) - {"alembic_version"}
        assert tables == set(Base.metadata.tables)
        for name, table in Base.metadata.tables.items():
            migrated = {c["name"] for c in inspector.get_columns(name)}
            assert migrated == {c.name for c in table.columns}
        fks = inspector.get_foreign_keys("messages")
        assert fks[0]["referred_table"] == "users"
        assert fks[0]["options"].get("ondelete") == "CASCADE"
    finally:
        engine.dispose()


def test_migrated_schema_cascades_user_delete(migration_db):
    config, db_file = migration_db
    command.upgrade(config, "head")

    engine = _sync_engine(db_file)
    try:
        with engine.begin() as conn:
            conn.execute(text("PRAGMA foreign_keys=ON"))
            conn.execute(text(
                "INSERT INTO users (id, name, email) VALUES (1, 'Alice', 'alice@example.com')",
            ))
            conn.execute(text(
                "INSERT INTO messages (content, user_id) VALUES ('hi', 1)",
            ))
            conn.execute(text("DELETE FROM users WHERE id = 1"))
            remaining = conn.execute(text("SELECT COUNT(*) FROM messages")).scalar_one()
        assert remaining == 0
    finally:
        engine.dispose()


def test_downgrade_removes_tables(migration_db):
    config, db_file = migration_db
    command.upgrade(config, "head")
    command.downgrade(config, "base")

    engine = _sync_engine(db_file)
    try:
        tables = set(inspect(engine).get_table_names()) - {"alembic_version"}
        assert tables == set()
    finally:
        engine.dispose()
