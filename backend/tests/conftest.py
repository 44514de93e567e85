"""Root conftest: shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - FK enforcement is on (DatabaseSessionManager sets PRAGMA foreign_keys)
    - The client's app uses the same manager as test_db, so route writes are
      visible to direct DB assertions
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///./data/test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'ice_breakun_test.db'}",
    )
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def app(db_manager):
    """Fresh app wired to the test database (lifespan not run)."""
    application = create_app()
    application.state.db_manager = db_manager
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """HTTP client against the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
