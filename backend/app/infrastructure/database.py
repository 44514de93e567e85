"""Database Session Manager: async engine, sessions, schema bootstrap and error classification.

Invariants:
    - Every session rolls back on exception (no partial commits leak)
    - SQLite connections run with PRAGMA foreign_keys=ON (FK + cascade enforced by the engine)
    - classify_integrity_error() reads driver error codes first, message text last
    - One manager per process, owned by the FastAPI lifespan (stored on app.state)

Design Decisions:
    - Manager injected via app.state instead of a module-level singleton:
      tests build their own manager against a temporary database
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.errors import ErrorKind
from app.db.base import Base
from app.models import User

logger = logging.getLogger(__name__)

SAMPLE_USERS = (
    ("Alice", "alice@example.com"),
    ("Bob", "bob@example.com"),
    ("Charlie", "charlie@example.com"),
    ("Diana", "diana@example.com"),
)

# SQLite extended result names / PostgreSQL SQLSTATE classes
_UNIQUE_CODES = frozenset({
    "SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY", "23505",
})
_FOREIGN_KEY_CODES = frozenset({"SQLITE_CONSTRAINT_FOREIGNKEY", "23503"})


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _ensure_sqlite_directory(database_url: str) -> None:
    database = make_url(database_url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.is_sqlite = database_url.startswith("sqlite")
        if self.is_sqlite:
            _ensure_sqlite_directory(database_url)
            self.engine = create_async_engine(database_url)
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
        else:
            self.engine = create_async_engine(
                database_url,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables (no-op for tables that already exist)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready")

    async def seed_sample_users(self) -> None:
        """Insert the sample users, skipping emails that already exist."""
        insert = sqlite.insert if self.is_sqlite else postgresql.insert
        statement = insert(User).on_conflict_do_nothing(
            index_elements=[User.email],
        )
        async with self.session() as db:
            for name, email in SAMPLE_USERS:
                await db.execute(statement.values(name=name, email=email))
            await db.commit()
        logger.info("Sample users seeded")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


def classify_integrity_error(exc: IntegrityError) -> ErrorKind | None:
    """Map a storage-engine constraint failure onto a semantic error kind.

    Returns None when the failure is not a uniqueness or foreign-key problem
    (e.g. NOT NULL), so callers let it propagate unchanged.
    """
    orig = exc.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        code = (
            getattr(candidate, "sqlite_errorname", None)
            or getattr(candidate, "sqlstate", None)
            or getattr(candidate, "pgcode", None)
        )
        if code in _UNIQUE_CODES:
            return ErrorKind.UNIQUE_VIOLATION
        if code in _FOREIGN_KEY_CODES:
            return ErrorKind.FOREIGN_KEY_VIOLATION

    message = str(orig).upper()
    if "UNIQUE" in message or "DUPLICATE KEY" in message:
        return ErrorKind.UNIQUE_VIOLATION
    if "FOREIGN KEY" in message:
        return ErrorKind.FOREIGN_KEY_VIOLATION
    return None


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
