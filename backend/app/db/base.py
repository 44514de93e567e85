"""SQLAlchemy Declarative Base: shared base class and column types for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - UTCDateTime values are always timezone-aware (UTC) when loaded, even on
      SQLite, which stores datetimes without an offset
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Base class for all Ice Breakun ORM models."""
    pass


class UTCDateTime(TypeDecorator):
    """DateTime stored in UTC and returned timezone-aware."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


def utcnow() -> datetime:
    """Timezone-aware now() used for created_at/updated_at defaults."""
    return datetime.now(timezone.utc)
