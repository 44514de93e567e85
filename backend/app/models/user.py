"""User ORM: persists chat participants.

Invariants:
    - id is an autoincrement integer primary key
    - email is unique across all users
    - updated_at >= created_at; refreshed on every UPDATE
    - deleting a user deletes its messages (DB-level ON DELETE CASCADE)

Design Decisions:
    - passive_deletes=True: the engine performs the cascade, the ORM does not
      load messages just to delete them
"""

from datetime import datetime

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, UTCDateTime, utcnow


class User(Base):
    """User entity: owns zero or more messages."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False,
        default=utcnow, onupdate=utcnow,
    )

    messages: Mapped[list["Message"]] = relationship(
        "Message", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
    )
