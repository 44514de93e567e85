"""Message ORM: persists chat messages written by users.

Invariants:
    - Always belongs to an existing User (user_id FK, enforced by the engine)
    - content is non-nullable text
    - updated_at refreshed on every UPDATE
"""

from datetime import datetime

from sqlalchemy import Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, UTCDateTime, utcnow


class Message(Base):
    """Message entity: a single chat line."""
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False,
        default=utcnow, onupdate=utcnow,
    )

    user: Mapped["User"] = relationship(
        "User", back_populates="messages", lazy="selectin",
    )
