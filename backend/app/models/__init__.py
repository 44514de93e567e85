"""ORM Models: SQLAlchemy declarative models for users and messages.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root; every Message belongs to exactly one User

Design Decisions:
    - One file per entity
    - All models imported here so string-based relationship() references resolve
      before any query runs
"""

from app.models.user import User  # noqa: F401
from app.models.message import Message  # noqa: F401
