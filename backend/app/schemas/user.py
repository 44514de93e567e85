"""User Schemas: request bodies and public representation of a user.

Invariants:
    - Request fields are optional: a missing field is a 400 with a named field,
      not a generic type error
    - UserRead never exposes relationships
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    name: str | None = None
    email: str | None = None


class UserUpdate(BaseModel):
    name: str | None = None
    email: str | None = None


class UserRead(BaseModel):
    """User response: public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class UserSummary(BaseModel):
    """Author block embedded in message responses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
