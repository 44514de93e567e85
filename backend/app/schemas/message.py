"""Message Schemas: request bodies and message representation joined with its author."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.schemas.user import UserSummary


class MessageCreate(BaseModel):
    content: str | None = None
    user_id: int | None = None


class MessageUpdate(BaseModel):
    content: str | None = None


class MessageRead(BaseModel):
    """Message response: includes the owning user."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    user_id: int
    created_at: datetime
    updated_at: datetime
    user: UserSummary | None = None
