"""Message Routes: CRUD endpoints for messages under /api/v1/messages.

Invariants:
    - Every returned message embeds its author under "user"
    - Creating a message for an unknown user_id → 404 "Related record not found"
    - Malformed path ids look up as not found; for /user/{id} that is an empty list
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.error_handlers import internal_failure_guard
from app.core.domain_types import EntityName, MessageId, UserId, parse_identity
from app.core.errors import NotFound
from app.core.repository_protocols import MessageStore
from app.core.validate_requests import (
    validate_message_create, validate_message_update,
)
from app.infrastructure.database import get_db
from app.repositories.message_repository import MessageRepository
from app.schemas.message import MessageCreate, MessageRead, MessageUpdate

router = APIRouter(prefix="/api/v1/messages", tags=["messages"])


def get_message_store(db: AsyncSession = Depends(get_db)) -> MessageStore:
    return MessageRepository(db)


@router.get("")
async def list_messages(messages: MessageStore = Depends(get_message_store)):
    """List all messages, newest first, each joined with its author."""
    with internal_failure_guard("fetch", "messages"):
        found = await messages.list_messages()
    return {"data": [MessageRead.model_validate(m) for m in found]}


@router.get("/user/{user_id}")
async def list_user_messages(
    user_id: str, messages: MessageStore = Depends(get_message_store),
):
    parsed = parse_identity(user_id)
    with internal_failure_guard("fetch", "user messages"):
        found = await messages.list_messages_by_user(
            UserId(parsed) if parsed is not None else None,
        )
    return {"data": [MessageRead.model_validate(m) for m in found]}


@router.get("/{message_id}")
async def get_message(
    message_id: str, messages: MessageStore = Depends(get_message_store),
):
    with internal_failure_guard("fetch", "message"):
        message = await messages.get_message_by_id(_message_id(message_id))
    if message is None:
        raise NotFound(EntityName.MESSAGE.value)
    return {"data": MessageRead.model_validate(message)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_message(
    body: MessageCreate, messages: MessageStore = Depends(get_message_store),
):
    content, user_id = validate_message_create(body.content, body.user_id)
    with internal_failure_guard("create", "message"):
        message = await messages.create_message(content, UserId(user_id))
    return {
        "message": "Message created",
        "data": MessageRead.model_validate(message),
    }


@router.put("/{message_id}")
async def update_message(
    message_id: str, body: MessageUpdate,
    messages: MessageStore = Depends(get_message_store),
):
    content = validate_message_update(body.content)
    with internal_failure_guard("update", "message"):
        message = await messages.update_message(
            _message_id(message_id), content,
        )
    return {
        "message": "Message updated",
        "data": MessageRead.model_validate(message),
    }


@router.delete("/{message_id}")
async def delete_message(
    message_id: str, messages: MessageStore = Depends(get_message_store),
):
    with internal_failure_guard("delete", "message"):
        await messages.delete_message(_message_id(message_id))
    return {"message": "Message deleted"}


def _message_id(raw: str) -> MessageId | None:
    parsed = parse_identity(raw)
    return MessageId(parsed) if parsed is not None else None
