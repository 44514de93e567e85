"""Message Repository: CRUD for messages, always returned with their author.

Invariants:
    - list_messages / list_messages_by_user order by created_at desc (id desc on ties)
    - create_message fails with ForeignKeyViolation when user_id does not exist,
      and nothing is persisted
    - Returned messages have `user` loaded (selectin), safe to serialize after the session closes
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    EntityName, MessageId, UserId, is_storable_identity,
)
from app.core.errors import ForeignKeyViolation, NotFound
from app.db.base import utcnow
from app.models.message import Message
from app.repositories.integrity import commit_or_translate

_ENTITY = EntityName.MESSAGE.value

_NEWEST_FIRST = (Message.created_at.desc(), Message.id.desc())


class MessageRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_messages(self) -> list[Message]:
        result = await self._db.execute(select(Message).order_by(*_NEWEST_FIRST))
        return list(result.scalars().all())

    async def list_messages_by_user(
        self, user_id: UserId | None,
    ) -> list[Message]:
        if user_id is None:
            return []
        result = await self._db.execute(
            select(Message)
            .where(Message.user_id == user_id)
            .order_by(*_NEWEST_FIRST),
        )
        return list(result.scalars().all())

    async def get_message_by_id(
        self, message_id: MessageId | None,
    ) -> Message | None:
        if message_id is None:
            return None
        return await self._db.get(Message, message_id)

    async def create_message(self, content: str, user_id: UserId) -> Message:
        if not is_storable_identity(user_id):
            raise ForeignKeyViolation()
        message = Message(content=content, user_id=user_id)
        self._db.add(message)
        await commit_or_translate(self._db, _ENTITY)
        return await self._reload(message.id)

    async def update_message(
        self, message_id: MessageId | None, content: str,
    ) -> Message:
        message = await self.get_message_by_id(message_id)
        if message is None:
            raise NotFound(_ENTITY)
        message.content = content
        message.updated_at = utcnow()
        await commit_or_translate(self._db, _ENTITY)
        return await self._reload(message.id)

    async def delete_message(self, message_id: MessageId | None) -> None:
        message = await self.get_message_by_id(message_id)
        if message is None:
            raise NotFound(_ENTITY)
        await self._db.delete(message)
        await commit_or_translate(self._db, _ENTITY)

    async def _reload(self, message_id: int) -> Message:
        """Re-read a just-written row so `user` and timestamps are current."""
        result = await self._db.execute(
            select(Message)
            .where(Message.id == message_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one()
