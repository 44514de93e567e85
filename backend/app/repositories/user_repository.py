"""User Repository: CRUD for users.

Invariants:
    - list_users orders by ascending id, no pagination
    - update_user applies only the supplied fields
    - delete_user relies on ON DELETE CASCADE to remove the user's messages
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityName, UserId
from app.db.base import utcnow
from app.core.errors import NotFound
from app.models.user import User
from app.repositories.integrity import commit_or_translate

logger = logging.getLogger(__name__)

_ENTITY = EntityName.USER.value


class UserRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_users(self) -> list[User]:
        result = await self._db.execute(select(User).order_by(User.id.asc()))
        return list(result.scalars().all())

    async def create_user(self, name: str, email: str) -> User:
        user = User(name=name, email=email)
        self._db.add(user)
        await commit_or_translate(self._db, _ENTITY)
        logger.info(
            f"User {user.id} created", extra={"entity": _ENTITY, "entity_id": user.id},
        )
        return user

    async def get_user_by_id(self, user_id: UserId | None) -> User | None:
        """Return the user, or None when absent (absence is not an error)."""
        if user_id is None:
            return None
        return await self._db.get(User, user_id)

    async def update_user(
        self, user_id: UserId | None, fields: dict[str, str],
    ) -> User:
        user = await self.get_user_by_id(user_id)
        if user is None:
            raise NotFound(_ENTITY)
        for key, value in fields.items():
            setattr(user, key, value)
        user.updated_at = utcnow()
        await commit_or_translate(self._db, _ENTITY)
        return user

    async def delete_user(self, user_id: UserId | None) -> None:
        user = await self.get_user_by_id(user_id)
        if user is None:
            raise NotFound(_ENTITY)
        await self._db.delete(user)
        await commit_or_translate(self._db, _ENTITY)
        logger.info(
            f"User {user_id} deleted", extra={"entity": _ENTITY, "entity_id": user_id},
        )
