"""User Routes: CRUD endpoints for users under /api/v1/users.

Invariants:
    - Presence validation runs before any storage call
    - Malformed path ids look up as not found (no distinct 400)
    - Success envelopes use "data"; mutations add a "message" confirmation
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.error_handlers import internal_failure_guard
from app.core.domain_types import EntityName, UserId, parse_identity
from app.core.errors import NotFound
from app.core.repository_protocols import UserStore
from app.core.validate_requests import build_user_update, validate_user_create
from app.infrastructure.database import get_db
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    return UserRepository(db)


@router.get("")
async def list_users(users: UserStore = Depends(get_user_store)):
    """List all users by ascending id."""
    with internal_failure_guard("fetch", "users"):
        found = await users.list_users()
    return {"data": [UserRead.model_validate(u) for u in found]}


@router.get("/{user_id}")
async def get_user(user_id: str, users: UserStore = Depends(get_user_store)):
    with internal_failure_guard("fetch", "user"):
        user = await users.get_user_by_id(_user_id(user_id))
    if user is None:
        raise NotFound(EntityName.USER.value)
    return {"data": UserRead.model_validate(user)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate, users: UserStore = Depends(get_user_store),
):
    name, email = validate_user_create(body.name, body.email)
    with internal_failure_guard("create", "user"):
        user = await users.create_user(name, email)
    return {"message": "User created", "data": UserRead.model_validate(user)}


@router.put("/{user_id}")
async def update_user(
    user_id: str, body: UserUpdate,
    users: UserStore = Depends(get_user_store),
):
    """Partial update: only non-blank fields are applied."""
    fields = build_user_update(body.name, body.email)
    with internal_failure_guard("update", "user"):
        user = await users.update_user(_user_id(user_id), fields)
    return {"message": "User updated", "data": UserRead.model_validate(user)}


@router.delete("/{user_id}")
async def delete_user(user_id: str, users: UserStore = Depends(get_user_store)):
    """Delete a user; the engine cascades the delete to their messages."""
    with internal_failure_guard("delete", "user"):
        await users.delete_user(_user_id(user_id))
    return {"message": "User deleted"}


def _user_id(raw: str) -> UserId | None:
    parsed = parse_identity(raw)
    return UserId(parsed) if parsed is not None else None
