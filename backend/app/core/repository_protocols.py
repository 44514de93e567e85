"""Boundary Protocols: contracts for the Data Access Layer.

Invariants:
    - API routes depend on these Protocols, not on concrete repositories
    - Absence on lookup is None; absence on mutation raises NotFound
    - Storage failures surface as UniqueViolation / NotFound / ForeignKeyViolation,
      anything else propagates unchanged

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Any, Protocol, Sequence

from app.core.domain_types import UserId, MessageId


class UserStore(Protocol):
    """Contract for user persistence."""
    async def list_users(self) -> Sequence[Any]: ...
    async def create_user(self, name: str, email: str) -> Any: ...
    async def get_user_by_id(self, user_id: UserId | None) -> Any | None: ...
    async def update_user(
        self, user_id: UserId | None, fields: dict[str, str],
    ) -> Any: ...
    async def delete_user(self, user_id: UserId | None) -> None: ...


class MessageStore(Protocol):
    """Contract for message persistence."""
    async def list_messages(self) -> Sequence[Any]: ...
    async def get_message_by_id(
        self, message_id: MessageId | None,
    ) -> Any | None: ...
    async def create_message(self, content: str, user_id: UserId) -> Any: ...
    async def update_message(
        self, message_id: MessageId | None, content: str,
    ) -> Any: ...
    async def delete_message(self, message_id: MessageId | None) -> None: ...
    async def list_messages_by_user(
        self, user_id: UserId | None,
    ) -> Sequence[Any]: ...
