"""Request/response schemas: optional request fields, ORM-backed responses.

Invariants:
    - Request bodies accept missing fields (presence is checked later)
    - Wrong types are rejected by Pydantic
    - Responses read straight from ORM attributes
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from app.schemas.message import MessageCreate, MessageRead
from app.schemas.user import UserCreate, UserRead, UserUpdate


def test_user_create_fields_are_optional():
    body = UserCreate()
    assert body.name is None
    assert body.email is None


def test_user_update_accepts_partial_body():
    assert UserUpdate(email="x@example.com").name is None


def test_message_create_coerces_numeric_string_user_id():
    assert MessageCreate(content="hi", user_id="4").user_id == 4


def test_message_create_rejects_non_numeric_user_id():
    with pytest.raises(ValidationError):
        MessageCreate(content="hi", user_id="abc")


def test_user_create_rejects_non_string_name():
    with pytest.raises(ValidationError):
        UserCreate(name=["Alice"], email="a@example.com")


def test_message_read_embeds_user_from_attributes():
    now = datetime.now(timezone.utc)
    author = SimpleNamespace(id=1, name="Alice", email="alice@example.com")
    row = SimpleNamespace(
        id=9, content="hi", user_id=1, created_at=now, updated_at=now,
        user=author,
    )
    read = MessageRead.model_validate(row)
    assert read.user.name == "Alice"
    assert read.model_dump()["user"] == {
        "id": 1, "name": "Alice", "email": "alice@example.com",
    }


def test_user_read_from_attributes():
    now = datetime.now(timezone.utc)
    row = SimpleNamespace(
        id=1, name="Alice", email="alice@example.com",
        created_at=now, updated_at=now,
    )
    assert UserRead.model_validate(row).id == 1
