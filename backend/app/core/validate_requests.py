"""Request Validation: presence checks applied before the Data Access Layer runs.

Invariants:
    - Blank means None, "" or whitespace only
    - Accepted text values are returned stripped
    - Every failure raises ValidationFailure with the field(s) named in the message
"""

from app.core.errors import ValidationFailure


def _present(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def validate_user_create(
    name: str | None, email: str | None,
) -> tuple[str, str]:
    """Return (name, email) stripped, or raise if either is blank."""
    clean_name, clean_email = _present(name), _present(email)
    if clean_name is None or clean_email is None:
        raise ValidationFailure("Name and email are required")
    return clean_name, clean_email


def build_user_update(name: str | None, email: str | None) -> dict[str, str]:
    """Collect only the supplied fields of a partial user update."""
    fields = {
        key: value for key, value in (
            ("name", _present(name)), ("email", _present(email)),
        )
        if value is not None
    }
    if not fields:
        raise ValidationFailure(
            "At least one field (name or email) is required",
        )
    return fields


def validate_message_create(
    content: str | None, user_id: int | None,
) -> tuple[str, int]:
    clean_content = _present(content)
    if clean_content is None or user_id is None:
        raise ValidationFailure("Content and user_id are required")
    return clean_content, user_id


def validate_message_update(content: str | None) -> str:
    clean_content = _present(content)
    if clean_content is None:
        raise ValidationFailure("Content is required")
    return clean_content
