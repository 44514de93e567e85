"""Domain Types: identity types and entity names shared across layers.

Invariants:
    - UserId, MessageId wrap positive integers assigned by the storage engine
    - parse_identity never raises: malformed input becomes None (a lookup miss)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: entity names go straight into JSON error bodies
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
MessageId = NewType("MessageId", int)

_IDENTITY_PATTERN = re.compile(r"^[0-9]+$")

# Largest value an INTEGER primary key can hold (signed 64-bit)
MAX_IDENTITY = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class EntityName(str, Enum):
    """Entities exposed by the API: used in error messages."""
    USER = "User"
    MESSAGE = "Message"


def parse_identity(raw: str | None) -> int | None:
    """Parse a path-parameter identity.

    Only plain decimal strings of a positive integer no larger than
    MAX_IDENTITY are accepted. Anything else ("abc", "-1", "1.5", "", 10**20)
    returns None so callers treat it as not found.
    """
    if raw is None:
        return None
    candidate = raw.strip()
    if not _IDENTITY_PATTERN.match(candidate):
        return None
    value = int(candidate)
    return value if is_storable_identity(value) else None


def is_storable_identity(value: int) -> bool:
    """True when value could be the id of a stored row."""
    return 0 < value <= MAX_IDENTITY
