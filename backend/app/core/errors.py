"""Error Taxonomy: closed set of semantic error kinds for all Ice Breakun failures.

Invariants:
    - Every error carries exactly one ErrorKind; the set of kinds is closed (5 members)
    - HTTP_STATUS_BY_KIND is total over ErrorKind
    - to_response() always produces {"error": <message>} and nothing else
    - No internal details (SQL, driver codes, stack traces) in user-facing messages

Design Decisions:
    - Single hierarchy with IceBreakunError base: FastAPI global handler catches all
    - Handlers switch on `kind` (enum), never on message strings or driver codes
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """Semantic error kinds, independent of the storage engine's representation."""
    VALIDATION_FAILURE = "validation_failure"
    UNIQUE_VIOLATION = "unique_violation"
    NOT_FOUND = "not_found"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    INTERNAL_FAILURE = "internal_failure"


HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_FAILURE: 400,
    ErrorKind.UNIQUE_VIOLATION: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FOREIGN_KEY_VIOLATION: 404,
    ErrorKind.INTERNAL_FAILURE: 500,
}


class IceBreakunError(Exception):
    """Base exception for all Ice Breakun errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.severity = severity

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    @property
    def code(self) -> str:
        return self.kind.value.upper()

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationFailure(IceBreakunError):
    """Client omitted a required field."""
    def __init__(self, message: str):
        super().__init__(
            message, ErrorKind.VALIDATION_FAILURE, ErrorSeverity.WARNING,
        )


class UniqueViolation(IceBreakunError):
    """A unique key (user email) is already taken."""
    def __init__(self, entity: str):
        super().__init__(
            f"{entity} already exists", ErrorKind.UNIQUE_VIOLATION,
            ErrorSeverity.WARNING,
        )
        self.entity = entity


class NotFound(IceBreakunError):
    """Referenced identity is absent."""
    def __init__(self, entity: str):
        super().__init__(
            f"{entity} not found", ErrorKind.NOT_FOUND, ErrorSeverity.WARNING,
        )
        self.entity = entity


class ForeignKeyViolation(IceBreakunError):
    """Referenced related entity is absent."""
    def __init__(self):
        super().__init__(
            "Related record not found", ErrorKind.FOREIGN_KEY_VIOLATION,
            ErrorSeverity.WARNING,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalFailure(IceBreakunError):
    """Any unanticipated storage or runtime failure."""
    def __init__(self, verb: str, entity: str):
        super().__init__(
            f"Failed to {verb} {entity}", ErrorKind.INTERNAL_FAILURE,
            ErrorSeverity.CRITICAL,
        )
        self.verb = verb
        self.entity = entity
