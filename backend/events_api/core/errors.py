"""Error Hierarchy: typed, categorized exceptions for all Events API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() always carries a top-level "error" string
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EventsApiError base: one global handler catches all
    - Flat {"error": message} envelope: clients already match on the message text
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


class ConstraintKind(str, Enum):
    """Kinds of integrity constraint a write can violate."""
    FOREIGN_KEY = "foreign_key"
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    CHECK = "check"
    UNKNOWN = "unknown"


class EventsApiError(Exception):
    """Base exception for all Events API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(EventsApiError):
    """Request data failed validation."""
    def __init__(self, message: str, details: list[dict] | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, details,
        )


class ResourceNotFoundError(EventsApiError):
    """Requested resource does not exist."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class EventNotFoundError(ResourceNotFoundError):
    def __init__(self, event_id: int):
        super().__init__("Event not found")
        self.event_id = event_id


class AttendeeNotInEventError(ResourceNotFoundError):
    def __init__(self, event_id: int, attendee_id: int):
        super().__init__("Attendee not found for the given event")
        self.event_id = event_id
        self.attendee_id = attendee_id


_CONSTRAINT_STATUS = {
    ConstraintKind.FOREIGN_KEY: 409,
    ConstraintKind.UNIQUE: 409,
    ConstraintKind.NOT_NULL: 400,
    ConstraintKind.CHECK: 400,
    ConstraintKind.UNKNOWN: 409,
}

_CONSTRAINT_MESSAGES = {
    ConstraintKind.FOREIGN_KEY: "Referenced record does not exist",
    ConstraintKind.UNIQUE: "Record already exists",
    ConstraintKind.NOT_NULL: "Required field is missing",
    ConstraintKind.CHECK: "Field value is not allowed",
    ConstraintKind.UNKNOWN: "Integrity constraint violated",
}


class ConstraintViolationError(EventsApiError):
    """A write was rejected by a database integrity constraint."""
    def __init__(self, kind: ConstraintKind):
        status = _CONSTRAINT_STATUS[kind]
        super().__init__(
            _CONSTRAINT_MESSAGES[kind],
            "CONSTRAINT_VIOLATION",
            ErrorCategory.CONFLICT if status == 409 else ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, status, {"constraint": kind.value},
        )
        self.kind = kind


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EventsApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
