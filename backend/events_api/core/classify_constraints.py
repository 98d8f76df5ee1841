"""Constraint Classification: maps driver integrity failures to ConstraintKind.

Invariants:
    - SQLSTATE wins over message text when both are available
    - Unrecognized failures classify as UNKNOWN (never raises)

Design Decisions:
    - Message fallback covers SQLite, which reports no SQLSTATE
"""

from events_api.core.errors import ConstraintKind

_SQLSTATE_KINDS = {
    "23503": ConstraintKind.FOREIGN_KEY,
    "23505": ConstraintKind.UNIQUE,
    "23502": ConstraintKind.NOT_NULL,
    "23514": ConstraintKind.CHECK,
}

_MESSAGE_KINDS = (
    ("foreign key constraint", ConstraintKind.FOREIGN_KEY),
    ("unique constraint", ConstraintKind.UNIQUE),
    ("not null constraint", ConstraintKind.NOT_NULL),
    ("check constraint", ConstraintKind.CHECK),
)


def classify_constraint(sqlstate: str | None, message: str) -> ConstraintKind:
    """Classify an integrity failure from its SQLSTATE or driver message."""
    if sqlstate and sqlstate in _SQLSTATE_KINDS:
        return _SQLSTATE_KINDS[sqlstate]
    lowered = message.lower()
    for needle, kind in _MESSAGE_KINDS:
        if needle in lowered:
            return kind
    return ConstraintKind.UNKNOWN
