"""Constraint Classification: SQLSTATE and SQLite message mapping."""

import pytest

from events_api.core.classify_constraints import classify_constraint
from events_api.core.errors import ConstraintKind


@pytest.mark.parametrize(
    ("sqlstate", "expected"),
    [
        ("23503", ConstraintKind.FOREIGN_KEY),
        ("23505", ConstraintKind.UNIQUE),
        ("23502", ConstraintKind.NOT_NULL),
        ("23514", ConstraintKind.CHECK),
    ],
)
def test_postgres_sqlstates(sqlstate, expected):
    assert classify_constraint(sqlstate, "") == expected


def test_sqlite_foreign_key_message():
    assert (
        classify_constraint(None, "FOREIGN KEY constraint failed")
        == ConstraintKind.FOREIGN_KEY
    )


def test_sqlite_not_null_message():
    assert (
        classify_constraint(None, "NOT NULL constraint failed: events.title")
        == ConstraintKind.NOT_NULL
    )


def test_sqlstate_wins_over_message():
    assert (
        classify_constraint("23505", "FOREIGN KEY constraint failed")
        == ConstraintKind.UNIQUE
    )


def test_unrecognized_failure_is_unknown():
    assert classify_constraint("99999", "something else") == ConstraintKind.UNKNOWN
    assert classify_constraint(None, "") == ConstraintKind.UNKNOWN
