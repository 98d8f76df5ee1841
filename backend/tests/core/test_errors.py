"""Error Hierarchy: status codes and response envelopes."""

from events_api.core.errors import (
    AttendeeNotInEventError,
    ConstraintKind,
    ConstraintViolationError,
    DatabaseError,
    ErrorCategory,
    ErrorSeverity,
    EventNotFoundError,
    EventsApiError,
    InvalidInputError,
)


def test_event_not_found_response_is_plain_error():
    err = EventNotFoundError(12)
    assert err.http_status == 404
    assert err.event_id == 12
    assert err.to_response() == {"error": "Event not found"}


def test_attendee_not_in_event_message():
    err = AttendeeNotInEventError(event_id=1, attendee_id=2)
    assert err.http_status == 404
    assert err.to_response() == {"error": "Attendee not found for the given event"}


def test_foreign_key_violation_is_conflict():
    err = ConstraintViolationError(ConstraintKind.FOREIGN_KEY)
    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT
    assert err.to_response()["details"] == {"constraint": "foreign_key"}


def test_not_null_violation_is_bad_request():
    err = ConstraintViolationError(ConstraintKind.NOT_NULL)
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION


def test_invalid_input_carries_details():
    err = InvalidInputError("Invalid request data", details=[{"field": "body.title"}])
    assert err.http_status == 400
    assert err.to_response() == {
        "error": "Invalid request data",
        "details": [{"field": "body.title"}],
    }


def test_database_error_is_unavailable():
    err = DatabaseError("Connection or operational error", "execute")
    assert isinstance(err, EventsApiError)
    assert err.http_status == 503
    assert err.message.startswith("Database execute failed")


def test_error_enums_only_carry_raised_members():
    assert {s.value for s in ErrorSeverity} == {"warning", "error", "critical"}
    assert {c.value for c in ErrorCategory} == {
        "validation", "resource_not_found", "conflict", "database",
    }
