"""Structured Logging: JSONFormatter output shape."""

import json
import logging

import pytest

from events_api.infrastructure.observability import (
    JSONFormatter, _EventsApiHandler, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "events_api.services.manage_events", logging.INFO, __file__, 1,
        "Event created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "events_api.services.manage_events"
    assert log["message"] == "Event created"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(event_id=3, error_code="RESOURCE_NOT_FOUND", secret="x"),
    ))
    assert log["event_id"] == 3
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert "secret" not in log
    assert "attendee_id" not in log


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_twice_keeps_one_handler(restore_root_logger):
    setup_logging("INFO", "json")
    setup_logging("DEBUG", "text")
    added = [
        h for h in restore_root_logger.handlers if isinstance(h, _EventsApiHandler)
    ]
    assert len(added) == 1
    assert not isinstance(added[0].formatter, JSONFormatter)
    assert restore_root_logger.level == logging.DEBUG


def test_method_is_not_a_surfaced_extra():
    log = json.loads(JSONFormatter().format(_record(method="GET", path="/events")))
    assert log["path"] == "/events"
    assert "method" not in log
