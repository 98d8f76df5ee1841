"""Date Formatting: renders date-valued fields as YYYY-MM-DD for API output.

Invariants:
    - Aware timestamps are converted to UTC before truncation
    - Naive timestamps are treated as UTC (SQLite drops the offset)
    - Time of day is always discarded
"""

from datetime import date, datetime, timezone
from typing import Protocol


class EventLike(Protocol):
    """Structural contract for Event rows passed to format_event."""
    id: int
    title: str
    location: str
    date: date
    created_at: datetime


def to_utc_day(value: date | datetime | str) -> date:
    """Reduce a date, datetime or ISO string to its UTC calendar day."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def format_day(value: date | datetime | str) -> str:
    return to_utc_day(value).isoformat()


def format_event(event: EventLike) -> dict:
    """Event row as a dict with date and created_at rendered as YYYY-MM-DD."""
    return {
        "id": event.id,
        "title": event.title,
        "location": event.location,
        "date": format_day(event.date),
        "created_at": format_day(event.created_at),
    }
