"""Attendee Schemas: scoped and unscoped creation, response."""

from pydantic import Field, field_validator

from events_api.schemas.base import CamelModel, RowId, strip_required


class AttendeeFields(CamelModel):
    """Body for POST /events/{eventId}/attendees (event comes from the path)."""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1, max_length=255)

    @field_validator("name", "email")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_required(v)


class AttendeeCreate(AttendeeFields):
    """Body for POST /attendees."""
    event_id: RowId


class AttendeeResponse(CamelModel):
    id: int
    name: str
    email: str
    event_id: int
