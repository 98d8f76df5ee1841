"""Event Schemas: creation, partial update and formatted response.

Invariants:
    - EventCreate.date accepts YYYY-MM-DD or a full ISO timestamp, "T" or space
      separated (reduced to its UTC day)
    - EventUpdate carries title and/or location only; other keys are ignored
    - EventResponse dates are YYYY-MM-DD strings
"""

import datetime as dt

from pydantic import Field, field_validator, model_validator

from events_api.core.format_dates import to_utc_day
from events_api.schemas.base import CamelModel, strip_required


class EventCreate(CamelModel):
    title: str = Field(min_length=1)
    location: str = Field(min_length=1)
    date: dt.date

    @field_validator("title", "location")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_required(v)

    @field_validator("date", mode="before")
    @classmethod
    def reduce_timestamp(cls, v: object) -> object:
        """Timestamps keep only their UTC calendar day."""
        if isinstance(v, dt.datetime):
            return to_utc_day(v)
        if isinstance(v, str) and len(v.strip()) > 10:
            try:
                return to_utc_day(v.strip())
            except ValueError:
                return v  # let pydantic report the bad value
        return v


class EventUpdate(CamelModel):
    """Partial update: the event date is not editable here."""
    title: str | None = Field(None, min_length=1)
    location: str | None = Field(None, min_length=1)

    @field_validator("title", "location")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return strip_required(v) if v is not None else v

    @model_validator(mode="after")
    def require_a_field(self):
        if self.title is None and self.location is None:
            raise ValueError("update requires title or location")
        return self

    def changes(self) -> dict:
        return self.model_dump(include={"title", "location"}, exclude_none=True)


class EventResponse(CamelModel):
    """Formatted event: date and createdAt as YYYY-MM-DD."""
    id: int
    title: str
    location: str
    date: str
    created_at: str
