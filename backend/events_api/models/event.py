"""Event ORM: a scheduled occasion attendees register for.

Invariants:
    - id is an integer primary key generated by the database
    - title, location and date are non-nullable
    - created_at is set at insert (Python default and server default)

Design Decisions:
    - date is a calendar Date, not a timestamp: the API only exposes the day
    - No cascade delete to attendees: events are never deleted through the API
"""

import datetime as dt

from sqlalchemy import Date, DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from events_api.db.base import Base


class Event(Base):
    """Event entity: owns its attendees."""
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
        server_default=func.now(),
    )

    attendees: Mapped[list["Attendee"]] = relationship(
        "Attendee", back_populates="event",
    )
