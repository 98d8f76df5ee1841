"""Attendee ORM: a person registered for a specific event.

Invariants:
    - Always belongs to an Event (event_id FK, non-nullable)
    - email is at most 255 characters
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from events_api.db.base import Base


class Attendee(Base):
    """Attendee entity: registered under one event."""
    __tablename__ = "attendees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("events.id"), nullable=False,
    )

    event: Mapped["Event"] = relationship(
        "Event", back_populates="attendees",
    )
    users: Mapped[list["User"]] = relationship(
        "User", back_populates="attendee",
    )
