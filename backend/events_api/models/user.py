"""User ORM: an account record associated with one attendee.

Invariants:
    - Always belongs to an Attendee (attendee_id FK, non-nullable)
    - email is at most 255 characters

Design Decisions:
    - user_name maps to the camelCase "userName" column of the existing schema
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from events_api.db.base import Base


class User(Base):
    """User entity: account for an attendee."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_name: Mapped[str] = mapped_column("userName", Text, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    attendee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("attendees.id"), nullable=False,
    )

    attendee: Mapped["Attendee"] = relationship(
        "Attendee", back_populates="users",
    )
