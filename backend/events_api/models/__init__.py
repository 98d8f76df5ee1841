"""ORM Models: SQLAlchemy declarative models for events, attendees and users.

Invariants:
    - All models inherit from Base (db/base.py)
    - Event <- Attendee <- User through non-nullable foreign keys

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from events_api.models.event import Event  # noqa: F401
from events_api.models.attendee import Attendee  # noqa: F401
from events_api.models.user import User  # noqa: F401
