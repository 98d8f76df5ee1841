"""Manage Attendees: list and register attendees.

Invariants:
    - create_attendee performs no application-level event lookup; a missing
      event is rejected by the events.id foreign key (ConstraintViolationError)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from events_api.infrastructure.database import commit_or_raise
from events_api.models.attendee import Attendee

logger = logging.getLogger(__name__)


async def list_attendees(db: AsyncSession) -> list[Attendee]:
    result = await db.execute(select(Attendee).order_by(Attendee.id))
    return list(result.scalars().all())


async def list_event_attendees(
    db: AsyncSession, event_id: int,
) -> list[Attendee]:
    result = await db.execute(
        select(Attendee)
        .where(Attendee.event_id == event_id)
        .order_by(Attendee.id),
    )
    return list(result.scalars().all())


async def create_attendee(
    db: AsyncSession, name: str, email: str, event_id: int,
) -> Attendee:
    attendee = Attendee(name=name, email=email, event_id=event_id)
    db.add(attendee)
    await commit_or_raise(db)
    await db.refresh(attendee)
    logger.info(
        "Attendee created",
        extra={"attendee_id": attendee.id, "event_id": event_id},
    )
    return attendee
