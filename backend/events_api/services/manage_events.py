"""Manage Events: list, fetch, create and partially update events.

Invariants:
    - get_event and update_event raise EventNotFoundError when no row matches
    - update_event only ever touches title and location
    - Lists are ordered by id and never truncated

Design Decisions:
    - UPDATE ... RETURNING in a single round trip; an empty result is the
      not-found signal (no separate existence query)
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from events_api.core.errors import EventNotFoundError
from events_api.infrastructure.database import commit_or_raise
from events_api.models.event import Event
from events_api.schemas.event import EventCreate, EventUpdate

logger = logging.getLogger(__name__)


async def list_events(db: AsyncSession) -> list[Event]:
    result = await db.execute(select(Event).order_by(Event.id))
    return list(result.scalars().all())


async def get_event(db: AsyncSession, event_id: int) -> Event:
    """Get event or raise EventNotFoundError."""
    result = await db.execute(select(Event).where(Event.id == event_id))
    event = result.scalar_one_or_none()
    if event is None:
        raise EventNotFoundError(event_id)
    return event


async def create_event(db: AsyncSession, body: EventCreate) -> Event:
    event = Event(title=body.title, location=body.location, date=body.date)
    db.add(event)
    await commit_or_raise(db)
    await db.refresh(event)
    logger.info("Event created", extra={"event_id": event.id})
    return event


async def update_event(
    db: AsyncSession, event_id: int, body: EventUpdate,
) -> Event:
    """Apply title/location changes and return the updated row."""
    result = await db.execute(
        update(Event)
        .where(Event.id == event_id)
        .values(**body.changes())
        .returning(Event),
    )
    event = result.scalar_one_or_none()
    if event is None:
        await db.rollback()
        raise EventNotFoundError(event_id)
    await commit_or_raise(db)
    logger.info("Event updated", extra={"event_id": event_id})
    return event
