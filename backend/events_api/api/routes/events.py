"""Event Routes: list, fetch, create and partially update events.

Invariants:
    - Every event in a response is formatted (date and createdAt as YYYY-MM-DD)
    - Unknown event ids yield 404 {"error": "Event not found"}
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from events_api.api.params import PathId
from events_api.core.format_dates import format_event
from events_api.infrastructure.database import get_db
from events_api.schemas.event import EventCreate, EventResponse, EventUpdate
from events_api.services import manage_events

router = APIRouter(prefix="/events", tags=["events"])


def _formatted(event) -> EventResponse:
    return EventResponse.model_validate(format_event(event))


@router.get("", response_model=list[EventResponse])
async def list_events(db: AsyncSession = Depends(get_db)):
    """All events, formatted."""
    return [_formatted(e) for e in await manage_events.list_events(db)]


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: PathId, db: AsyncSession = Depends(get_db)):
    return _formatted(await manage_events.get_event(db, event_id))


@router.post(
    "", response_model=EventResponse, status_code=status.HTTP_201_CREATED,
)
async def create_event(body: EventCreate, db: AsyncSession = Depends(get_db)):
    return _formatted(await manage_events.create_event(db, body))


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: PathId, body: EventUpdate, db: AsyncSession = Depends(get_db),
):
    """Update title and/or location; the date is left untouched."""
    return _formatted(await manage_events.update_event(db, event_id, body))
