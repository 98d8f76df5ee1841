"""Attendee Routes: global and event-scoped listing and registration."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from events_api.api.params import PathId
from events_api.infrastructure.database import get_db
from events_api.schemas.attendee import (
    AttendeeCreate, AttendeeFields, AttendeeResponse,
)
from events_api.services import manage_attendees

router = APIRouter(tags=["attendees"])


@router.get("/attendees", response_model=list[AttendeeResponse])
async def list_attendees(db: AsyncSession = Depends(get_db)):
    return await manage_attendees.list_attendees(db)


@router.post(
    "/attendees", response_model=AttendeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_attendee(
    body: AttendeeCreate, db: AsyncSession = Depends(get_db),
):
    """Register an attendee for the event named in the body."""
    return await manage_attendees.create_attendee(
        db, body.name, body.email, body.event_id,
    )


@router.get(
    "/events/{event_id}/attendees", response_model=list[AttendeeResponse],
)
async def list_event_attendees(
    event_id: PathId, db: AsyncSession = Depends(get_db),
):
    return await manage_attendees.list_event_attendees(db, event_id)


@router.post(
    "/events/{event_id}/attendees", response_model=AttendeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_event_attendee(
    event_id: PathId, body: AttendeeFields, db: AsyncSession = Depends(get_db),
):
    """Register an attendee for the event named in the path."""
    return await manage_attendees.create_attendee(
        db, body.name, body.email, event_id,
    )
