"""User Routes: listing and the three ways of creating a user for an attendee.

Invariants:
    - Only the event-and-attendee scoped route verifies the attendee/event pairing
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from events_api.api.params import PathId
from events_api.infrastructure.database import get_db
from events_api.schemas.user import UserCreate, UserFields, UserResponse
from events_api.services import manage_users

router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await manage_users.list_users(db)


@router.post(
    "/users", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    return await manage_users.create_user(
        db, body.user_name, body.email, body.attendee_id,
    )


@router.post(
    "/attendees/{attendee_id}/users", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_attendee_user(
    attendee_id: PathId, body: UserFields, db: AsyncSession = Depends(get_db),
):
    return await manage_users.create_user(
        db, body.user_name, body.email, attendee_id,
    )


@router.post(
    "/events/{event_id}/attendees/{attendee_id}/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_event_attendee_user(
    event_id: PathId,
    attendee_id: PathId,
    body: UserFields,
    db: AsyncSession = Depends(get_db),
):
    """Create a user for an attendee, 404 unless the attendee is in the event."""
    return await manage_users.create_user_for_event_attendee(
        db, event_id, attendee_id, body.user_name, body.email,
    )
