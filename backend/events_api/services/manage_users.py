"""Manage Users: list users and create user accounts for attendees.

Invariants:
    - create_user_for_event_attendee is the only write that checks a
      cross-entity relation: the attendee must belong to the event
    - The check and the insert share one session but are not isolated
      against concurrent writers

Design Decisions:
    - Other creates rely on the attendees.id foreign key alone
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from events_api.core.errors import AttendeeNotInEventError
from events_api.infrastructure.database import commit_or_raise
from events_api.models.attendee import Attendee
from events_api.models.user import User

logger = logging.getLogger(__name__)


async def list_users(db: AsyncSession) -> list[User]:
    result = await db.execute(select(User).order_by(User.id))
    return list(result.scalars().all())


async def create_user(
    db: AsyncSession, user_name: str, email: str, attendee_id: int,
) -> User:
    user = User(user_name=user_name, email=email, attendee_id=attendee_id)
    db.add(user)
    await commit_or_raise(db)
    await db.refresh(user)
    logger.info(
        "User created",
        extra={"user_id": user.id, "attendee_id": attendee_id},
    )
    return user


async def create_user_for_event_attendee(
    db: AsyncSession,
    event_id: int,
    attendee_id: int,
    user_name: str,
    email: str,
) -> User:
    """Create a user after verifying the attendee is registered for the event."""
    result = await db.execute(
        select(Attendee.id).where(
            Attendee.id == attendee_id, Attendee.event_id == event_id,
        ),
    )
    if result.scalar_one_or_none() is None:
        raise AttendeeNotInEventError(event_id, attendee_id)
    return await create_user(db, user_name, email, attendee_id)
