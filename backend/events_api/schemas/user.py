"""User Schemas: body-scoped and path-scoped creation, response."""

from pydantic import Field, field_validator

from events_api.schemas.base import CamelModel, RowId, strip_required


class UserFields(CamelModel):
    """Body for the path-scoped user routes (attendee comes from the path)."""
    user_name: str = Field(min_length=1)
    email: str = Field(min_length=1, max_length=255)

    @field_validator("user_name", "email")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_required(v)


class UserCreate(UserFields):
    """Body for POST /users."""
    attendee_id: RowId


class UserResponse(CamelModel):
    id: int
    user_name: str
    email: str
    attendee_id: int
