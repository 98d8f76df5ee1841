"""Path parameter types shared by the route modules."""

from typing import Annotated

from fastapi import Path

from events_api.schemas.base import MAX_ROW_ID

PathId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]
