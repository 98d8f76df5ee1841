"""API test fixtures: in-memory SQLite datastore + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - get_db_manager is overridden, so get_db and the readiness check share it

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from events_api.db.base import Base
from events_api.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from events_api.main import app
import events_api.models  # noqa: F401


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with the datastore dependency overridden."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def make_event(client):
    """Create an event through the API and return its JSON body."""
    async def _make(title="Meetup", location="Hall", date="2024-05-01"):
        res = await client.post(
            "/events",
            json={"title": title, "location": location, "date": date},
        )
        assert res.status_code == 201
        return res.json()
    return _make


@pytest.fixture
async def make_attendee(client):
    async def _make(event_id, name="Ana", email="ana@example.com"):
        res = await client.post(
            f"/events/{event_id}/attendees",
            json={"name": name, "email": email},
        )
        assert res.status_code == 201
        return res.json()
    return _make
