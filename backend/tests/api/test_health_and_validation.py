"""Health checks, request validation envelope and CORS."""

from httpx import ASGITransport, AsyncClient

from events_api.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from events_api.main import app


async def test_liveness(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_reachable_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_with_unreachable_database(tmp_path):
    missing = tmp_path / "no-such-dir" / "events.db"
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{missing}")
    app.dependency_overrides[get_db_manager] = lambda: manager
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            res = await c.get("/health/ready")
    finally:
        app.dependency_overrides.clear()
        await manager.close()

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_non_integer_path_id_returns_400(client):
    res = await client.get("/events/abc")
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid request data"
    assert body["details"][0]["field"] == "path.event_id"


async def test_malformed_event_body_lists_each_field(client):
    res = await client.post("/events", json={"location": "Hall"})
    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["details"]}
    assert fields == {"body.title", "body.date"}


async def test_cors_allows_any_origin(client):
    res = await client.get("/events", headers={"Origin": "http://example.org"})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"


async def test_out_of_range_path_id_returns_400(client):
    res = await client.get("/events/99999999999999999999")
    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "path.event_id"


async def test_zero_path_id_returns_400(client):
    res = await client.get("/events/0/attendees")
    assert res.status_code == 400


async def test_out_of_range_body_event_id_returns_400(client):
    res = await client.post(
        "/attendees",
        json={"name": "Ana", "email": "ana@example.com", "eventId": 2**70},
    )
    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "body.eventId"


async def test_out_of_range_body_attendee_id_returns_400(client):
    res = await client.post(
        "/users",
        json={"userName": "ana", "email": "ana@example.com", "attendeeId": 2**70},
    )
    assert res.status_code == 400
