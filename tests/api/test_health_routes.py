"""Service info and health endpoints."""


async def test_root_describes_api(client):
    res = await client.get("/")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["version"] == "1.0.0"
    assert body["endpoints"]["todos"] == "/api/todos"
    assert body["endpoints"]["health"] == "/api/health"


async def test_health_reports_ok(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "OK"
    assert body["environment"] == "development"
    assert body["uptime"] >= 0
    assert "timestamp" in body


async def test_health_timestamp_uses_todo_wire_format(client):
    timestamp = (await client.get("/api/health")).json()["timestamp"]
    assert timestamp.endswith("Z")
    assert len(timestamp) == len("2026-01-01T00:00:00.000Z")
