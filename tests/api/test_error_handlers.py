"""Global error handlers — unmatched routes and unexpected exceptions.

Invariants:
    - Unknown paths and methods → 404 with success=False and the request path
    - Unhandled exceptions → 500; detail only outside production
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.main import app


async def test_unknown_path_is_404_with_path(client):
    res = await client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json() == {
        "success": False,
        "message": "Route not found",
        "code": "ROUTE_NOT_FOUND",
        "path": "/api/nothing-here",
    }


async def test_unknown_method_is_404(client):
    res = await client.patch("/api/todos")
    assert res.status_code == 404
    assert res.json()["path"] == "/api/todos"


class _ExplodingStore:
    def stats(self):
        raise RuntimeError("boom")


@pytest.fixture
async def raw_client(todo_store):
    """Client that returns 500 responses instead of re-raising app errors."""
    app.state.todo_store = _ExplodingStore()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unhandled_error_includes_detail_in_development(raw_client):
    res = await raw_client.get("/api/todos/stats")
    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "message": "Internal server error",
        "code": "INTERNAL_ERROR",
        "error": "boom",
    }


async def test_unhandled_error_hides_detail_in_production(raw_client, monkeypatch):
    monkeypatch.setattr(get_settings(), "environment", "production")
    res = await raw_client.get("/api/todos/stats")
    assert res.status_code == 500
    assert "error" not in res.json()
    assert res.json()["success"] is False


async def test_unhandled_error_still_gets_access_log_line(raw_client, caplog):
    with caplog.at_level(logging.INFO, logger="app.access"):
        await raw_client.get("/api/todos/stats")
    access = [r for r in caplog.records if r.name == "app.access"]
    assert len(access) == 1
    assert access[0].status_code == 500
    assert access[0].path == "/api/todos/stats"
