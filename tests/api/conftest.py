"""API test fixtures — FastAPI app with a fresh TodoStore per test.

Invariants:
    - Every test gets an empty TodoStore driven by a step clock
    - The original app store is restored after the test

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises middleware and error
      handlers exactly as in production, without a running server
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.todo_store import TodoStore
from app.main import app


@pytest.fixture
def todo_store(clock):
    original = app.state.todo_store
    store = TodoStore(now=clock)
    app.state.todo_store = store
    yield store
    app.state.todo_store = original


@pytest.fixture
async def client(todo_store):
    """FastAPI test client bound to the fresh store."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def create_todo(client):
    """POST a todo and return its JSON data."""
    async def _create(text: str, **fields) -> dict:
        res = await client.post("/api/todos", json={"text": text, **fields})
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _create
