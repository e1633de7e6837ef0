"""Core test fixtures — every test gets a fresh, empty TodoStore."""

import pytest

from app.core.todo_store import TodoStore


@pytest.fixture
def store(clock):
    return TodoStore(now=clock)
