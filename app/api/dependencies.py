"""Route Dependencies — hand the application's TodoStore to route handlers.

Invariants:
    - The store lives on app.state.todo_store; routes never import a global store
    - Tests replace app.state.todo_store with a fresh TodoStore per test
"""

from fastapi import Request

from app.core.todo_store import TodoStore


def get_todo_store(request: Request) -> TodoStore:
    """Return the store attached to the running application."""
    return request.app.state.todo_store
