"""Todo Schemas — Pydantic models for todo request bodies.

Invariants:
    - Shape only: JSON types are enforced here, text/priority rules in core/validate_todo
    - TodoUpdate.to_patch() drops absent and null fields

Design Decisions:
    - text/priority typed loosely (Any / str) so the domain produces the
      ordered InvalidInput messages (empty, length, priority) instead of Pydantic
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool

from app.core.todo_store import TodoPatch


class TodoCreate(BaseModel):
    """Create body — text required by the domain, priority optional."""
    model_config = ConfigDict(extra="ignore")

    text: Any = None
    priority: Any = None


class TodoUpdate(BaseModel):
    """Update body — every field optional; absent or null means unchanged."""
    model_config = ConfigDict(extra="ignore")

    text: Any = None
    completed: StrictBool | None = None
    priority: Any = None

    def to_patch(self) -> TodoPatch:
        return TodoPatch(
            text=self.text, completed=self.completed, priority=self.priority,
        )
