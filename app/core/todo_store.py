"""Todo Store — in-memory owner of the todo collection and the id counter.

Invariants:
    - Ids are unique and never reused; the counter resets only on an unfiltered clear
    - All validation runs before any write — failed operations leave state unchanged
    - Every public method holds the store lock for its whole read-modify-write
    - created_at is set once; updated_at is refreshed on every successful mutation

Design Decisions:
    - In-memory, not DB: state is lost on restart, acceptable for a demo-sized list
    - Explicit store object injected into routes (no module-level globals), so each
      test gets a fresh store
    - RLock around every operation: FastAPI may call into the store from worker
      threads, and id allocation / delete-and-count are not atomic otherwise
    - Filtered bulk delete keeps the counter; unfiltered clear resets it to 1
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from app.core.domain_types import DEFAULT_PRIORITY, Priority, TodoId
from app.core.errors import TodoNotFoundError
from app.core.todo_query import filter_todos, sort_todos
from app.core.todo_stats import compute_todo_stats
from app.core.validate_todo import normalize_text, parse_priority

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Todo:
    """A single todo record. Owned by TodoStore — callers get copies."""
    id: TodoId
    text: str
    priority: Priority
    created_at: datetime
    updated_at: datetime
    completed: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "priority": self.priority.value,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }


@dataclass(frozen=True)
class TodoPatch:
    """Partial update — None means "leave unchanged"."""
    text: str | None = None
    completed: bool | None = None
    priority: Priority | str | None = None


@dataclass(frozen=True)
class TodoFilter:
    """Listing filter — every field optional, unknown priorities ignored."""
    completed: bool | None = None
    priority: str | None = None
    search: str | None = None


@dataclass
class TodoListing:
    """Filtered, sorted todos plus the filtered count and unfiltered total."""
    todos: list[Todo] = field(default_factory=list)
    total: int = 0

    @property
    def count(self) -> int:
        return len(self.todos)


class TodoStore:
    """Authoritative in-memory todo collection."""

    def __init__(self, now: Callable[[], datetime] = utc_now):
        self._now = now
        self._todos: list[Todo] = []
        self._next_id = 1
        self._lock = threading.RLock()

    @classmethod
    def with_sample_todos(cls, now: Callable[[], datetime] = utc_now) -> "TodoStore":
        """Store pre-filled with the three demo todos (next id is 4)."""
        store = cls(now=now)
        store.create("Learn FastAPI", Priority.HIGH)
        done = store.create("Build a REST server", Priority.MEDIUM)
        store.update(done.id, TodoPatch(completed=True))
        store.create("Implement the todo API", Priority.HIGH)
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    @property
    def next_id(self) -> TodoId:
        with self._lock:
            return TodoId(self._next_id)

    # ─── Queries ─────────────────────────────────────────────────

    def list_todos(self, criteria: TodoFilter | None = None) -> TodoListing:
        with self._lock:
            matching = filter_todos(self._todos, criteria or TodoFilter())
            return TodoListing(
                todos=[_copy(t) for t in sort_todos(matching)],
                total=len(self._todos),
            )

    def get(self, todo_id: int) -> Todo:
        with self._lock:
            return _copy(self._find(todo_id))

    def stats(self) -> dict:
        with self._lock:
            return compute_todo_stats(self._todos)

    # ─── Mutations ───────────────────────────────────────────────

    def create(
        self, text: object, priority: Priority | str | None = DEFAULT_PRIORITY,
    ) -> Todo:
        """Validate, allocate the next id and append a new todo.

        An explicit None priority is invalid; omit the argument for the default.
        """
        with self._lock:
            clean_text = normalize_text(text)
            parsed = parse_priority(priority)
            now = self._now()
            todo = Todo(
                id=TodoId(self._next_id), text=clean_text, priority=parsed,
                created_at=now, updated_at=now,
            )
            self._next_id += 1
            self._todos.append(todo)
            logger.info("Todo created", extra={"todo_id": todo.id})
            return _copy(todo)

    def update(self, todo_id: int, patch: TodoPatch) -> Todo:
        """Merge the present patch fields into an existing todo."""
        with self._lock:
            todo = self._find(todo_id)
            text = normalize_text(patch.text) if patch.text is not None else None
            priority = (
                parse_priority(patch.priority) if patch.priority is not None else None
            )
            if text is not None:
                todo.text = text
            if patch.completed is not None:
                todo.completed = patch.completed
            if priority is not None:
                todo.priority = priority
            todo.updated_at = self._now()
            logger.info("Todo updated", extra={"todo_id": todo.id})
            return _copy(todo)

    def delete(self, todo_id: int) -> Todo:
        with self._lock:
            todo = self._find(todo_id)
            self._todos.remove(todo)
            logger.info("Todo deleted", extra={"todo_id": todo.id})
            return todo

    def delete_all(self, completed: bool | None = None) -> int:
        """Remove todos matching `completed`, or clear everything and reset ids."""
        with self._lock:
            if completed is not None:
                kept = [t for t in self._todos if t.completed != completed]
                deleted = len(self._todos) - len(kept)
                self._todos = kept
            else:
                deleted = len(self._todos)
                self._todos = []
                self._next_id = 1
            logger.info(f"Deleted {deleted} todos (completed={completed})")
            return deleted

    # ─── Internals ───────────────────────────────────────────────

    def _find(self, todo_id: int) -> Todo:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        raise TodoNotFoundError(todo_id)


def _copy(todo: Todo) -> Todo:
    return replace(todo)
