"""Todo Query — pure filtering and ordering of todo listings.

Invariants:
    - Filters apply conjunctively in order: completed, priority, search
    - Unknown priority filter values bypass the priority filter
    - Ordering: priority weight descending, then created_at descending (newest first)
    - Input sequence is never mutated
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from app.core.validate_todo import match_priority_filter

if TYPE_CHECKING:
    from app.core.todo_store import Todo, TodoFilter


def filter_todos(todos: Iterable["Todo"], criteria: "TodoFilter") -> list["Todo"]:
    """Apply the completed / priority / search filters."""
    result = list(todos)
    if criteria.completed is not None:
        result = [t for t in result if t.completed == criteria.completed]

    priority = match_priority_filter(criteria.priority)
    if priority is not None:
        result = [t for t in result if t.priority == priority]

    if criteria.search:
        needle = criteria.search.lower()
        result = [t for t in result if needle in t.text.lower()]
    return result


def sort_todos(todos: Iterable["Todo"]) -> list["Todo"]:
    """Highest priority first; newest first within a priority."""
    return sorted(
        todos,
        key=lambda t: (t.priority.weight, t.created_at),
        reverse=True,
    )
