"""Todo Stats — pure computation of collection summary statistics.

Invariants:
    - Returns a flat dict of integer counts (serializable as JSON)
    - Never raises — an empty collection yields completionRate 0
    - byPriority always lists every Priority, highest first
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from app.core.domain_types import PRIORITY_WEIGHT

if TYPE_CHECKING:
    from app.core.todo_store import Todo


def completion_rate(completed: int, total: int) -> int:
    """Integer percentage, rounded half up."""
    if total == 0:
        return 0
    return (completed * 200 + total) // (2 * total)


def compute_todo_stats(todos: Sequence["Todo"]) -> dict:
    """Compute summary statistics over the full collection. Pure, no IO."""
    total = len(todos)
    completed = sum(1 for t in todos if t.completed)
    by_priority = {
        priority.value: sum(1 for t in todos if t.priority == priority)
        for priority in PRIORITY_WEIGHT
    }
    return {
        "total": total,
        "completed": completed,
        "active": total - completed,
        "completionRate": completion_rate(completed, total),
        "byPriority": by_priority,
    }
