"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TodoId wraps a positive int — ids are allocated only by TodoStore
    - Priority values are the only valid priorities — no raw string matching
    - PRIORITY_WEIGHT covers every Priority member

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", int)


# ─── Limits ──────────────────────────────────────────────────────

MAX_TODO_TEXT_LENGTH = 100


# ─── Enums ───────────────────────────────────────────────────────

class Priority(str, Enum):
    """Todo priority — weight used only for list ordering."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def weight(self) -> int:
        return PRIORITY_WEIGHT[self]


PRIORITY_WEIGHT: dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}

DEFAULT_PRIORITY = Priority.MEDIUM
