"""Todo Validation — pure checks applied to raw request values before any mutation.

Invariants:
    - Text is trimmed before the empty and length checks; the trimmed value is stored
    - Check order for text: empty first, then length
    - Priority strings are parsed to Priority exactly once; invalid values raise
    - Filter parsing is permissive — it never raises

Design Decisions:
    - Raise InvalidInputError (not ValueError): the HTTP status travels with the error
    - completed query flag follows the "only 'true' is true" rule of query strings
"""

from app.core.domain_types import MAX_TODO_TEXT_LENGTH, Priority, TodoId
from app.core.errors import InvalidInputError, TodoNotFoundError


def normalize_text(text: object) -> str:
    """Trim todo text and enforce non-empty / max-length rules."""
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError("Todo text is required", "text")
    trimmed = text.strip()
    if len(trimmed) > MAX_TODO_TEXT_LENGTH:
        raise InvalidInputError(
            f"Todo text must be at most {MAX_TODO_TEXT_LENGTH} characters",
            "text",
        )
    return trimmed


def parse_priority(value: object) -> Priority:
    """Parse a raw priority into Priority or raise InvalidInputError."""
    if isinstance(value, Priority):
        return value
    try:
        return Priority(value)
    except ValueError:
        allowed = ", ".join(p.value for p in Priority)
        raise InvalidInputError(
            f"Priority must be one of: {allowed}", "priority",
        ) from None


def match_priority_filter(value: str | None) -> Priority | None:
    """Priority filter — unknown values (including 'all') mean no filter."""
    if isinstance(value, Priority):
        return value
    try:
        return Priority(value)
    except ValueError:
        return None


def parse_completed_flag(raw: str | None) -> bool | None:
    """Query-string completed flag: absent → None, 'true' → True, anything else → False."""
    if raw is None:
        return None
    return raw == "true"


def parse_todo_id(raw: str) -> TodoId:
    """Path id → TodoId. Non-numeric ids cannot match any todo."""
    try:
        return TodoId(int(raw))
    except (TypeError, ValueError):
        raise TodoNotFoundError(raw) from None
