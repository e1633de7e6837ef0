"""Todo Query — conjunctive filters and priority/recency ordering. Pure, no store."""

from datetime import datetime, timedelta, timezone

from app.core.domain_types import Priority, TodoId
from app.core.todo_query import filter_todos, sort_todos
from app.core.todo_store import Todo, TodoFilter

_BASE = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _todo(todo_id, text, priority="medium", completed=False, minutes=0):
    at = _BASE + timedelta(minutes=minutes)
    return Todo(
        id=TodoId(todo_id), text=text, priority=Priority(priority),
        created_at=at, updated_at=at, completed=completed,
    )


TODOS = [
    _todo(1, "Buy milk", "low", completed=True, minutes=1),
    _todo(2, "Write report", "high", minutes=2),
    _todo(3, "buy bread", "medium", minutes=3),
    _todo(4, "Review PR", "high", completed=True, minutes=4),
]


def test_no_filter_returns_everything():
    assert len(filter_todos(TODOS, TodoFilter())) == 4


def test_completed_filter():
    assert [t.id for t in filter_todos(TODOS, TodoFilter(completed=True))] == [1, 4]
    assert [t.id for t in filter_todos(TODOS, TodoFilter(completed=False))] == [2, 3]


def test_priority_all_and_unknown_bypass_filter():
    assert len(filter_todos(TODOS, TodoFilter(priority="all"))) == 4
    assert len(filter_todos(TODOS, TodoFilter(priority="urgent"))) == 4


def test_search_is_case_insensitive_substring():
    result = filter_todos(TODOS, TodoFilter(search="BUY"))
    assert [t.id for t in result] == [1, 3]


def test_filters_combine_with_and():
    result = filter_todos(
        TODOS, TodoFilter(completed=True, priority="high", search="review"),
    )
    assert [t.id for t in result] == [4]


def test_filter_does_not_mutate_input():
    source = list(TODOS)
    filter_todos(source, TodoFilter(completed=True))
    assert source == TODOS


def test_sort_priority_then_newest():
    ordered = sort_todos(TODOS)
    assert [t.id for t in ordered] == [4, 2, 3, 1]


def test_sort_low_high_high_example():
    todos = [
        _todo(1, "low", "low", minutes=1),
        _todo(2, "high a", "high", minutes=2),
        _todo(3, "high b", "high", minutes=3),
    ]
    assert [t.id for t in sort_todos(todos)] == [3, 2, 1]
