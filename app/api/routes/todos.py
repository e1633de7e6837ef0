"""Todo Routes — CRUD, bulk delete and statistics over the in-memory todo store.

Invariants:
    - /stats is registered before /{todo_id} so it is never parsed as an id
    - Non-numeric ids are 404, never 400/422
    - Query filters are permissive: unknown values never produce an error
    - Domain errors propagate to the global TodoAppError handler

Design Decisions:
    - Ids and the completed flag arrive as raw strings and are parsed in core/,
      keeping FastAPI from turning bad values into validation errors
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_todo_store
from app.core.todo_store import TodoFilter, TodoStore
from app.core.validate_todo import parse_completed_flag, parse_todo_id
from app.schemas.todo import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("")
async def list_todos(
    completed: str | None = Query(None),
    priority: str | None = Query(None),
    search: str | None = Query(None),
    store: TodoStore = Depends(get_todo_store),
):
    """List todos, filtered and sorted by priority then newest first."""
    listing = store.list_todos(TodoFilter(
        completed=parse_completed_flag(completed),
        priority=priority,
        search=search,
    ))
    return {
        "success": True,
        "data": [t.to_dict() for t in listing.todos],
        "count": listing.count,
        "total": listing.total,
    }


@router.get("/stats")
async def todo_stats(store: TodoStore = Depends(get_todo_store)):
    """Aggregate counts over the whole collection."""
    return {"success": True, "data": store.stats()}


@router.get("/{todo_id}")
async def get_todo(todo_id: str, store: TodoStore = Depends(get_todo_store)):
    todo = store.get(parse_todo_id(todo_id))
    return {"success": True, "data": todo.to_dict()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_todo(
    body: TodoCreate, store: TodoStore = Depends(get_todo_store),
):
    # An explicit null priority is "provided" and therefore invalid
    extra = body.model_dump(include={"priority"}, exclude_unset=True)
    todo = store.create(body.text, **extra)
    return {
        "success": True,
        "data": todo.to_dict(),
        "message": "Todo created successfully",
    }


@router.put("/{todo_id}")
async def update_todo(
    todo_id: str, body: TodoUpdate | None = None,
    store: TodoStore = Depends(get_todo_store),
):
    """Partial update — only present fields change. No body is an empty patch."""
    todo = store.update(
        parse_todo_id(todo_id), (body or TodoUpdate()).to_patch(),
    )
    return {
        "success": True,
        "data": todo.to_dict(),
        "message": "Todo updated successfully",
    }


@router.delete("/{todo_id}")
async def delete_todo(todo_id: str, store: TodoStore = Depends(get_todo_store)):
    todo = store.delete(parse_todo_id(todo_id))
    return {
        "success": True,
        "data": todo.to_dict(),
        "message": "Todo deleted successfully",
    }


@router.delete("")
async def delete_todos(
    completed: str | None = Query(None),
    store: TodoStore = Depends(get_todo_store),
):
    """Bulk delete: by completed state, or everything (which also resets ids)."""
    flag = parse_completed_flag(completed)
    deleted = store.delete_all(flag)
    if flag is None:
        message = f"All todos ({deleted}) deleted"
    else:
        message = f"{deleted} {'completed' if flag else 'active'} todos deleted"
    return {"success": True, "message": message, "deletedCount": deleted}
