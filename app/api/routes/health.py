"""Service Info & Health — root metadata and liveness endpoints.

Invariants:
    - GET / and GET /api/health always return 200 while the process is up
    - uptime is seconds since this module was imported (process start)
"""

import time

from fastapi import APIRouter, status

from app.config import get_settings
from app.core.todo_store import format_timestamp, utc_now

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/", status_code=status.HTTP_200_OK)
async def service_info():
    """Describe the API and its entry points."""
    settings = get_settings()
    return {
        "success": True,
        "message": "Todo management API server",
        "version": settings.api_version,
        "endpoints": {
            "todos": "/api/todos",
            "stats": "/api/todos/stats",
            "health": "/api/health",
        },
        "documentation": settings.documentation_url,
    }


@router.get("/api/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe. Returns 200 if the process is up."""
    return {
        "success": True,
        "status": "OK",
        "timestamp": format_timestamp(utc_now()),
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
        "environment": get_settings().environment,
    }
