"""Todo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoAppError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The TodoStore is created once per app and attached to app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Store built at import time, not in lifespan: ASGI test transports do not
      run lifespan events, and routes must always find a store
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, todos
from app.config import get_settings
from app.core.todo_store import TodoStore
from app.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Todo API started on http://{settings.host}:{settings.port} "
        f"(environment={settings.environment}, todos={len(app.state.todo_store)})",
    )
    yield
    logger.info("Todo API shutting down")


def build_store() -> TodoStore:
    """Fresh store for the app — sample todos unless disabled in settings."""
    if get_settings().seed_sample_todos:
        return TodoStore.with_sample_todos()
    return TodoStore()


settings = get_settings()

app = FastAPI(
    title="Todo API", version=settings.api_version, lifespan=lifespan,
)
app.state.todo_store = build_store()

# CORS — configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(todos.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point — serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app", host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )
