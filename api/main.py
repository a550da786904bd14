"""Todo API: FastAPI entry point.

Registers middleware, exception handlers, routers, and lifecycle hooks.
The task store backend is picked once, when the app is built.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.errors import register_exception_handlers
from api.middleware import RequestLoggingMiddleware
from core.database import close_db, init_db
from core.observability.logging_setup import configure_logging
from verticals.todo.config import TodoConfig
from verticals.todo.repository import get_sql_task_store
from verticals.todo.router import get_task_store, router as todo_router
from verticals.todo.store import InMemoryTaskStore

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

VERSION = "0.1.0"
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    config: TodoConfig = app.state.todo_config
    if config.store_backend == "sql" and config.create_tables:
        await init_db()

    logger.info("Todo API started (store=%s)", config.store_backend)
    yield
    logger.info("Todo API shutting down")
    if config.store_backend == "sql":
        await close_db()


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app(config: TodoConfig | None = None) -> FastAPI:
    """Build the API with the task store selected by ``config``."""
    config = config or TodoConfig.from_env()

    app = FastAPI(
        title="Todo",
        description="Task-list service: create, list, update, complete and delete tasks",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.todo_config = config

    # Store injection
    if config.store_backend == "sql":
        app.dependency_overrides[get_task_store] = get_sql_task_store
    else:
        store = InMemoryTaskStore()
        app.dependency_overrides[get_task_store] = lambda: store

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    # -----------------------------------------------------------------------
    # Routers: verticals register here
    # -----------------------------------------------------------------------

    app.include_router(todo_router, tags=["Tasks"])

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": VERSION, "store": config.store_backend}

    return app


configure_logging()
app = create_app()
