"""Todo API router: task CRUD + complete.

Standard router pattern:
- Body decoding by FastAPI/pydantic, field rules before any store call
- Store injected via Depends; create_app() decides which backend
- Errors raised as exceptions and mapped to responses in api.errors
"""

from fastapi import APIRouter, Depends, Request

from verticals.todo.config import TodoConfig
from verticals.todo.models.schemas import TaskIn
from verticals.todo.rules import validate_task
from verticals.todo.store import TaskStore

router = APIRouter()


# ============================================================================
# Dependencies
# ============================================================================

def get_task_store() -> TaskStore:
    """Placeholder bound to a concrete store by create_app()."""
    raise RuntimeError("No task store configured; build the app with create_app()")


def get_todo_config(request: Request) -> TodoConfig:
    return request.app.state.todo_config


# ============================================================================
# Task Endpoints
# ============================================================================

@router.get("/task")
async def list_tasks(store: TaskStore = Depends(get_task_store)):
    """List every task."""
    return [task.to_json() for task in await store.list()]


@router.post("/task", status_code=201)
async def create_task(
    request: TaskIn,
    store: TaskStore = Depends(get_task_store),
    config: TodoConfig = Depends(get_todo_config),
):
    """Create a task; the id is generated by the store."""
    validate_task(request, config.validation)
    task = await store.create(request)
    return task.to_json()


@router.get("/task/{task_id}")
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Get a single task."""
    task = await store.get(task_id)
    return task.to_json()


@router.put("/task/{task_id}")
async def update_task(
    task_id: str,
    request: TaskIn,
    store: TaskStore = Depends(get_task_store),
    config: TodoConfig = Depends(get_todo_config),
):
    """Overwrite a task's name, desc and status."""
    validate_task(request, config.validation)
    task = await store.update(task_id, request)
    return task.to_json()


@router.delete("/task/{task_id}", status_code=204)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Remove a task."""
    await store.delete(task_id)


@router.post("/task/{task_id}/complete", status_code=204)
async def complete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Mark a task complete."""
    await store.complete(task_id)
