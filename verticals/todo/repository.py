"""Todo repository: the relational task store.

TaskRepository extends BaseRepository with the complete operation;
SqlTaskStore adapts it to the TaskStore contract (Task entities in and
out, TaskNotFoundError for missing ids).
"""

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_session
from patterns.repository import BaseRepository
from verticals.todo.errors import TaskNotFoundError
from verticals.todo.models.db_models import TaskRecord
from verticals.todo.models.schemas import Task, TaskIn
from verticals.todo.store import TaskStore

logger = logging.getLogger(__name__)

MAX_TASK_ID = 2**31 - 1


# ---------------------------------------------------------------------------
# Task repository
# ---------------------------------------------------------------------------

class TaskRepository(BaseRepository[TaskRecord]):
    """Repository for task rows."""

    model = TaskRecord

    async def complete(self, item_id: int) -> dict | None:
        """Set status to complete. Returns None if not found."""
        return await self.update(item_id, {"status": True})


def _row_values(data: TaskIn) -> dict:
    return {"name": data.name, "description": data.desc, "status": data.status}


def _parse_id(task_id: str) -> int:
    # Only the canonical decimal form of a 32-bit table key can match a row.
    if not (isinstance(task_id, str) and task_id.isascii() and task_id.isdigit()):
        raise TaskNotFoundError(task_id)
    value = int(task_id)
    if str(value) != task_id or not 1 <= value <= MAX_TASK_ID:
        raise TaskNotFoundError(task_id)
    return value


# ---------------------------------------------------------------------------
# Store adapter
# ---------------------------------------------------------------------------

class SqlTaskStore(TaskStore):
    """TaskStore backed by the ``tasks`` table.

    Each operation issues a single statement in the request's session;
    committing is left to the session dependency.
    """

    def __init__(self, session: AsyncSession):
        self.repo = TaskRepository(session)

    async def list(self) -> list[Task]:
        return [Task.from_record(row) for row in await self.repo.list()]

    async def get(self, task_id: str) -> Task:
        row = await self.repo.get(_parse_id(task_id))
        if row is None:
            raise TaskNotFoundError(task_id)
        return Task.from_record(row)

    async def create(self, data: TaskIn) -> Task:
        task = Task.from_record(await self.repo.create(_row_values(data)))
        logger.info("Created task %s", task.id)
        return task

    async def update(self, task_id: str, data: TaskIn) -> Task:
        row = await self.repo.update(_parse_id(task_id), _row_values(data))
        if row is None:
            raise TaskNotFoundError(task_id)
        logger.info("Updated task %s", task_id)
        return Task.from_record(row)

    async def delete(self, task_id: str) -> None:
        if not await self.repo.delete(_parse_id(task_id)):
            raise TaskNotFoundError(task_id)
        logger.info("Deleted task %s", task_id)

    async def complete(self, task_id: str) -> Task:
        row = await self.repo.complete(_parse_id(task_id))
        if row is None:
            raise TaskNotFoundError(task_id)
        logger.info("Completed task %s", task_id)
        return Task.from_record(row)


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------

def get_sql_task_store(
    session: AsyncSession = Depends(get_session),
) -> SqlTaskStore:
    """FastAPI dependency for SqlTaskStore."""
    return SqlTaskStore(session)
