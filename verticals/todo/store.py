"""Task store contract and the in-memory implementation.

Both stores expose the same async operations so the router never knows
which backend it talks to. Missing ids raise TaskNotFoundError.
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod

from verticals.todo.errors import TaskNotFoundError
from verticals.todo.models.schemas import Task, TaskIn

logger = logging.getLogger(__name__)


class TaskStore(ABC):
    """Persistence contract for tasks."""

    @abstractmethod
    async def list(self) -> list[Task]:
        """Return every task in the backend's iteration order."""

    @abstractmethod
    async def get(self, task_id: str) -> Task:
        ...

    @abstractmethod
    async def create(self, data: TaskIn) -> Task:
        """Assign a new id, persist and return the stored task."""

    @abstractmethod
    async def update(self, task_id: str, data: TaskIn) -> Task:
        """Overwrite name, desc and status of an existing task."""

    @abstractmethod
    async def delete(self, task_id: str) -> None:
        ...

    @abstractmethod
    async def complete(self, task_id: str) -> Task:
        """Mark a task complete. Completing twice is a no-op."""


def short_id() -> str:
    return uuid.uuid4().hex[:12]


class InMemoryTaskStore(TaskStore):
    """Insertion-ordered task store guarded by a single lock.

    The lock is held for the whole of each operation; no operation awaits
    while holding it. Tasks are copied on the way in and out.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    async def list(self) -> list[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    async def get(self, task_id: str) -> Task:
        with self._lock:
            return self._lookup(task_id).model_copy()

    async def create(self, data: TaskIn) -> Task:
        with self._lock:
            task_id = short_id()
            while task_id in self._tasks:
                task_id = short_id()
            task = Task.from_input(task_id, data)
            self._tasks[task_id] = task
            logger.info("Created task %s", task_id)
            return task.model_copy()

    async def update(self, task_id: str, data: TaskIn) -> Task:
        with self._lock:
            self._lookup(task_id)
            task = Task.from_input(task_id, data)
            self._tasks[task_id] = task
            logger.info("Updated task %s", task_id)
            return task.model_copy()

    async def delete(self, task_id: str) -> None:
        with self._lock:
            self._lookup(task_id)
            # dict removal keeps the remaining tasks in insertion order
            del self._tasks[task_id]
            logger.info("Deleted task %s", task_id)

    async def complete(self, task_id: str) -> Task:
        with self._lock:
            task = self._lookup(task_id).model_copy(update={"status": True})
            self._tasks[task_id] = task
            logger.info("Completed task %s", task_id)
            return task.model_copy()

    def _lookup(self, task_id: str) -> Task:
        # caller holds the lock
        try:
            return self._tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None
