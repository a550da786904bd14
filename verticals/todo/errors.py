"""Todo error types.

Handlers never catch these: ``api.errors`` maps them onto HTTP responses.
"""

from verticals.todo.models.schemas import Violation


class TaskNotFoundError(LookupError):
    """No task exists with the requested identifier."""

    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id!r} not found")
        self.task_id = task_id


class TaskValidationError(ValueError):
    """A decoded payload broke one or more field rules."""

    def __init__(self, violations: list[Violation]):
        super().__init__("; ".join(v.message for v in violations))
        self.violations = violations
