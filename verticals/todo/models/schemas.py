"""Pydantic schemas for API request/response validation."""

from typing import Any

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class TaskIn(BaseModel):
    """Task payload for create and update. Any client-sent id is ignored.

    Field constraints are enforced by the todo rules, not here, so that a
    well-formed but invalid payload yields field-level violations.
    """

    name: str = ""
    desc: str = ""
    status: bool = False


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------

class Task(BaseModel):
    """A stored task. ``status`` is True once the task is complete."""

    id: str
    name: str
    desc: str = ""
    status: bool = False

    @classmethod
    def from_input(cls, task_id: str, data: TaskIn) -> "Task":
        return cls(id=task_id, name=data.name, desc=data.desc, status=data.status)

    @classmethod
    def from_record(cls, row: dict[str, Any]) -> "Task":
        """Build a task from a ``tasks`` table row."""
        return cls(
            id=str(row["id"]),
            name=row["name"],
            desc=row["description"] or "",
            status=bool(row["status"]),
        )

    def to_json(self) -> dict[str, Any]:
        """Serialise for the API; ``desc`` is omitted when empty."""
        return self.model_dump(exclude=None if self.desc else {"desc"})


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class Violation(BaseModel):
    field: str
    rule: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    violations: list[Violation] = []
