"""Async repository pattern for database access.

Provides a generic base repository with CRUD operations and FastAPI
dependency injection. Every operation is one parameterized statement;
writes use RETURNING so the post-write row comes back in the same round
trip. Verticals subclass this to add domain-specific queries.

Example: TaskRepository extending BaseRepository.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.models.base import Base

# ---------------------------------------------------------------------------
# Type variable for model classes
# ---------------------------------------------------------------------------

ModelT = TypeVar("ModelT", bound=Base)


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class BaseRepository(Generic[ModelT]):
    """Generic async repository with single-statement CRUD.

    Subclass and set `model` to your SQLAlchemy model::

        class TaskRepository(BaseRepository[TaskRecord]):
            model = TaskRecord

            async def complete(self, item_id: int):
                return await self.update(item_id, {"status": True})

    Rows are returned as plain dicts keyed by column name.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def table(self) -> Table:
        return self.model.__table__

    # -- List --

    async def list(self) -> list[dict]:
        """List rows ordered by primary key."""
        stmt = select(self.table).order_by(self.table.c.id)
        result = await self.session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    # -- Get by ID --

    async def get(self, item_id: Any) -> dict | None:
        """Get a single row by ID. Returns None if not found."""
        stmt = select(self.table).where(self.table.c.id == item_id)
        result = await self.session.execute(stmt)
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    # -- Create --

    async def create(self, data: dict[str, Any]) -> dict:
        """Insert a row and return it with generated columns populated."""
        stmt = insert(self.table).values(**data).returning(*self.table.c)
        result = await self.session.execute(stmt)
        return dict(result.mappings().one())

    # -- Update --

    async def update(self, item_id: Any, data: dict[str, Any]) -> dict | None:
        """Update an existing row. Returns None if not found."""
        values = {k: v for k, v in data.items() if k in self.table.c and k != "id"}
        stmt = (
            update(self.table)
            .where(self.table.c.id == item_id)
            .values(**values)
            .returning(*self.table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    # -- Delete --

    async def delete(self, item_id: Any) -> bool:
        """Delete a row. Returns True if deleted, False if not found."""
        stmt = delete(self.table).where(self.table.c.id == item_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
