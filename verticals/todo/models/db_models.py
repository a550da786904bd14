"""SQLAlchemy models for the todo vertical.

The ``tasks`` table is expected to exist in production; the model is the
single source of its shape for queries and for dev/test table creation.
"""

from sqlalchemy import Boolean, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column

from core.models.base import Base


class TaskRecord(Base):
    """A row in the ``tasks`` table."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(
        String(1000), nullable=False, default="", server_default=""
    )
    status: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
