"""Base model for all SQLAlchemy models.

Provides:
- Base: Declarative base class for all models

Schema management is not handled here: tables are expected to exist in
production. ``core.database.init_db`` creates them for dev and tests.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all service models."""
    pass
