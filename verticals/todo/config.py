"""Todo vertical configuration.

Field limits and backend selection as frozen dataclasses, following the
domain config pattern: sensible defaults, overridable from environment.
"""

import os
from dataclasses import dataclass, field

STORE_BACKENDS = ("memory", "sql")


@dataclass(frozen=True)
class ValidationConfig:
    """Field constraints applied on create and update."""

    name_max_length: int = 100
    desc_max_length: int = 1000


@dataclass(frozen=True)
class TodoConfig:
    """Complete configuration for the todo vertical.

    Usage::

        config = TodoConfig.from_env()
        app = create_app(config)
    """

    validation: ValidationConfig = field(default_factory=ValidationConfig)

    # "memory" keeps tasks in process, "sql" uses the relational store
    store_backend: str = "memory"
    # Create missing tables at startup (dev only)
    create_tables: bool = False

    def __post_init__(self):
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"Unknown store backend {self.store_backend!r}, "
                f"expected one of {', '.join(STORE_BACKENDS)}"
            )

    @classmethod
    def default(cls) -> "TodoConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "TODO_") -> "TodoConfig":
        """Create config from environment variables.

        Example: TODO_STORE=sql TODO_NAME_MAX_LENGTH=80
        """
        limits = {}
        name_max = os.getenv(f"{prefix}NAME_MAX_LENGTH")
        if name_max:
            limits["name_max_length"] = int(name_max)
        desc_max = os.getenv(f"{prefix}DESC_MAX_LENGTH")
        if desc_max:
            limits["desc_max_length"] = int(desc_max)

        return cls(
            validation=ValidationConfig(**limits),
            store_backend=os.getenv(f"{prefix}STORE", "memory").lower(),
            create_tables=os.getenv("DB_CREATE_TABLES", "false").lower() == "true",
        )
