"""Test todo configuration and database URL resolution."""
import pytest
from core.database import database_url
from verticals.todo.config import TodoConfig


def test_defaults():
    config = TodoConfig.default()
    assert config.store_backend == "memory"
    assert config.validation.name_max_length == 100
    assert config.validation.desc_max_length == 1000


def test_from_env(monkeypatch):
    monkeypatch.setenv("TODO_STORE", "SQL")
    monkeypatch.setenv("TODO_NAME_MAX_LENGTH", "50")
    monkeypatch.setenv("DB_CREATE_TABLES", "true")
    config = TodoConfig.from_env()
    assert config.store_backend == "sql"
    assert config.validation.name_max_length == 50
    assert config.create_tables is True


def test_unknown_backend():
    with pytest.raises(ValueError, match="Unknown store backend"):
        TodoConfig(store_backend="redis")


def test_database_url_composed_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    url = database_url()
    assert url.drivername == "postgresql+asyncpg"
    assert url.port is not None


def test_database_url_explicit(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///tasks.db")
    assert database_url().get_backend_name() == "sqlite"
