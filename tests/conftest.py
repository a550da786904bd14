"""Shared fixtures."""
import pytest

import core.database as database


@pytest.fixture
def sqlite_database(monkeypatch, tmp_path):
    """Point the lazily built engine at a fresh SQLite file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.setattr(database, "_engine", None)
    monkeypatch.setattr(database, "_session_factory", None)
    return url
