"""Shared fixtures for pdash tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from pdash.config import Config
from pdash.data.db import Database
from pdash.data.repositories import ProjectRepository, SessionStore
from pdash.models.projects import Project

FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)


class MemoryStore:
    """Dict-backed key-value store for unit tests."""

    def __init__(self) -> None:
        self.items: dict[str, str] = {}

    async def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    async def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


def make_project(
    project_id: str = "p1",
    *,
    client_id: str = "CLI-100",
    deadline: datetime | None = FIXED_NOW + timedelta(days=2),
    status: str = "active",
    name: str = "",
) -> Project:
    return Project(
        id=project_id,
        name=name or f"Project {project_id}",
        description="",
        client_name="Client",
        client_id=client_id,
        deadline=deadline,
        status=status,  # type: ignore[arg-type]
        notes="",
        created_at=FIXED_NOW,
    )


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Config pointing at a temporary data directory."""
    return Config(data_dir=tmp_path / "data", seed_demo=False)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
async def test_db(tmp_path: Path) -> AsyncGenerator[Database]:
    """A fresh file-backed storage database."""
    db = Database(tmp_path / "storage.db")
    await db.__aenter__()
    yield db  # type: ignore[misc]
    await db.__aexit__(None, None, None)


@pytest.fixture
async def in_memory_db() -> AsyncGenerator[Database]:
    """SQLite in-memory storage, like the session store uses."""
    db = Database.in_memory()
    await db.__aenter__()
    yield db  # type: ignore[misc]
    await db.__aexit__(None, None, None)


@pytest.fixture
def repository(test_db: Database) -> ProjectRepository:
    return ProjectRepository(test_db, "dashboard_projects")


@pytest.fixture
def session_store(in_memory_db: Database) -> SessionStore:
    return SessionStore(in_memory_db, "dashboard_session")
