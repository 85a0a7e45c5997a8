"""Service container with DI wiring."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from pdash.data.db import Database
from pdash.data.repositories import ProjectRepository, SessionStore
from pdash.data.seed import seed_demo_data
from pdash.services.auth_service import AuthService
from pdash.services.deadlines import utc_now
from pdash.services.project_service import ProjectService

if TYPE_CHECKING:
    from pdash.config import Config


@dataclass
class ServiceContainer:
    """Holds all application services. Built once per process, immutable."""

    db: Database
    session_db: Database
    repository: ProjectRepository
    session_store: SessionStore
    project_service: ProjectService
    auth_service: AuthService
    seeded: bool = False

    @classmethod
    async def create(
        cls,
        config: Config,
        clock: Callable[[], datetime] = utc_now,
    ) -> ServiceContainer:
        """Async factory that wires all dependencies and seeds demo data."""
        db = Database(config.db_path)
        await db.__aenter__()
        session_db = Database.in_memory()
        await session_db.__aenter__()

        repository = ProjectRepository(db, config.projects_key)
        session_store = SessionStore(session_db, config.session_key)

        seeded = False
        if config.seed_demo:
            seeded = await seed_demo_data(repository, clock())

        return cls(
            db=db,
            session_db=session_db,
            repository=repository,
            session_store=session_store,
            project_service=ProjectService(repository, clock),
            auth_service=AuthService(session_store, repository, config.admin_password),
            seeded=seeded,
        )

    async def close(self) -> None:
        """Shut down both stores; the session store is discarded with it."""
        await self.session_db.__aexit__(None, None, None)
        await self.db.__aexit__(None, None, None)
