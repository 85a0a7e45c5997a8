"""Project service — admin CRUD and dashboard projections."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from pdash.models.dashboard import ClientDashboard, DashboardStats, ProjectCard
from pdash.models.projects import Project, ProjectDraft
from pdash.models.urgency import Urgency
from pdash.services.deadlines import compute_countdown, days_left_label, urgency_for, utc_now

if TYPE_CHECKING:
    from pdash.data.repositories import ProjectRepository


class ProjectService:
    """Service for project management and read projections."""

    def __init__(
        self,
        repository: ProjectRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    async def list_projects(self) -> Result[list[Project], str]:
        """All projects in collection order."""
        return Ok(await self._repository.list_all())

    async def get_project(self, project_id: str) -> Result[Project, str]:
        project = await self._repository.find_by_id(project_id)
        if project is None:
            return Err(f"Project {project_id} not found")
        return Ok(project)

    async def create_project(self, draft: ProjectDraft) -> Result[Project, str]:
        """Store a new project with a fresh id and creation time."""
        if missing := draft.missing_fields():
            return Err(_missing_message(missing))
        project = Project(
            id=uuid.uuid4().hex,
            created_at=self._clock(),
            **draft.model_dump(),
        )
        await self._repository.upsert(project)
        return Ok(project)

    async def update_project(self, project_id: str, draft: ProjectDraft) -> Result[Project, str]:
        """Replace every editable field; id and created_at are kept."""
        if missing := draft.missing_fields():
            return Err(_missing_message(missing))
        existing = await self._repository.find_by_id(project_id)
        if existing is None:
            return Err(f"Project {project_id} not found")
        project = Project(id=existing.id, created_at=existing.created_at, **draft.model_dump())
        await self._repository.upsert(project)
        return Ok(project)

    async def delete_project(self, project_id: str) -> Result[None, str]:
        await self._repository.remove(project_id)
        return Ok(None)

    async def list_cards(self) -> Result[list[ProjectCard], str]:
        """Projects with their urgency and days-left label, evaluated now."""
        now = self._clock()
        projects = await self._repository.list_all()
        return Ok(
            [
                ProjectCard(
                    project=project,
                    urgency=urgency_for(project, now),
                    days_left=days_left_label(project.deadline, now),
                )
                for project in projects
            ]
        )

    async def get_stats(self) -> Result[DashboardStats, str]:
        now = self._clock()
        projects = await self._repository.list_all()
        return Ok(
            DashboardStats(
                total=len(projects),
                active=sum(1 for p in projects if p.status == "active"),
                completed=sum(1 for p in projects if p.status == "completed"),
                overdue=sum(
                    1
                    for p in projects
                    if p.status == "active" and urgency_for(p, now) is Urgency.RED
                ),
            )
        )

    async def get_client_dashboard(self, client_id: str) -> Result[ClientDashboard, str]:
        """The client's own project with a fresh urgency and countdown."""
        project = await self._repository.find_by_client_id(client_id)
        if project is None:
            return Err(f"No project for client {client_id}")
        now = self._clock()
        countdown = None
        if project.deadline is not None:
            countdown = compute_countdown(project.deadline, now)
        return Ok(
            ClientDashboard(
                project=project,
                urgency=urgency_for(project, now),
                countdown=countdown,
            )
        )


def _missing_message(missing: list[str]) -> str:
    return "Missing required fields: " + ", ".join(missing)
