"""Protocol definitions for services."""

from __future__ import annotations

from typing import Protocol

from result import Result

from pdash.models.dashboard import ClientDashboard, DashboardStats, ProjectCard
from pdash.models.projects import Project, ProjectDraft
from pdash.models.sessions import AdminSession, ClientSession, Session


class ProjectServiceProtocol(Protocol):
    """Interface for project operations."""

    async def list_projects(self) -> Result[list[Project], str]: ...

    async def get_project(self, project_id: str) -> Result[Project, str]: ...

    async def create_project(self, draft: ProjectDraft) -> Result[Project, str]: ...

    async def update_project(
        self, project_id: str, draft: ProjectDraft
    ) -> Result[Project, str]: ...

    async def delete_project(self, project_id: str) -> Result[None, str]: ...

    async def list_cards(self) -> Result[list[ProjectCard], str]: ...

    async def get_stats(self) -> Result[DashboardStats, str]: ...

    async def get_client_dashboard(self, client_id: str) -> Result[ClientDashboard, str]: ...


class AuthServiceProtocol(Protocol):
    """Interface for login and access checks."""

    async def current(self) -> Session | None: ...

    async def login_admin(self, password: str) -> Result[AdminSession, str]: ...

    async def login_client(self, client_id: str) -> Result[ClientSession, str]: ...

    async def logout(self) -> None: ...

    async def require_admin(self) -> Result[AdminSession, str]: ...

    async def require_client(self) -> Result[tuple[ClientSession, Project], str]: ...
