"""Auth service — login, logout and role gates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from result import Err, Ok, Result

from pdash.models.projects import Project
from pdash.models.sessions import AdminSession, ClientSession, Session

if TYPE_CHECKING:
    from pdash.data.repositories import ProjectRepository, SessionStore

INVALID_PASSWORD = "Incorrect password."
UNKNOWN_CLIENT = "Client ID not found."
NOT_LOGGED_IN = "Not logged in."


class AuthService:
    """Service for the login surface and view access checks.

    The admin password is a static shared secret compared verbatim. An
    ``Err`` from a ``require_*`` method means the caller should send the
    user back to the login surface.
    """

    def __init__(
        self,
        session_store: SessionStore,
        repository: ProjectRepository,
        admin_password: str,
    ) -> None:
        self._sessions = session_store
        self._repository = repository
        self._admin_password = admin_password

    async def current(self) -> Session | None:
        return await self._sessions.get()

    async def login_admin(self, password: str) -> Result[AdminSession, str]:
        if password != self._admin_password:
            return Err(INVALID_PASSWORD)
        session = AdminSession()
        await self._sessions.set(session)
        return Ok(session)

    async def login_client(self, client_id: str) -> Result[ClientSession, str]:
        client_id = client_id.strip()
        if await self._repository.find_by_client_id(client_id) is None:
            return Err(UNKNOWN_CLIENT)
        session = ClientSession(client_id=client_id)
        await self._sessions.set(session)
        return Ok(session)

    async def logout(self) -> None:
        await self._sessions.clear()

    async def require_admin(self) -> Result[AdminSession, str]:
        session = await self._sessions.get()
        if isinstance(session, AdminSession):
            return Ok(session)
        return Err(NOT_LOGGED_IN if session is None else "Admin access required.")

    async def require_client(self) -> Result[tuple[ClientSession, Project], str]:
        """Current client session and the project it is bound to."""
        session = await self._sessions.get()
        if not isinstance(session, ClientSession):
            return Err(NOT_LOGGED_IN if session is None else "Client access required.")
        project = await self._repository.find_by_client_id(session.client_id)
        if project is None:
            return Err(UNKNOWN_CLIENT)
        return Ok((session, project))
