"""Repositories over the key-value stores."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import aiosqlite
from pydantic import ValidationError

from pdash.models.projects import PROJECT_LIST_ADAPTER, Project
from pdash.models.sessions import SESSION_ADAPTER, Session

if TYPE_CHECKING:
    from pdash.data.protocols import KeyValueStoreProtocol

logger = logging.getLogger(__name__)


class ProjectRepository:
    """Ordered project collection persisted as one JSON array.

    Reads never raise: a missing, unreadable or malformed payload is an
    empty collection. Writes are best effort and last write wins.
    """

    def __init__(self, store: KeyValueStoreProtocol, key: str) -> None:
        self._store = store
        self._key = key

    async def list_all(self) -> list[Project]:
        try:
            raw = await self._store.get_item(self._key)
        except aiosqlite.Error:
            logger.warning("Failed to read %s from storage", self._key, exc_info=True)
            return []
        if not raw:
            return []
        try:
            return PROJECT_LIST_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Ignoring malformed %s payload (%d errors)", self._key, exc.error_count()
            )
            return []

    async def is_empty(self) -> bool:
        """True when nothing usable is stored: no item, unparseable JSON, or ``[]``.

        A payload that parses but fails validation is not empty, so it is
        never overwritten by callers that only fill empty stores.
        """
        try:
            raw = await self._store.get_item(self._key)
        except aiosqlite.Error:
            logger.warning("Failed to read %s from storage", self._key, exc_info=True)
            return True
        if not raw:
            return True
        try:
            payload = json.loads(raw)
        except ValueError:
            return True
        return payload is None or payload == []

    async def save_all(self, projects: list[Project]) -> None:
        payload = PROJECT_LIST_ADAPTER.dump_json(projects, by_alias=True).decode()
        try:
            await self._store.set_item(self._key, payload)
        except aiosqlite.Error:
            logger.warning("Failed to write %s to storage", self._key, exc_info=True)

    async def find_by_id(self, project_id: str) -> Project | None:
        for project in await self.list_all():
            if project.id == project_id:
                return project
        return None

    async def find_by_client_id(self, client_id: str) -> Project | None:
        # Client ids are not unique; the first match in collection order wins.
        for project in await self.list_all():
            if project.client_id == client_id:
                return project
        return None

    async def upsert(self, project: Project) -> None:
        """Replace the record with the same id in place, or append it."""
        projects = await self.list_all()
        for index, existing in enumerate(projects):
            if existing.id == project.id:
                projects[index] = project
                break
        else:
            projects.append(project)
        await self.save_all(projects)

    async def remove(self, project_id: str) -> None:
        projects = await self.list_all()
        await self.save_all([p for p in projects if p.id != project_id])


class SessionStore:
    """The single active login, kept in a process-scoped store."""

    def __init__(self, store: KeyValueStoreProtocol, key: str) -> None:
        self._store = store
        self._key = key

    async def get(self) -> Session | None:
        try:
            raw = await self._store.get_item(self._key)
        except aiosqlite.Error:
            logger.warning("Failed to read %s from storage", self._key, exc_info=True)
            return None
        if not raw:
            return None
        try:
            return SESSION_ADAPTER.validate_json(raw)
        except ValidationError:
            logger.warning("Ignoring malformed %s payload", self._key)
            return None

    async def set(self, session: Session) -> None:
        payload = SESSION_ADAPTER.dump_json(session, by_alias=True).decode()
        try:
            await self._store.set_item(self._key, payload)
        except aiosqlite.Error:
            logger.warning("Failed to write %s to storage", self._key, exc_info=True)

    async def clear(self) -> None:
        try:
            await self._store.remove_item(self._key)
        except aiosqlite.Error:
            logger.warning("Failed to clear %s from storage", self._key, exc_info=True)
