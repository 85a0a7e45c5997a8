"""Login session models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, TypeAdapter

from pdash.models.projects import CamelModel


class AdminSession(CamelModel):
    """The administrator is logged in."""

    role: Literal["admin"] = "admin"


class ClientSession(CamelModel):
    """A client is logged in, bound to one client id."""

    role: Literal["client"] = "client"
    client_id: str


Session = Annotated[AdminSession | ClientSession, Field(discriminator="role")]
SESSION_ADAPTER: TypeAdapter[Session] = TypeAdapter(Session)
