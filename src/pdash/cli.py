"""Typer CLI for pdash — seed, admin board, project editing and client countdown."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import typer
from pydantic import ValidationError
from result import Err, Ok, Result

from pdash.config import Config
from pdash.models.projects import Project, ProjectDraft
from pdash.models.urgency import STYLE_BY_URGENCY, Countdown, Urgency, urgency_label

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from pdash.services.container import ServiceContainer

    AdminAction = Callable[[ServiceContainer], Awaitable[int]]

app = typer.Typer(
    name="pdash",
    help="Project deadline dashboard — admin board and client countdown.",
    no_args_is_help=True,
)

DataDirOption = Annotated[
    Path | None,
    typer.Option("--data-dir", help="Directory holding the dashboard storage"),
]
PasswordOption = Annotated[
    str, typer.Option("--password", prompt=True, hide_input=True, help="Admin password")
]
NameOption = Annotated[str | None, typer.Option("--name", help="Project name")]
DescriptionOption = Annotated[str | None, typer.Option("--description", help="Description")]
ClientNameOption = Annotated[str | None, typer.Option("--client-name", help="Client display name")]
ClientIdOption = Annotated[str | None, typer.Option("--client-id", help="Client login id")]
DeadlineOption = Annotated[
    str | None, typer.Option("--deadline", help="ISO date/time; naive values are local time")
]
StatusOption = Annotated[
    str | None, typer.Option("--status", help="active, completed or paused")
]
NotesOption = Annotated[str | None, typer.Option("--notes", help="Free-form notes")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _config(data_dir: Path | None, *, seed_demo: bool = True) -> Config:
    if data_dir is None:
        return Config(seed_demo=seed_demo)
    return Config(data_dir=data_dir, seed_demo=seed_demo)


def _exit_on(code: int) -> None:
    if code:
        raise typer.Exit(code)


@app.command()
def seed(data_dir: DataDirOption = None) -> None:
    """Populate an empty dashboard with demo projects."""
    asyncio.run(_do_seed(_config(data_dir, seed_demo=False)))


@app.command()
def projects(password: PasswordOption, data_dir: DataDirOption = None) -> None:
    """Show the admin board with every project's urgency."""
    _exit_on(asyncio.run(_run_admin(_config(data_dir), password, _show_board)))


@app.command()
def add(
    password: PasswordOption,
    name: NameOption = None,
    client_id: ClientIdOption = None,
    deadline: DeadlineOption = None,
    client_name: ClientNameOption = None,
    description: DescriptionOption = None,
    status: StatusOption = None,
    notes: NotesOption = None,
    data_dir: DataDirOption = None,
) -> None:
    """Create a project. Name, client id and deadline are required."""
    options = {
        "name": name,
        "client_id": client_id,
        "deadline": deadline,
        "client_name": client_name,
        "description": description,
        "status": status,
        "notes": notes,
    }

    async def action(services: ServiceContainer) -> int:
        draft = _build_draft(None, options)
        if isinstance(draft, Err):
            return _fail(draft.err_value)
        if not draft.ok_value.is_complete:
            return _fail(_missing_message(draft.ok_value))
        created = await services.project_service.create_project(draft.ok_value)
        if isinstance(created, Err):
            return _fail(created.err_value)
        typer.echo(f"Created {created.ok_value.id}")
        return 0

    _exit_on(asyncio.run(_run_admin(_config(data_dir), password, action)))


@app.command()
def edit(
    project_id: Annotated[str, typer.Argument(help="Id of the project to edit")],
    password: PasswordOption,
    name: NameOption = None,
    client_id: ClientIdOption = None,
    deadline: DeadlineOption = None,
    client_name: ClientNameOption = None,
    description: DescriptionOption = None,
    status: StatusOption = None,
    notes: NotesOption = None,
    data_dir: DataDirOption = None,
) -> None:
    """Edit a project. Fields not given keep their current value."""
    options = {
        "name": name,
        "client_id": client_id,
        "deadline": deadline,
        "client_name": client_name,
        "description": description,
        "status": status,
        "notes": notes,
    }

    async def action(services: ServiceContainer) -> int:
        existing = await services.project_service.get_project(project_id)
        if isinstance(existing, Err):
            return _fail(existing.err_value)
        draft = _build_draft(ProjectDraft.from_project(existing.ok_value), options)
        if isinstance(draft, Err):
            return _fail(draft.err_value)
        if not draft.ok_value.is_complete:
            return _fail(_missing_message(draft.ok_value))
        updated = await services.project_service.update_project(project_id, draft.ok_value)
        if isinstance(updated, Err):
            return _fail(updated.err_value)
        typer.echo(f"Updated {updated.ok_value.id}")
        return 0

    _exit_on(asyncio.run(_run_admin(_config(data_dir), password, action)))


@app.command()
def delete(
    project_id: Annotated[str, typer.Argument(help="Id of the project to delete")],
    password: PasswordOption,
    data_dir: DataDirOption = None,
) -> None:
    """Delete a project permanently. Unknown ids are ignored."""

    async def action(services: ServiceContainer) -> int:
        await services.project_service.delete_project(project_id)
        typer.echo(f"Deleted {project_id}")
        return 0

    _exit_on(asyncio.run(_run_admin(_config(data_dir), password, action)))


@app.command()
def watch(
    client_id: Annotated[str, typer.Argument(help="Client identifier, e.g. CLI-001")],
    ticks: Annotated[
        int, typer.Option("--ticks", help="Stop after this many updates (0 runs until Ctrl-C)")
    ] = 0,
    data_dir: DataDirOption = None,
) -> None:
    """Show the live countdown for a client's project."""
    _exit_on(asyncio.run(_do_watch(_config(data_dir), client_id, ticks)))


def _fail(message: str) -> int:
    typer.echo(message, err=True)
    return 1


def _missing_message(draft: ProjectDraft) -> str:
    return "Missing required fields: " + ", ".join(draft.missing_fields())


def _build_draft(
    base: ProjectDraft | None, options: dict[str, Any]
) -> Result[ProjectDraft, str]:
    """Overlay the given options on ``base``; ``None`` means "not given"."""
    fields: dict[str, Any] = base.model_dump() if base is not None else {}
    fields.update({key: value for key, value in options.items() if value is not None})
    try:
        return Ok(ProjectDraft.model_validate(fields))
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        return Err(f"Invalid {field}: {error['msg']}")


async def _run_admin(config: Config, password: str, action: AdminAction) -> int:
    from pdash.services.container import ServiceContainer

    services = await ServiceContainer.create(config)
    try:
        login = await services.auth_service.login_admin(password)
        if isinstance(login, Err):
            return _fail(login.err_value)
        try:
            return await action(services)
        finally:
            await services.auth_service.logout()
    finally:
        await services.close()


async def _do_seed(config: Config) -> None:
    from pdash.data.seed import seed_demo_data
    from pdash.services.container import ServiceContainer
    from pdash.services.deadlines import utc_now

    services = await ServiceContainer.create(config)
    try:
        if await seed_demo_data(services.repository, utc_now()):
            typer.echo(f"Seeded demo projects into {config.db_path}")
        else:
            typer.echo("Dashboard already has projects; nothing to seed.")
    finally:
        await services.close()


async def _show_board(services: ServiceContainer) -> int:
    stats = (await services.project_service.get_stats()).unwrap()
    cards = (await services.project_service.list_cards()).unwrap()
    typer.echo(
        f"{stats.total} projects  {stats.active} active  "
        f"{stats.completed} completed  {stats.overdue} overdue"
    )
    if not cards:
        typer.echo("No projects yet.")
    for card in cards:
        tier = typer.style(
            f"[{card.urgency.value:<6}]", fg=STYLE_BY_URGENCY[card.urgency].color
        )
        typer.echo(
            f"{tier} {card.project.id:<34} {card.project.name} "
            f"({card.project.client_id})  {card.days_left}  {card.project.status}"
        )
    return 0


async def _do_watch(config: Config, client_id: str, ticks: int) -> int:
    from pdash.services.container import ServiceContainer
    from pdash.services.ticker import CountdownTicker

    services = await ServiceContainer.create(config)
    try:
        login = await services.auth_service.login_client(client_id)
        if isinstance(login, Err):
            return _fail(login.err_value)
        access = await services.auth_service.require_client()
        if isinstance(access, Err):
            return _fail(access.err_value)
        _, project = access.ok_value
        typer.echo(_project_header(project))
        if project.deadline is None:
            typer.echo(urgency_label(Urgency.GRAY))
            return 0

        done = asyncio.Event()
        seen = 0

        def on_tick(countdown: Countdown, urgency: Urgency) -> None:
            nonlocal seen
            seen += 1
            typer.echo(_countdown_line(countdown, urgency))
            if ticks and seen >= ticks:
                done.set()

        async with CountdownTicker(project.deadline, on_tick, interval=config.tick_interval):
            await done.wait()
        await services.auth_service.logout()
        return 0
    finally:
        await services.close()


def _project_header(project: Project) -> str:
    lines = [f"{project.name} - {project.client_name} ({project.client_id})"]
    if project.description:
        lines.append(project.description)
    lines.append(f"Status: {project.status}")
    if project.deadline is not None:
        lines.append(f"Deadline: {project.deadline.astimezone():%Y-%m-%d %H:%M}")
    if project.notes:
        lines.append(f"Notes: {project.notes}")
    return "\n".join(lines)


def _countdown_line(countdown: Countdown, urgency: Urgency) -> str:
    if countdown.expired:
        return f"{urgency_label(urgency)}: deadline passed"
    return f"{urgency_label(urgency)}: {countdown.clock_text()}"
