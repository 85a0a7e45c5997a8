"""CLI and entrypoint tests."""

from __future__ import annotations

from pathlib import Path

from click.testing import Result
from typer.testing import CliRunner

from pdash.cli import app


def _data_dir(tmp_path: Path) -> str:
    return str(tmp_path / "data")


def test_cli_without_command_shows_help() -> None:
    result = CliRunner().invoke(app, [])
    assert "seed" in result.output
    assert "watch" in result.output


def test_cli_seed_only_once(tmp_path: Path) -> None:
    runner = CliRunner()
    first = runner.invoke(app, ["seed", "--data-dir", _data_dir(tmp_path)])
    assert first.exit_code == 0
    assert "Seeded demo projects" in first.output

    second = runner.invoke(app, ["seed", "--data-dir", _data_dir(tmp_path)])
    assert second.exit_code == 0
    assert "nothing to seed" in second.output


def test_cli_projects_requires_admin_password(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app, ["projects", "--password", "nope", "--data-dir", _data_dir(tmp_path)]
    )
    assert result.exit_code == 1
    assert "Incorrect password." in result.output


def test_cli_projects_lists_seeded_board(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app, ["projects", "--password", "admin123", "--data-dir", _data_dir(tmp_path)]
    )
    assert result.exit_code == 0
    assert "6 projects" in result.output
    assert "[red   ] proj-4" in result.output
    assert "[green ] proj-5" in result.output
    assert "Overdue" in result.output


def test_cli_watch_unknown_client(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["watch", "CLI-404", "--data-dir", _data_dir(tmp_path)])
    assert result.exit_code == 1
    assert "Client ID not found." in result.output


def test_cli_watch_prints_countdown(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app, ["watch", " CLI-005 ", "--ticks", "1", "--data-dir", _data_dir(tmp_path)]
    )
    assert result.exit_code == 0
    assert "Online Course Platform" in result.output
    assert "On time: 29:" in result.output or "On time: 30:" in result.output


def test_cli_watch_expired_project(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app, ["watch", "CLI-004", "--ticks", "1", "--data-dir", _data_dir(tmp_path)]
    )
    assert result.exit_code == 0
    assert "Critical: deadline passed" in result.output


def _admin(tmp_path: Path, *args: str) -> Result:
    return CliRunner().invoke(
        app, [*args, "--password", "admin123", "--data-dir", _data_dir(tmp_path)]
    )


def test_cli_add_creates_project(tmp_path: Path) -> None:
    result = _admin(
        tmp_path,
        "add",
        "--name",
        "Brand Refresh",
        "--client-id",
        "CLI-900",
        "--deadline",
        "2099-01-01T00:00:00Z",
        "--status",
        "paused",
    )
    assert result.exit_code == 0
    assert "Created " in result.output

    board = _admin(tmp_path, "projects")
    assert "7 projects" in board.output
    assert "Brand Refresh (CLI-900)" in board.output
    assert "paused" in board.output


def test_cli_add_rejects_missing_required_fields(tmp_path: Path) -> None:
    result = _admin(tmp_path, "add", "--name", "No client")
    assert result.exit_code == 1
    assert "Missing required fields: client_id, deadline" in result.output
    assert "6 projects" in _admin(tmp_path, "projects").output


def test_cli_add_rejects_unknown_status(tmp_path: Path) -> None:
    result = _admin(
        tmp_path,
        "add",
        "--name",
        "X",
        "--client-id",
        "CLI-901",
        "--deadline",
        "2099-01-01",
        "--status",
        "archived",
    )
    assert result.exit_code == 1
    assert "Invalid status" in result.output


def test_cli_add_requires_admin_password(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app,
        ["add", "--name", "X", "--password", "nope", "--data-dir", _data_dir(tmp_path)],
    )
    assert result.exit_code == 1
    assert "Incorrect password." in result.output


def test_cli_edit_keeps_unspecified_fields(tmp_path: Path) -> None:
    result = _admin(tmp_path, "edit", "proj-2", "--status", "completed")
    assert result.exit_code == 0
    assert "Updated proj-2" in result.output

    board = _admin(tmp_path, "projects").output
    line = next(row for row in board.splitlines() if "proj-2" in row)
    assert "E-commerce Mobile App (CLI-002)" in line
    assert line.endswith("completed")


def test_cli_edit_clearing_deadline_is_rejected(tmp_path: Path) -> None:
    result = _admin(tmp_path, "edit", "proj-1", "--deadline", "")
    assert result.exit_code == 1
    assert "Missing required fields: deadline" in result.output


def test_cli_edit_unknown_project(tmp_path: Path) -> None:
    result = _admin(tmp_path, "edit", "ghost", "--name", "Anything")
    assert result.exit_code == 1
    assert "Project ghost not found" in result.output


def test_cli_delete_is_idempotent(tmp_path: Path) -> None:
    first = _admin(tmp_path, "delete", "proj-3")
    assert first.exit_code == 0
    assert "Deleted proj-3" in first.output
    assert _admin(tmp_path, "delete", "proj-3").exit_code == 0

    board = _admin(tmp_path, "projects").output
    assert "5 projects" in board
    assert "proj-3" not in board


def test_cli_board_colors_each_tier(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app,
        ["projects", "--password", "admin123", "--data-dir", _data_dir(tmp_path)],
        color=True,
    )
    assert result.exit_code == 0
    assert "\x1b[31m[red   ]\x1b[0m proj-4" in result.output
    assert "\x1b[32m[green ]\x1b[0m proj-5" in result.output
