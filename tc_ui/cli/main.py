"""
Command-line interface for tagcell-editor.

Edits a select-option cell stored as a YAML document without a GUI.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from tc_common.api import TagCellError, configure_logging, error_to_payload
from tc_core.api import (
    CommitMode,
    EditorSession,
    EditorSettings,
    YamlCellGateway,
    load_settings,
)
from tc_ui.console import render_table
from tc_ui.flows.replay import load_script, replay
from tc_ui.presenters.cell import build_cell_table

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(help="Edit select-option cells stored as YAML documents.", no_args_is_help=True)

_settings_path: Optional[Path] = None


@app.callback()
def entry(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with an 'editor' section (commit_mode, debounce_ms).",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options shared by every command."""
    global _settings_path
    configure_logging(debug=debug, force=True)
    _settings_path = config


def _fail(exc: TagCellError) -> NoReturn:
    """Report a failed command and exit with status 1."""
    payload = error_to_payload(exc)
    logger.debug("Command failed: %s", payload)
    console.print(f"[red]{payload['error_type']}: {escape(payload['error'])}[/red]")
    raise typer.Exit(1)


def _settings(commit_mode: Optional[CommitMode]) -> EditorSettings:
    settings = load_settings(_settings_path)
    if commit_mode is not None:
        settings = settings.model_copy(update={"commit_mode": commit_mode})
    return settings


def _open(cell_file: Path, commit_mode: Optional[CommitMode]) -> EditorSession:
    gateway = YamlCellGateway(cell_file)
    document = gateway.load()
    return EditorSession(
        document.cell,
        document.options,
        document.selected,
        gateway=gateway,
        settings=_settings(commit_mode),
    )


def _run(cell_file: Path, commit_mode: Optional[CommitMode], entries: list) -> None:
    try:
        session = _open(cell_file, commit_mode)
        rejected = replay(session, entries)
        state = session.close()
    except TagCellError as exc:
        _fail(exc)
    for message in rejected:
        console.print(f"[yellow]Rejected[/yellow] {message}")
    render_table(console, build_cell_table(session.cell, state))


_COMMIT_MODE_OPTION = typer.Option(
    None,
    "--commit-mode",
    help="Override the configured commit mode (per_event or on_close).",
)


@app.command("show")
def show(cell_file: Path = typer.Argument(..., help="Cell document to display.")) -> None:
    """Print the options of a cell and the selection order."""
    try:
        session = _open(cell_file, None)
    except TagCellError as exc:
        _fail(exc)
    state = session.close()
    render_table(console, build_cell_table(session.cell, state))


@app.command("apply")
def apply(
    cell_file: Path = typer.Argument(..., help="Cell document to edit."),
    script: Path = typer.Argument(..., help="YAML list of intents to replay."),
    commit_mode: Optional[CommitMode] = _COMMIT_MODE_OPTION,
) -> None:
    """Replay a script of intents (new, select, update, delete, text)."""
    try:
        entries = load_script(script)
    except TagCellError as exc:
        _fail(exc)
    _run(cell_file, commit_mode, entries)


@app.command("new")
def new(
    cell_file: Path = typer.Argument(..., help="Cell document to edit."),
    name: str = typer.Argument(..., help="Option name; an existing name is reused."),
    commit_mode: Optional[CommitMode] = _COMMIT_MODE_OPTION,
) -> None:
    """Create an option (or reuse one with the same name) and select it."""
    _run(cell_file, commit_mode, [{"new": name}])


@app.command("toggle")
def toggle(
    cell_file: Path = typer.Argument(..., help="Cell document to edit."),
    option_id: str = typer.Argument(..., help="Option to select or deselect."),
    commit_mode: Optional[CommitMode] = _COMMIT_MODE_OPTION,
) -> None:
    """Select or deselect an option."""
    _run(cell_file, commit_mode, [{"select": option_id}])


def main() -> None:
    app()


if __name__ == "__main__":
    main()
