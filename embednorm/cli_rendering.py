"""Terminal presentation for the embednorm CLI host.

Plugin notices and panel text go to stdout; command failures go to stderr
as one `<command> failed ...` line plus an optional hint.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .commands import EditorCommand
from .errors import HostAdapterError
from .host import SettingsPanelModel


class EchoNotifier:
    """Notifier that prints plugin notices to stdout."""

    def notice(self, message: str) -> None:
        typer.echo(message)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Report a failed CLI command on stderr and exit with code 1.

    Host adapter errors name their stage (`settings`, `selection`, `document`,
    `clipboard`, `command`) and may add a hint line.
    """

    hint: str | None = None
    if isinstance(exc, HostAdapterError):
        message = f"{command_name} failed at stage `{exc.stage}`: {exc.detail}"
        hint = exc.hint
    else:
        message = f"{command_name} failed: {exc}"

    typer.secho(message, fg=typer.colors.RED, err=True)
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_settings_panel(panel: SettingsPanelModel) -> None:
    """Print the settings panel heading and one line per toggle."""

    typer.echo(panel.heading)
    for row in panel.rows:
        state = "on" if row.value else "off"
        typer.echo(f"{row.name}: {state}")
        typer.echo(f"  {row.description}")


def echo_command_list(commands: list[EditorCommand]) -> None:
    """Print registered command ids and display names."""

    for command in commands:
        typer.echo(f"{command.command_id}\t{command.name}")
