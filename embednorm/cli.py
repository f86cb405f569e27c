"""Command-line interface for embednorm.

Responsibilities:
- Host the embed normalizer plugin with file-backed editor buffers.
- Expose whole-document and selection commands plus the settings panel.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    EchoNotifier,
    echo_command_list,
    echo_settings_panel,
    exit_with_command_error,
)
from .clipboard import create_clipboard
from .commands import CommandRegistry
from .editor import FileDocument
from .errors import HostAdapterError
from .host import (
    COMMAND_APPLY_DOCUMENT,
    COMMAND_APPLY_SELECTION,
    EmbedNormalizerPlugin,
)
from .parsing import parse_line_range, parse_required_boolean
from .settings import SettingsStore, resolve_settings_path
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="embednorm",
    no_args_is_help=True,
    help="Rewrite ![[embed]] tokens into Markdown links and images.",
)
settings_app = typer.Typer(
    no_args_is_help=True,
    help="Show or change persisted plugin settings.",
)
app.add_typer(settings_app, name="settings")

SettingsOption = Annotated[
    Path | None,
    typer.Option(
        "--settings",
        help="Settings YAML path (overrides `EMBEDNORM_SETTINGS_PATH`).",
    ),
]


def _load_plugin(settings_path: Path | None) -> tuple[EmbedNormalizerPlugin, CommandRegistry]:
    """Build the plugin from CLI host parts and run its `load` hook."""

    registry = CommandRegistry()
    plugin = EmbedNormalizerPlugin(
        commands=registry,
        settings_store=SettingsStore(resolve_settings_path(settings_path)),
        clipboard=create_clipboard(),
        notifier=EchoNotifier(),
        run_logger=RunLogger(),
    )
    plugin.load()
    return plugin, registry


def _resolve_selection(
    document: FileDocument,
    start: int | None,
    end: int | None,
    lines: str | None,
) -> None:
    """Apply either a character-offset or a line-range selection to the document."""

    uses_offsets = start is not None or end is not None
    if uses_offsets and lines is not None:
        raise HostAdapterError(
            stage="selection",
            detail="`--lines` cannot be combined with `--start`/`--end`.",
            hint="Select by character offsets or by lines, not both.",
        )
    if lines is not None:
        try:
            first, last = parse_line_range(lines)
        except ValueError as exc:
            raise HostAdapterError(stage="selection", detail=str(exc)) from exc
        document.select_lines(first, last)
        return
    if start is None or end is None:
        raise HostAdapterError(
            stage="selection",
            detail="Selection requires both `--start` and `--end`, or `--lines`.",
            hint="Example: `--start 0 --end 120` or `--lines 3-8`.",
        )
    document.select(start, end)


@app.command("apply")
def apply_command(
    document_path: Annotated[Path, typer.Argument(help="Document to normalize.")],
    settings_path: SettingsOption = None,
    copy: Annotated[
        bool | None,
        typer.Option(
            "--copy/--no-copy",
            help="Override the stored clipboard setting for this run only.",
        ),
    ] = None,
) -> None:
    """Normalize every embed token in the whole document."""

    try:
        _, registry = _load_plugin(settings_path)
        document = FileDocument(document_path)
        registry.execute(COMMAND_APPLY_DOCUMENT, document, copy_to_clipboard=copy)
        document.save()
    except Exception as exc:
        exit_with_command_error("apply", exc)


@app.command("apply-selection")
def apply_selection_command(
    document_path: Annotated[Path, typer.Argument(help="Document to normalize.")],
    start: Annotated[
        int | None, typer.Option("--start", help="Selection start offset (0-based).")
    ] = None,
    end: Annotated[
        int | None, typer.Option("--end", help="Selection end offset (exclusive).")
    ] = None,
    lines: Annotated[
        str | None,
        typer.Option("--lines", help="1-based inclusive line range: `3` or `2-5`."),
    ] = None,
    settings_path: SettingsOption = None,
    copy: Annotated[
        bool | None,
        typer.Option(
            "--copy/--no-copy",
            help="Override the stored clipboard setting for this run only.",
        ),
    ] = None,
) -> None:
    """Normalize embed tokens inside a selected span only."""

    try:
        _, registry = _load_plugin(settings_path)
        document = FileDocument(document_path)
        _resolve_selection(document, start, end, lines)
        registry.execute(COMMAND_APPLY_SELECTION, document, copy_to_clipboard=copy)
        document.save()
    except Exception as exc:
        exit_with_command_error("apply-selection", exc)


@app.command("commands")
def commands_command(settings_path: SettingsOption = None) -> None:
    """List editor commands registered by the plugin."""

    try:
        _, registry = _load_plugin(settings_path)
    except Exception as exc:
        exit_with_command_error("commands", exc)

    echo_command_list(registry.list_commands())


@settings_app.command("show")
def settings_show_command(settings_path: SettingsOption = None) -> None:
    """Render the plugin settings panel."""

    try:
        plugin, _ = _load_plugin(settings_path)
        panel = plugin.settings_tab().render()
    except Exception as exc:
        exit_with_command_error("settings show", exc)

    echo_settings_panel(panel)


@settings_app.command("set-copy-to-clipboard")
def settings_set_copy_command(
    value: Annotated[str, typer.Argument(help="`true`/`false`, `yes`/`no`, `1`/`0`.")],
    settings_path: SettingsOption = None,
) -> None:
    """Toggle the clipboard setting and persist it immediately."""

    try:
        enabled = parse_required_boolean(value, "copy_to_clipboard")
        plugin, _ = _load_plugin(settings_path)
        panel = plugin.settings_tab().render()
        panel.rows[0].on_change(enabled)
    except ValueError as exc:
        exit_with_command_error(
            "settings set-copy-to-clipboard",
            HostAdapterError(stage="settings", detail=str(exc)),
        )
    except Exception as exc:
        exit_with_command_error("settings set-copy-to-clipboard", exc)

    typer.echo(f"Copy to clipboard: {'on' if enabled else 'off'}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
