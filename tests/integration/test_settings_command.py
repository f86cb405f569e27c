"""Integration tests for the settings panel commands."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from embednorm.cli import app


def test_settings_show_renders_defaults(settings_path: Path) -> None:
    """With no stored file, the panel shows the default toggle state."""

    result = CliRunner().invoke(app, ["settings", "show"])

    assert result.exit_code == 0, result.output
    assert "External File Format Normalizer Settings" in result.output
    assert "Copy to clipboard: on" in result.output
    assert not settings_path.exists()


def test_settings_toggle_persists_immediately(settings_path: Path) -> None:
    """Changing the toggle writes the settings file right away."""

    runner = CliRunner()

    result = runner.invoke(app, ["settings", "set-copy-to-clipboard", "off"])

    assert result.exit_code == 0, result.output
    assert "Copy to clipboard: off" in result.output
    assert "copy_to_clipboard: false" in settings_path.read_text(encoding="utf-8")

    shown = runner.invoke(app, ["settings", "show"])
    assert "Copy to clipboard: off" in shown.output


def test_settings_explicit_path_overrides_environment(
    tmp_path: Path, settings_path: Path
) -> None:
    """`--settings` wins over `EMBEDNORM_SETTINGS_PATH`."""

    explicit = tmp_path / "explicit.yaml"

    result = CliRunner().invoke(
        app, ["settings", "set-copy-to-clipboard", "false", "--settings", str(explicit)]
    )

    assert result.exit_code == 0, result.output
    assert explicit.exists()
    assert not settings_path.exists()


def test_settings_toggle_rejects_invalid_value() -> None:
    """Unknown boolean tokens fail at the settings stage."""

    result = CliRunner().invoke(app, ["settings", "set-copy-to-clipboard", "maybe"])

    assert result.exit_code == 1
    assert "settings set-copy-to-clipboard failed at stage `settings`" in result.output
    assert "`copy_to_clipboard` must be a boolean value" in result.output
