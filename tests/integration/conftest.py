"""Integration-test fixtures isolating clipboard and settings location."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import FakeClipboard


@pytest.fixture
def cli_clipboard(monkeypatch: pytest.MonkeyPatch) -> FakeClipboard:
    """Replace the system clipboard used by the CLI with an in-memory fake."""

    clipboard = FakeClipboard()
    monkeypatch.setattr("embednorm.cli.create_clipboard", lambda: clipboard)
    return clipboard


@pytest.fixture(autouse=True)
def _isolated_settings_path(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, cli_clipboard: FakeClipboard
) -> Path:
    """Point the default settings path into the test temp directory."""

    _ = cli_clipboard
    settings_path = tmp_path / "config" / "settings.yaml"
    monkeypatch.setenv("EMBEDNORM_SETTINGS_PATH", str(settings_path))
    return settings_path


@pytest.fixture
def settings_path(_isolated_settings_path: Path) -> Path:
    """Expose the isolated settings path to tests."""

    return _isolated_settings_path
