"""Unit tests for the pyperclip-backed clipboard writer."""

from __future__ import annotations

import pytest

from embednorm.clipboard import PyperclipClipboard
from embednorm.errors import HostAdapterError


class FakePyperclipModule:
    """Stand-in exposing the `pyperclip` attributes the clipboard uses."""

    class PyperclipException(RuntimeError):
        """Mirror of `pyperclip.PyperclipException`."""

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        if not self.available:
            raise self.PyperclipException("could not find a copy/paste mechanism")
        self.copied.append(text)


def test_clipboard_copies_text(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clipboard writes delegate to `pyperclip.copy`."""

    module = FakePyperclipModule()
    monkeypatch.setattr(PyperclipClipboard, "_load_pyperclip_module", lambda self: module)

    PyperclipClipboard().write_text("\n\t![a.png](a.png)")

    assert module.copied == ["\n\t![a.png](a.png)"]


def test_clipboard_maps_missing_backend_to_clipboard_stage(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A missing OS clipboard mechanism raises a clipboard-stage error."""

    module = FakePyperclipModule(available=False)
    monkeypatch.setattr(PyperclipClipboard, "_load_pyperclip_module", lambda self: module)

    with pytest.raises(HostAdapterError, match="System clipboard is unavailable") as exc_info:
        PyperclipClipboard().write_text("text")
    assert exc_info.value.stage == "clipboard"
    assert exc_info.value.hint is not None
