"""System clipboard access for the CLI host.

Responsibilities:
- Write normalized text to the OS clipboard through `pyperclip`.
- Report clipboard unavailability as a host adapter error.
"""

from __future__ import annotations

from .errors import HostAdapterError


class PyperclipClipboard:
    """Clipboard writer backed by the `pyperclip` package."""

    def _load_pyperclip_module(self):
        """Import and return the `pyperclip` module."""

        import pyperclip

        return pyperclip

    def write_text(self, text: str) -> None:
        """Copy `text` to the system clipboard or raise when no backend exists."""

        pyperclip_module = self._load_pyperclip_module()
        try:
            pyperclip_module.copy(text)
        except pyperclip_module.PyperclipException as exc:
            raise HostAdapterError(
                stage="clipboard",
                detail=f"System clipboard is unavailable: {exc}",
                hint="Install a clipboard backend (e.g. `xclip`) or pass `--no-copy`.",
            ) from exc


def create_clipboard() -> PyperclipClipboard:
    """Create the default clipboard implementation."""

    return PyperclipClipboard()
