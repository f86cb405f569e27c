"""Command run logging.

Every editor command emits one `start` line and then either a `complete`
line (rewritten token count and where the output went) or a `failure` line
(exception type only). Document and clipboard text never reach the log.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


_SAFE_PUNCTUATION = frozenset("-_.:/")


def _context_token(value: object) -> str:
    """Render one context value as a single space-free token."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in _SAFE_PUNCTUATION else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    if not context:
        return ""
    return "".join(f" {key}={_context_token(context[key])}" for key in sorted(context))


class RunLogger:
    """Write `[command] ...` event lines for plugin commands through loguru."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Route loguru output to `sink` (stderr by default) as bare messages."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, command: str, **context: object) -> None:
        line = f"[command] level={level} command={command} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_command_start(self, command: str) -> None:
        self._emit("INFO", "start", command)

    def log_command_complete(self, command: str, tokens: int, disposition: str) -> None:
        """Record how many embeds were rewritten and whether they went to clipboard or editor."""

        self._emit("INFO", "complete", command, tokens=tokens, disposition=disposition)

    def log_command_failure(self, command: str, error_type: str) -> None:
        self._emit("ERROR", "failure", command, error_type=error_type)

    def log_settings_saved(self, path: object) -> None:
        """Record that the settings toggle was persisted to `path`."""

        self._emit("INFO", "settings_saved", "settings", path=path)
