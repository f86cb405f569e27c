"""Editor buffers for the CLI host.

Responsibilities:
- Hold document text with a half-open character selection.
- Resolve line ranges into character selections.
- Load documents from files and write them back in one write, keeping
  line endings byte for byte.
"""

from __future__ import annotations

from pathlib import Path
import re

from .errors import HostAdapterError


class TextBuffer:
    """In-memory document buffer with a `[start, end)` selection."""

    def __init__(self, text: str = "", selection: tuple[int, int] | None = None) -> None:
        """Initialize buffer text and an optional selection (empty at 0 by default)."""

        self._text = text
        self._start = 0
        self._end = 0
        if selection is not None:
            self.select(*selection)

    @property
    def selection(self) -> tuple[int, int]:
        return self._start, self._end

    def select(self, start: int, end: int) -> None:
        """Set the selection, validating offsets against current text."""

        if start < 0 or end < start or end > len(self._text):
            raise HostAdapterError(
                stage="selection",
                detail=(
                    f"Selection `{start}-{end}` is out of bounds for a document "
                    f"of {len(self._text)} characters."
                ),
                hint="Use offsets with 0 <= start <= end <= document length.",
            )
        self._start = start
        self._end = end

    def select_lines(self, first: int, last: int) -> None:
        """Select 1-based inclusive lines, including the last line's newline."""

        lines = [line for line in re.split(r"(?<=\n)", self._text) if line]
        if first < 1 or last > len(lines) or first > last:
            raise HostAdapterError(
                stage="selection",
                detail=(
                    f"Line range `{first}-{last}` is out of bounds for a document "
                    f"of {len(lines)} line(s)."
                ),
                hint="Pick lines that exist in the document.",
            )
        start = sum(len(line) for line in lines[: first - 1])
        end = start + sum(len(line) for line in lines[first - 1 : last])
        self.select(start, end)

    def get_value(self) -> str:
        return self._text

    def set_value(self, text: str) -> None:
        """Replace the whole document and collapse the selection to the start."""

        self._text = text
        self._start = 0
        self._end = 0

    def get_selection(self) -> str:
        return self._text[self._start : self._end]

    def replace_selection(self, text: str) -> None:
        """Replace the selected span and select the inserted text."""

        self._text = self._text[: self._start] + text + self._text[self._end :]
        self._end = self._start + len(text)


class FileDocument(TextBuffer):
    """Text buffer loaded from, and saved back to, a UTF-8 file."""

    def __init__(self, path: Path) -> None:
        """Load document text from `path`."""

        try:
            text = path.read_bytes().decode("utf-8")
        except FileNotFoundError as exc:
            raise HostAdapterError(
                stage="document",
                detail=f"Document not found: `{path}`.",
                hint="Provide an existing text or Markdown file.",
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise HostAdapterError(
                stage="document",
                detail=f"Failed to read document `{path}`: {exc}",
                hint="Verify file permissions and UTF-8 encoding.",
            ) from exc
        super().__init__(text)
        self.path = path
        self._original = text

    @property
    def is_modified(self) -> bool:
        """Whether buffer text differs from the loaded file contents."""

        return self.get_value() != self._original

    def save(self) -> bool:
        """Write buffer text back when modified; return whether a write happened."""

        if not self.is_modified:
            return False
        text = self.get_value()
        try:
            self.path.write_text(text, encoding="utf-8", newline="")
        except OSError as exc:
            raise HostAdapterError(
                stage="document",
                detail=f"Failed to write document `{self.path}`: {exc}",
                hint="Verify file permissions.",
            ) from exc
        self._original = text
        return True
