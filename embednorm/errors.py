"""Domain exceptions for host adapter and CLI diagnostics."""

from __future__ import annotations


class HostAdapterError(RuntimeError):
    """Raised when a host-side stage (settings, selection, clipboard) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped host adapter error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
