"""Host adapter for the embed normalizer.

Responsibilities:
- Describe the host capabilities the plugin needs as small protocols.
- Register whole-document and selection commands with a command host.
- Route normalized text to the clipboard or back into the editor.
- Expose the settings panel model and persist toggles immediately.

Key types:
- `EmbedNormalizerPlugin`: lifecycle-managed plugin composed from host parts.
- `NormalizerSettingsTab`: settings panel rendering the clipboard toggle.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

from .errors import HostAdapterError
from .settings import NormalizerSettings
from .telemetry.logger import RunLogger
from .text.embeds import EmbedNormalizer


COMMAND_APPLY_DOCUMENT = "apply-normalizer"
COMMAND_APPLY_SELECTION = "apply-normalizer-selection"

NOTICE_COPIED = "Normalized Text Copied"
NOTICE_APPLIED = "Normalized Applied"

SETTINGS_HEADING = "External File Format Normalizer Settings"


@runtime_checkable
class Lifecycle(Protocol):
    """Plugin lifecycle hooks invoked by the host."""

    def load(self) -> None:
        """Load settings and register commands."""

    def unload(self) -> None:
        """Release plugin state."""


@runtime_checkable
class SettingsPanel(Protocol):
    """Settings UI surface rendered by the host."""

    def render(self) -> SettingsPanelModel:
        """Return the panel model to display."""


class EditorBuffer(Protocol):
    """Editable text buffer with an optional selection."""

    def get_value(self) -> str:
        """Return the full document text."""

    def set_value(self, text: str) -> None:
        """Replace the full document text."""

    def get_selection(self) -> str:
        """Return the selected text, possibly empty."""

    def replace_selection(self, text: str) -> None:
        """Replace the selected span with `text`."""


class Clipboard(Protocol):
    """System clipboard writer."""

    def write_text(self, text: str) -> None:
        """Place plain text on the clipboard."""


class Notifier(Protocol):
    """Transient user notification surface."""

    def notice(self, message: str) -> None:
        """Show a short message to the user."""


class CommandHost(Protocol):
    """Command registration surface offered by the host."""

    def add_command(
        self, command_id: str, name: str, editor_callback: Callable[..., None]
    ) -> None:
        """Register an editor command."""


class SettingsPersistence(Protocol):
    """Settings load/save surface offered by the host."""

    def load(self) -> NormalizerSettings:
        """Load settings merged over defaults."""

    def save(self, settings: NormalizerSettings) -> object:
        """Persist settings."""


@dataclass(frozen=True, slots=True)
class ToggleRow:
    """One boolean setting row in the settings panel."""

    name: str
    description: str
    value: bool
    on_change: Callable[[bool], None]


@dataclass(frozen=True, slots=True)
class SettingsPanelModel:
    """Renderable settings panel content."""

    heading: str
    rows: list[ToggleRow] = field(default_factory=list)


class EmbedNormalizerPlugin:
    """Embed normalizer plugin composed from host capabilities."""

    def __init__(
        self,
        *,
        commands: CommandHost,
        settings_store: SettingsPersistence,
        clipboard: Clipboard,
        notifier: Notifier,
        normalizer: EmbedNormalizer | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize the plugin with host collaborators."""

        self._commands = commands
        self._settings_store = settings_store
        self._clipboard = clipboard
        self._notifier = notifier
        self._normalizer = normalizer or EmbedNormalizer()
        self._run_logger = run_logger
        self._settings: NormalizerSettings | None = None

    @property
    def settings(self) -> NormalizerSettings:
        """Return loaded settings or fail when `load` has not run."""

        if self._settings is None:
            raise HostAdapterError(
                stage="settings",
                detail="Plugin settings are not loaded.",
                hint="Call `load()` before invoking commands.",
            )
        return self._settings

    @property
    def is_loaded(self) -> bool:
        """Whether `load` has completed."""

        return self._settings is not None

    def load(self) -> None:
        """Load persisted settings and register both editor commands."""

        try:
            self._settings = self._settings_store.load()
        except HostAdapterError:
            raise
        except (OSError, ValueError) as exc:
            raise HostAdapterError(
                stage="settings",
                detail=f"Failed to load plugin settings: {exc}",
                hint="Fix or delete the settings file and rerun.",
            ) from exc

        self._commands.add_command(
            COMMAND_APPLY_DOCUMENT, "Apply Normalizer", self.apply_to_document
        )
        self._commands.add_command(
            COMMAND_APPLY_SELECTION,
            "Apply Normalizer to Selection",
            self.apply_to_selection,
        )

    def unload(self) -> None:
        """Drop loaded settings."""

        self._settings = None

    def apply_to_document(
        self, editor: EditorBuffer, copy_to_clipboard: bool | None = None
    ) -> str:
        """Normalize the whole document and dispose of the result."""

        return self._run(
            COMMAND_APPLY_DOCUMENT,
            editor.get_value,
            editor.set_value,
            copy_to_clipboard,
        )

    def apply_to_selection(
        self, editor: EditorBuffer, copy_to_clipboard: bool | None = None
    ) -> str:
        """Normalize the current selection and dispose of the result."""

        return self._run(
            COMMAND_APPLY_SELECTION,
            editor.get_selection,
            editor.replace_selection,
            copy_to_clipboard,
        )

    def set_copy_to_clipboard(self, value: bool) -> None:
        """Update the clipboard toggle and persist it immediately."""

        updated = replace(self.settings, copy_to_clipboard=value)
        try:
            saved_path = self._settings_store.save(updated)
        except OSError as exc:
            raise HostAdapterError(
                stage="settings",
                detail=f"Failed to save plugin settings: {exc}",
                hint="Verify the settings directory is writable.",
            ) from exc
        self._settings = updated
        if self._run_logger is not None:
            self._run_logger.log_settings_saved(saved_path)

    def settings_tab(self) -> NormalizerSettingsTab:
        """Return the settings panel bound to this plugin."""

        return NormalizerSettingsTab(self)

    def _run(
        self,
        command_id: str,
        read: Callable[[], str],
        write_back: Callable[[str], None],
        copy_override: bool | None,
    ) -> str:
        """Normalize fully in memory, then copy or write back exactly once."""

        if self._run_logger is not None:
            self._run_logger.log_command_start(command_id)
        try:
            settings = self.settings
            copy_to_clipboard = (
                settings.copy_to_clipboard if copy_override is None else copy_override
            )
            source_text = read()
            token_count = self._normalizer.count(source_text)
            normalized_text = self._normalizer.normalize(source_text)

            if copy_to_clipboard:
                self._clipboard.write_text(normalized_text)
                self._notifier.notice(NOTICE_COPIED)
                disposition = "clipboard"
            else:
                write_back(normalized_text)
                self._notifier.notice(NOTICE_APPLIED)
                disposition = "editor"
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_command_failure(command_id, type(exc).__name__)
            raise

        if self._run_logger is not None:
            self._run_logger.log_command_complete(command_id, token_count, disposition)
        return normalized_text


class NormalizerSettingsTab:
    """Settings panel exposing the clipboard toggle."""

    def __init__(self, plugin: EmbedNormalizerPlugin) -> None:
        """Bind the panel to its plugin."""

        self.plugin = plugin

    def render(self) -> SettingsPanelModel:
        """Build the panel model from current plugin settings."""

        return SettingsPanelModel(
            heading=SETTINGS_HEADING,
            rows=[
                ToggleRow(
                    name="Copy to clipboard",
                    description=(
                        "Copy the normalized text to the clipboard instead of "
                        "applying changes in place (in editor)"
                    ),
                    value=self.plugin.settings.copy_to_clipboard,
                    on_change=self.plugin.set_copy_to_clipboard,
                )
            ],
        )
