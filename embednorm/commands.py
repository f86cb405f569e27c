"""In-process command registry used by the CLI host."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .errors import HostAdapterError


@dataclass(frozen=True, slots=True)
class EditorCommand:
    """Registered editor command."""

    command_id: str
    name: str
    editor_callback: Callable[..., object]


class CommandRegistry:
    """Keep registered editor commands in registration order."""

    def __init__(self) -> None:
        self._commands: dict[str, EditorCommand] = {}

    def add_command(
        self, command_id: str, name: str, editor_callback: Callable[..., object]
    ) -> None:
        """Register a command, rejecting duplicate ids."""

        if command_id in self._commands:
            raise HostAdapterError(
                stage="command",
                detail=f"Command `{command_id}` is already registered.",
            )
        self._commands[command_id] = EditorCommand(command_id, name, editor_callback)

    def list_commands(self) -> list[EditorCommand]:
        return list(self._commands.values())

    def execute(self, command_id: str, editor: object, **options: object) -> object:
        """Run a registered command against an editor buffer."""

        command = self._commands.get(command_id)
        if command is None:
            available = ", ".join(self._commands) or "none"
            raise HostAdapterError(
                stage="command",
                detail=f"Unknown command `{command_id}`.",
                hint=f"Registered commands: {available}.",
            )
        return command.editor_callback(editor, **options)
