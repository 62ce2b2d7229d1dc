"""Edit commands and undo records."""

from isotile.core.command.models import (
    Command,
    Despawn,
    InverseCommand,
    Set,
    Undo,
    UndoEntry,
    check_command,
    command_from_dict,
    command_to_dict,
)

__all__ = [
    "Command",
    "InverseCommand",
    "Set",
    "Despawn",
    "Undo",
    "UndoEntry",
    "check_command",
    "command_to_dict",
    "command_from_dict",
]
