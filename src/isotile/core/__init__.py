"""Core functionalities: stateless value types.

Architecture Note:
    core/ contains immutable values shared by every layer: coordinates,
    tile handles and edit commands. There is no runtime state here.
    For stateful services, see storage/, engine/, predict/ and editor/.
"""

from isotile.core.command import (
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
from isotile.core.identity import TileId
from isotile.core.types import Coordinate, Copy, TileType

__all__ = [
    # Types
    "Copy",
    "Coordinate",
    "TileType",
    # Identity
    "TileId",
    # Commands
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
