"""Edit command models.

Commands are the only way the input layer talks to the engine. They are
immutable values: an adapter resolves screen input into target cells, builds
a command, and submits it for the next tick.

Usage:
    paint = Set(coords=[Coordinate(3, 4, 0)], tile_type=7)
    erase = Despawn(Coordinate(3, 4, 0))
    undo = Undo()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from isotile.core.types import Coordinate, TileType


@dataclass(frozen=True, slots=True)
class Set:
    """Assign `tile_type` to every cell in `coords`.

    Cells are processed in list order. Line-fill (shift-drag) arrives here as
    one Set with many coordinates and is undone as one unit.
    """

    coords: tuple[Coordinate, ...]
    tile_type: TileType

    def __post_init__(self) -> None:
        if isinstance(self.tile_type, bool) or not isinstance(self.tile_type, int):
            raise TypeError(f"tile_type must be an int, got {type(self.tile_type)}")
        if self.tile_type < 0:
            raise ValueError(f"tile_type must be a non-negative index, got {self.tile_type}")
        # Accept any iterable so adapters can pass lists
        object.__setattr__(self, "coords", tuple(self.coords))


@dataclass(frozen=True, slots=True)
class Despawn:
    """Remove whatever occupies `coord`. Missing occupant is a no-op."""

    coord: Coordinate


@dataclass(frozen=True, slots=True)
class Undo:
    """Reverse the most recent transaction."""


type Command = Set | Despawn | Undo
"""Any edit request accepted by the engine."""

type InverseCommand = Set | Despawn
"""Commands that can appear in the undo history."""


@dataclass(frozen=True, slots=True)
class UndoEntry:
    """One recorded inverse, tagged with the transaction (tick) it belongs to."""

    transaction_id: int
    inverse: InverseCommand


def check_command(command: object) -> None:
    """Raise TypeError unless `command` is a Set, Despawn or Undo."""
    if not isinstance(command, (Set, Despawn, Undo)):
        raise TypeError(f"Expected Command, got {type(command)}")


def command_to_dict(command: Command) -> dict[str, Any]:
    """Convert a command to a JSON-compatible dict (for tracing)."""
    if isinstance(command, Set):
        return {
            "type": "set",
            "coords": [c.to_dict() for c in command.coords],
            "tile_type": command.tile_type,
        }
    if isinstance(command, Despawn):
        return {"type": "despawn", "coord": command.coord.to_dict()}
    if isinstance(command, Undo):
        return {"type": "undo"}
    raise TypeError(f"Expected Command, got {type(command)}")


def command_from_dict(data: dict[str, Any]) -> Command:
    """Inverse of command_to_dict."""
    kind = data.get("type")
    if kind == "set":
        return Set(
            coords=[Coordinate.from_dict(c) for c in data["coords"]],
            tile_type=data["tile_type"],
        )
    if kind == "despawn":
        return Despawn(Coordinate.from_dict(data["coord"]))
    if kind == "undo":
        return Undo()
    raise ValueError(f"Unknown command type: {kind!r}")
