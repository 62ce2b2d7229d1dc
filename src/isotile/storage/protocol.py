"""Grid store protocol for swappable backends.

The storage layer abstracts where tiles live, enabling:
- Local in-memory (default)
- Chunked stores for very large maps (future)

Usage:
    store = LocalGridStore()
    editor = Editor(store=store)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from isotile.core.identity import TileId
from isotile.core.types import Coordinate, TileType


class GridStore(Protocol):
    """Abstract grid interface. Implementations handle actual data."""

    def spawn(self, coord: Coordinate, tile_type: TileType) -> TileId:
        """Create an occupant at `coord`."""
        ...

    def despawn(self, tile: TileId) -> None:
        """Remove an occupant."""
        ...

    def find(self, coord: Coordinate) -> TileId | None:
        """First occupant at `coord`, or None."""
        ...

    def tile_type(self, tile: TileId) -> TileType:
        """Current tile type of an occupant."""
        ...

    def set_tile_type(self, tile: TileId, tile_type: TileType) -> None:
        """Overwrite an occupant's tile type in place."""
        ...

    def coordinate(self, tile: TileId) -> Coordinate:
        """Cell an occupant sits on."""
        ...

    def items(self) -> Iterator[tuple[TileId, Coordinate, TileType]]:
        """Iterate all occupants in insertion order."""
        ...

    def snapshot(self) -> dict[Coordinate, TileType]:
        """Plain copy of the grid keyed by coordinate."""
        ...

    def __len__(self) -> int:
        """Number of occupants."""
        ...
