"""Local in-memory grid store.

Simple dict-based storage suitable for single-process editing and testing.

Usage:
    store = LocalGridStore()
    editor = Editor(store=store)
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator
from dataclasses import dataclass

from isotile.core.identity import TileId
from isotile.core.types import Coordinate, TileType
from isotile.storage.allocator import TileAllocator


class OccupiedCellError(ValueError):
    """Raised when spawning onto a cell that already has an occupant."""

    def __init__(self, coord: Coordinate, occupant: TileId) -> None:
        self.coord = coord
        self.occupant = occupant
        super().__init__(f"Cell {coord} is already occupied by {occupant}")


@dataclass(slots=True)
class Tile:
    """Occupant record. `tile_type` is mutated in place on overwrite."""

    coord: Coordinate
    tile_type: TileType


class LocalGridStore:
    """In-memory grid keyed by coordinate.

    Structure:
        _tiles[tile_id] = Tile(coord, tile_type)
        _by_coord[coord] = [tile_id, ...]  (spawn order)

    Lookups go through the coordinate index instead of scanning every tile.
    A cell normally holds at most one occupant; when duplicates are allowed
    the earliest spawned one is the first match.

    Args:
        allow_duplicates: Accept a second occupant on an occupied cell with a
            warning instead of raising OccupiedCellError.
    """

    def __init__(self, allow_duplicates: bool = False):
        self._allow_duplicates = allow_duplicates
        self._allocator = TileAllocator()
        self._tiles: dict[TileId, Tile] = {}
        self._by_coord: dict[Coordinate, list[TileId]] = {}

    def spawn(self, coord: Coordinate, tile_type: TileType) -> TileId:
        """Create an occupant at `coord`.

        Raises:
            OccupiedCellError: If `coord` is occupied and duplicates are not allowed.
        """
        existing = self.find(coord)
        if existing is not None:
            if not self._allow_duplicates:
                raise OccupiedCellError(coord, existing)
            warnings.warn(
                f"spawn() placed a second occupant on {coord}. "
                f"Lookups will keep returning {existing}.",
                stacklevel=2,
            )

        tile = self._allocator.allocate()
        self._tiles[tile] = Tile(coord=coord, tile_type=tile_type)
        self._by_coord.setdefault(coord, []).append(tile)
        return tile

    def despawn(self, tile: TileId) -> None:
        """Remove an occupant. Unknown handles are ignored."""
        record = self._tiles.pop(tile, None)
        if record is None:
            return
        occupants = self._by_coord[record.coord]
        occupants.remove(tile)
        if not occupants:
            del self._by_coord[record.coord]
        self._allocator.deallocate(tile)

    def find(self, coord: Coordinate) -> TileId | None:
        """First occupant at `coord`, or None."""
        occupants = self._by_coord.get(coord)
        if not occupants:
            return None
        return occupants[0]

    def tile_type(self, tile: TileId) -> TileType:
        """Current tile type of an occupant.

        Raises:
            KeyError: If the handle is not alive.
        """
        return self._get(tile).tile_type

    def set_tile_type(self, tile: TileId, tile_type: TileType) -> None:
        """Overwrite an occupant's tile type in place."""
        self._get(tile).tile_type = tile_type

    def coordinate(self, tile: TileId) -> Coordinate:
        """Cell an occupant sits on."""
        return self._get(tile).coord

    def tile_type_at(self, coord: Coordinate) -> TileType | None:
        """Tile type of the first occupant at `coord`, or None if empty."""
        tile = self.find(coord)
        if tile is None:
            return None
        return self._tiles[tile].tile_type

    def is_alive(self, tile: TileId) -> bool:
        return tile in self._tiles

    def items(self) -> Iterator[tuple[TileId, Coordinate, TileType]]:
        """Iterate all occupants in spawn order."""
        for tile, record in self._tiles.items():
            yield tile, record.coord, record.tile_type

    def snapshot(self) -> dict[Coordinate, TileType]:
        """Plain copy of the grid keyed by coordinate (first match per cell)."""
        return {coord: self._tiles[ids[0]].tile_type for coord, ids in self._by_coord.items()}

    def clear(self) -> None:
        for tile in list(self._tiles):
            self.despawn(tile)

    def _get(self, tile: TileId) -> Tile:
        record = self._tiles.get(tile)
        if record is None:
            raise KeyError(f"Tile {tile} does not exist")
        return record

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, Coordinate) and coord in self._by_coord
