"""Grid storage backends."""

from isotile.storage.allocator import TileAllocator
from isotile.storage.local import LocalGridStore, OccupiedCellError, Tile
from isotile.storage.protocol import GridStore

__all__ = [
    "GridStore",
    "LocalGridStore",
    "OccupiedCellError",
    "Tile",
    "TileAllocator",
]
