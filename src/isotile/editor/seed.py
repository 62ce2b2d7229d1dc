"""Initial map content for a new session."""

from __future__ import annotations

from isotile.core.types import Coordinate, TileType
from isotile.storage.protocol import GridStore


def seed_grid(
    store: GridStore,
    width: int = 16,
    height: int = 16,
    layers: int = 2,
    ground_tile: TileType = 0,
    upper_tile: TileType = 8,
) -> int:
    """Fill every cell of every layer directly in the store.

    Layer 0 gets `ground_tile`, higher layers `upper_tile`. Within a layer
    cells are inserted in reverse row-major order so back rows come last.
    Nothing is recorded for undo.

    Returns:
        Number of cells created.
    """
    if width < 0 or height < 0 or layers < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}x{layers}")

    created = 0
    for layer in range(layers):
        tile_type = ground_tile if layer == 0 else upper_tile
        cells = [
            Coordinate(float(x), float(y), float(layer))
            for y in range(height)
            for x in range(width)
        ]
        for coord in reversed(cells):
            store.spawn(coord, tile_type)
            created += 1
    return created
