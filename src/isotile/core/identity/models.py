"""Tile identity models.

Usage:
    tile = TileId(index=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TileId:
    """Lightweight handle to a grid occupant with generation for safe reuse.

    A renderer can key its sprites by TileId: an overwrite keeps the handle,
    a despawn retires it, and a later spawn that reuses the index carries a
    higher generation.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))
