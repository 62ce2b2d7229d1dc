"""Tile allocation service.

TileAllocator is a stateful service that manages TileId lifecycle.
"""

from __future__ import annotations

from isotile.core.identity import TileId


class TileAllocator:
    """Allocates tile IDs with generation tracking for recycling.

    Maintains a free list of deallocated indices with incremented generations
    so a stale handle held by a renderer never aliases a newer tile.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}
        self._live: set[int] = set()

    def allocate(self) -> TileId:
        """Allocate new tile ID, reusing recycled slots when available.

        Returns:
            Newly allocated TileId.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
        else:
            index, gen = self._next_index, 0
            self._next_index += 1
        self._generations[index] = gen
        self._live.add(index)
        return TileId(index=index, generation=gen)

    def deallocate(self, tile: TileId) -> None:
        """Return tile ID for reuse with incremented generation.

        Raises:
            ValueError: If the handle is not currently alive.
        """
        if not self.is_alive(tile):
            raise ValueError(f"Cannot deallocate {tile}: not alive")

        new_gen = tile.generation + 1
        self._generations[tile.index] = new_gen
        self._live.discard(tile.index)
        self._free_list.append((tile.index, new_gen))

    def is_alive(self, tile: TileId) -> bool:
        """Check if tile ID is still valid (not recycled)."""
        return tile.index in self._live and self._generations[tile.index] == tile.generation
