"""Core type definitions for isotile."""

from __future__ import annotations

from dataclasses import dataclass

type TileType = int
"""Opaque palette index of a tile. Renderers map it to a sprite."""

type Copy[T] = T
"""Type alias indicating a value is a copy that won't auto-persist.

When you see `Copy[T]` in a return type, mutating the returned value does NOT
change grid state. Write changes back through a command or the store API.
"""


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Cell address on the isometric grid.

    `(x, y)` is the position on the ground plane and `layer` the integer-valued
    elevation. Equality is exact component-wise comparison, no tolerance.
    """

    x: float
    y: float
    layer: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        """Ground-plane position as an `(x, y)` pair."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "layer": self.layer}

    @classmethod
    def from_dict(cls, data: dict[str, float]) -> Coordinate:
        return cls(x=data["x"], y=data["y"], layer=data.get("layer", 0.0))
