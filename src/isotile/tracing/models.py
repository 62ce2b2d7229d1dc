"""Data models for tracing infrastructure.

Records hold plain JSON-compatible values so any tool can inspect them
without importing isotile types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from isotile.core.types import Coordinate, TileType


@dataclass(slots=True)
class TickRecord:
    """Complete record of a single editor tick.

    Attributes:
        tick: The tick number.
        timestamp: Unix timestamp when the tick finished.
        snapshot: Grid state after the tick (see grid_snapshot_to_dict).
        events: Commands submitted for this tick, in arrival order.
        stage_timings: Optional dict of stage_name -> execution_time_ms.
        metadata: Optional arbitrary metadata (transaction id, undo depth, ...).

    Example:
        record = TickRecord(
            tick=42,
            timestamp=1704067200.0,
            snapshot={"tiles": [...]},
            events=[{"type": "undo"}],
            stage_timings={"engine": 0.4, "predict": 0.1},
        )
    """

    tick: int
    timestamp: float
    snapshot: dict[str, Any]
    events: list[dict[str, Any]] = field(default_factory=list)
    stage_timings: dict[str, float] | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "tick": self.tick,
            "timestamp": self.timestamp,
            "snapshot": self.snapshot,
            "events": self.events,
        }
        if self.stage_timings is not None:
            result["stage_timings"] = self.stage_timings
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TickRecord:
        """Create from dictionary."""
        return cls(
            tick=data["tick"],
            timestamp=data["timestamp"],
            snapshot=data["snapshot"],
            events=data.get("events", []),
            stage_timings=data.get("stage_timings"),
            metadata=data.get("metadata"),
        )


def grid_snapshot_to_dict(snapshot: dict[Coordinate, TileType]) -> dict[str, Any]:
    """Flatten a store snapshot into `{"tiles": [{x, y, layer, tile_type}, ...]}`."""
    return {
        "tiles": [
            {**coord.to_dict(), "tile_type": tile_type} for coord, tile_type in snapshot.items()
        ]
    }


def grid_snapshot_from_dict(data: dict[str, Any]) -> dict[Coordinate, TileType]:
    """Inverse of grid_snapshot_to_dict."""
    return {Coordinate.from_dict(tile): tile["tile_type"] for tile in data.get("tiles", [])}
