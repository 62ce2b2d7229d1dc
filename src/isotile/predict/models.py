"""Prediction model keys and state."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class BaseKey:
    """One observed edit: how far the layer moved and which tile was placed.

    `layer_change` is relative to the previous Set the model saw, not to any
    notion of the editor's current layer.
    """

    layer_change: int
    tile_type: int

    def to_dict(self) -> dict[str, int]:
        return {"layer_change": self.layer_change, "tile_type": self.tile_type}


type Context = tuple[BaseKey, ...]
"""The last DEPTH keys, oldest first."""

type Ranking = list[tuple[BaseKey, int]]
"""Outcomes with their counts, most frequent first."""


@dataclass(slots=True)
class PredictState:
    """Session-scoped model state. Mutated only by PredictionModel."""

    history: deque[BaseKey] = field(default_factory=deque)
    """Recent keys. Holds at most DEPTH entries between ticks."""

    table: dict[Context, Counter[BaseKey]] = field(default_factory=dict)
    """context -> outcome counts. Grows for the whole session, no eviction."""

    last_layer: int = 0
    """Layer of the previous Set seen."""
