"""Online next-edit prediction.

Learns a fixed-context frequency table over the editor's own Set stream:
given the last DEPTH edits (layer change + tile type), count what came next.
The intent is to anticipate follow-up edits such as a ramp on a higher layer
after a path on layer 0.

Usage:
    model = PredictionModel(depth=2)
    model.tick(batch)
    model.predict((BaseKey(0, 1), BaseKey(0, 1)))
    # [(BaseKey(layer_change=0, tile_type=2), 3), ...]
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator, Sequence

from isotile.core.command import Command, Set
from isotile.predict.models import BaseKey, Context, PredictState, Ranking

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 2
DEFAULT_EMPTY_SET_LAYER = 1


def sliding_windows(keys: Sequence[BaseKey], size: int) -> Iterator[Context]:
    """Every contiguous window of `size` keys, in order."""
    for start in range(len(keys) - size + 1):
        yield tuple(keys[start : start + size])


class PredictionModel:
    """Context-conditioned frequency table trained once per tick.

    Passive observer: reads the same batch the engine applies and never
    touches the grid or the undo history.

    Args:
        depth: Context length. Training windows are `depth + 1` long.
        empty_set_layer: Layer assumed for a Set with no coordinates.
        state: Existing state to continue from (fresh state if None).
    """

    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        empty_set_layer: int = DEFAULT_EMPTY_SET_LAYER,
        state: PredictState | None = None,
    ) -> None:
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")
        self._depth = depth
        self._empty_set_layer = empty_set_layer
        self._state = state or PredictState()

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def state(self) -> PredictState:
        return self._state

    @property
    def history(self) -> tuple[BaseKey, ...]:
        return tuple(self._state.history)

    def tick(self, batch: Sequence[Command]) -> dict[Context, Ranking]:
        """Train on one tick's batch and return the current predictions.

        Sets are folded in arrival order (the engine applies them in reverse;
        the model deliberately does not).
        """
        for command in batch:
            if isinstance(command, Set):
                self.observe(command)
        self.consolidate()
        return self.predictions()

    def observe(self, command: Set) -> BaseKey:
        """Append the key for one Set to the running history."""
        if command.coords:
            layer = int(command.coords[0].layer)
        else:
            layer = self._empty_set_layer
        key = BaseKey(layer_change=layer - self._state.last_layer, tile_type=command.tile_type)
        self._state.history.append(key)
        self._state.last_layer = layer
        return key

    def consolidate(self) -> None:
        """Count every (DEPTH+1)-window of the history, then trim it to DEPTH."""
        history = self._state.history
        if len(history) > self._depth:
            for window in sliding_windows(tuple(history), self._depth + 1):
                context, outcome = window[:-1], window[-1]
                self._state.table.setdefault(context, Counter())[outcome] += 1
                logger.debug("train: %s -> %s", context, outcome)

        while len(history) > self._depth:
            history.popleft()

    def predict(self, context: Sequence[BaseKey]) -> Ranking:
        """Outcomes seen after `context`, most frequent first.

        Ties keep the table's insertion order; callers should not rely on it.
        Unknown contexts give an empty list.
        """
        counts = self._state.table.get(tuple(context))
        if counts is None:
            return []
        return counts.most_common()

    def predictions(self) -> dict[Context, Ranking]:
        """Ranking for every DEPTH-window of the current history that has data."""
        result: dict[Context, Ranking] = {}
        for context in sliding_windows(tuple(self._state.history), self._depth):
            ranking = self.predict(context)
            if ranking:
                result[context] = ranking
        return result

    def count(self, context: Sequence[BaseKey], outcome: BaseKey) -> int:
        """How often `outcome` followed `context` (0 if never)."""
        counts = self._state.table.get(tuple(context))
        if counts is None:
            return 0
        return counts[outcome]

    def __len__(self) -> int:
        """Number of known contexts."""
        return len(self._state.table)
