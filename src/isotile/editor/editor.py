"""Editor: session coordinator for the grid, the command engine and the model.

Usage:
    editor = Editor()

    # Input adapters submit resolved commands
    editor.submit(Set([Coordinate(0, 0), Coordinate(1, 0)], tile_type=3))
    editor.tick()

    # Renderers read the grid after each tick
    for coord, tile_type in editor.tiles():
        ...

    editor.submit(Undo())
    editor.tick()
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator, Sequence

from isotile.config import EditorSettings
from isotile.core.command import Command, UndoEntry, check_command, command_to_dict
from isotile.core.types import Coordinate, Copy, TileType
from isotile.engine import CommandEngine
from isotile.predict import BaseKey, Context, PredictionModel, Ranking
from isotile.storage.local import LocalGridStore
from isotile.storage.protocol import GridStore
from isotile.tracing import HistoryStore, InMemoryHistoryStore, TickRecord, grid_snapshot_to_dict

logger = logging.getLogger(__name__)


class Editor:
    """Owns one editing session.

    Commands submitted between two calls to tick() form one batch. The engine
    applies the batch (one undo transaction), then the prediction model
    trains on the same batch.

    Args:
        store: Grid backend (LocalGridStore if None).
        engine: Command engine (fresh if None).
        model: Prediction model (depth 2 if None).
        history: Optional tick recorder.
    """

    def __init__(
        self,
        store: GridStore | None = None,
        engine: CommandEngine | None = None,
        model: PredictionModel | None = None,
        history: HistoryStore | None = None,
    ):
        self._store = store if store is not None else LocalGridStore()
        self._engine = engine if engine is not None else CommandEngine()
        self._model = model if model is not None else PredictionModel()
        self._history = history
        self._inbox: list[Command] = []
        self._tick = 0

    @classmethod
    def from_settings(cls, settings: EditorSettings | None = None) -> Editor:
        """Build an editor from EditorSettings (read from the environment if None)."""
        settings = settings or EditorSettings()
        history = None
        if settings.trace_max_ticks is not None:
            history = InMemoryHistoryStore(max_ticks=settings.trace_max_ticks)
        return cls(
            store=LocalGridStore(allow_duplicates=settings.allow_duplicate_occupants),
            model=PredictionModel(
                depth=settings.prediction_depth,
                empty_set_layer=settings.empty_set_layer,
            ),
            history=history,
        )

    @property
    def store(self) -> GridStore:
        return self._store

    @property
    def engine(self) -> CommandEngine:
        return self._engine

    @property
    def model(self) -> PredictionModel:
        return self._model

    @property
    def history(self) -> HistoryStore | None:
        return self._history

    @property
    def tick_count(self) -> int:
        """Number of ticks run so far."""
        return self._tick

    @property
    def transaction_id(self) -> int:
        """Transaction id the next tick will record under."""
        return self._engine.transaction_id

    @property
    def undo_entries(self) -> tuple[UndoEntry, ...]:
        """Recorded undo entries, oldest first."""
        return self._engine.undo_history.entries

    @property
    def pending(self) -> tuple[Command, ...]:
        """Commands waiting for the next tick."""
        return tuple(self._inbox)

    def submit(self, *commands: Command) -> None:
        """Queue commands for the next tick, in order.

        Raises:
            TypeError: If any argument is not a Command. Nothing is queued.
        """
        for command in commands:
            check_command(command)
        self._inbox.extend(commands)

    def tick(self) -> dict[Context, Ranking]:
        """Run one tick and return the model's current predictions.

        The inbox is swapped out before anything runs, so commands submitted
        while the tick executes land in the next batch.
        """
        batch: Sequence[Command] = tuple(self._inbox)
        self._inbox = []
        transaction_id = self._engine.transaction_id

        started = time.perf_counter()
        self._engine.tick(batch, self._store)
        engine_done = time.perf_counter()
        predictions = self._model.tick(batch)
        predict_done = time.perf_counter()

        logger.debug(
            "tick %d: %d commands, %d tiles, %d undo entries",
            self._tick,
            len(batch),
            len(self._store),
            len(self._engine.undo_history),
        )

        if self._history is not None:
            self._history.record_tick(
                TickRecord(
                    tick=self._tick,
                    timestamp=time.time(),
                    snapshot=grid_snapshot_to_dict(self._store.snapshot()),
                    events=[command_to_dict(command) for command in batch],
                    stage_timings={
                        "engine": (engine_done - started) * 1000.0,
                        "predict": (predict_done - engine_done) * 1000.0,
                    },
                    metadata={
                        "transaction_id": transaction_id,
                        "undo_depth": len(self._engine.undo_history),
                    },
                )
            )

        self._tick += 1
        return predictions

    def tiles(self) -> Iterator[tuple[Coordinate, TileType]]:
        """Iterate occupied cells as (coordinate, tile_type)."""
        for _, coord, tile_type in self._store.items():
            yield coord, tile_type

    def tile_at(self, coord: Coordinate) -> TileType | None:
        """Tile type at `coord`, None if the cell is empty."""
        tile = self._store.find(coord)
        if tile is None:
            return None
        return self._store.tile_type(tile)

    def snapshot(self) -> Copy[dict[Coordinate, TileType]]:
        """Copy of the grid keyed by coordinate."""
        return self._store.snapshot()

    def predict(self, context: Sequence[BaseKey]) -> Ranking:
        """Ranked outcomes for an explicit context."""
        return self._model.predict(context)

    def predictions(self) -> dict[Context, Ranking]:
        """Ranked outcomes for the model's current context."""
        return self._model.predictions()
