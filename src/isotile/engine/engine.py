"""Command engine: applies edit batches to the grid and records undo inverses.

Usage:
    engine = CommandEngine()
    engine.tick([Set([Coordinate(0, 0)], 3)], store)
    engine.tick([Undo()], store)

Processing order:
    The batch is loaded into a deque in arrival order and drained from the
    TAIL, so commands in one tick run in reverse arrival order. Inverses
    expanded by an Undo are pushed onto the same tail and therefore run
    before any original command still waiting at the front.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

from isotile.core.command import Command, Despawn, Set, check_command
from isotile.core.types import Coordinate, TileType
from isotile.engine.models import CommandState, WorkItem
from isotile.engine.undo import UndoHistory
from isotile.storage.protocol import GridStore

logger = logging.getLogger(__name__)


class CommandEngine:
    """Turns per-tick command batches into grid mutations.

    Every inverse recorded during one tick shares one transaction id, and the
    id advances by exactly one per tick, even for an empty batch.

    Args:
        state: Existing engine state to continue from (fresh state if None).
    """

    def __init__(self, state: CommandState | None = None) -> None:
        self._state = state or CommandState()

    @property
    def state(self) -> CommandState:
        return self._state

    @property
    def undo_history(self) -> UndoHistory:
        return self._state.undo_stack

    @property
    def transaction_id(self) -> int:
        """Id the next tick will record under."""
        return self._state.transaction_counter

    def tick(self, batch: Sequence[Command], store: GridStore) -> None:
        """Apply one tick's batch to `store`.

        Raises:
            TypeError: If any item is not a Command. Nothing is applied and
                the transaction id does not advance.
        """
        for command in batch:
            check_command(command)

        transaction_id = self._state.transaction_counter
        queue: deque[WorkItem] = deque(WorkItem(command, user_generated=True) for command in batch)

        while queue:
            item = queue.pop()
            command = item.command
            if isinstance(command, Set):
                self._apply_set(command, item.user_generated, transaction_id, store)
            elif isinstance(command, Despawn):
                self._apply_despawn(command.coord, store)
            else:
                self._expand_undo(queue)

        logger.debug(
            "transaction %d done, undo stack: %d entries",
            transaction_id,
            len(self._state.undo_stack),
        )
        self._state.transaction_counter += 1

    def _apply_set(
        self,
        command: Set,
        user_generated: bool,
        transaction_id: int,
        store: GridStore,
    ) -> None:
        for coord in command.coords:
            self._set_cell(coord, command.tile_type, user_generated, transaction_id, store)

    def _set_cell(
        self,
        coord: Coordinate,
        tile_type: TileType,
        user_generated: bool,
        transaction_id: int,
        store: GridStore,
    ) -> None:
        tile = store.find(coord)
        if tile is not None:
            previous = store.tile_type(tile)
            logger.debug("pick: %s %d -> %d", coord, previous, tile_type)
            if user_generated:
                self._state.undo_stack.record(
                    transaction_id, Set(coords=(coord,), tile_type=previous)
                )
            store.set_tile_type(tile, tile_type)
            return

        logger.debug("spawn: %s %d", coord, tile_type)
        store.spawn(coord, tile_type)
        if user_generated:
            self._state.undo_stack.record(transaction_id, Despawn(coord))

    def _apply_despawn(self, coord: Coordinate, store: GridStore) -> None:
        tile = store.find(coord)
        if tile is None:
            return
        logger.debug("despawn: %s", coord)
        store.despawn(tile)

    def _expand_undo(self, queue: deque[WorkItem]) -> None:
        group = self._state.undo_stack.pop_transaction()
        if not group:
            return

        logger.debug("undo: transaction %d (%d entries)", group[0].transaction_id, len(group))
        # Newest inverse ends up at the tail so it is replayed first
        for entry in reversed(group):
            queue.append(WorkItem(entry.inverse, user_generated=False))
