"""Command engine state and work items."""

from __future__ import annotations

from dataclasses import dataclass, field

from isotile.core.command import Command
from isotile.engine.undo import UndoHistory


@dataclass(slots=True)
class CommandState:
    """Session-scoped engine state.

    Mutated only by CommandEngine.tick().
    """

    undo_stack: UndoHistory = field(default_factory=UndoHistory)
    """Recorded inverses, most recent at the tail."""

    transaction_counter: int = 0
    """Id of the transaction the next tick records under. +1 per tick."""


@dataclass(frozen=True, slots=True)
class WorkItem:
    """Entry of the per-tick work deque."""

    command: Command
    user_generated: bool
    """False for commands replayed by an undo. Only user commands record inverses."""
