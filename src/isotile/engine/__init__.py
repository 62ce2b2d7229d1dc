"""Command engine and undo history."""

from isotile.engine.engine import CommandEngine
from isotile.engine.models import CommandState, WorkItem
from isotile.engine.undo import UndoHistory

__all__ = [
    "CommandEngine",
    "CommandState",
    "UndoHistory",
    "WorkItem",
]
