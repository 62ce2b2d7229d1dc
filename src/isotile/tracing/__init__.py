"""Tracing infrastructure for recording editor ticks.

Usage:
    from isotile.tracing import InMemoryHistoryStore, TickRecord

    history = InMemoryHistoryStore(max_ticks=500)
    editor = Editor(history=history)
"""

from isotile.tracing.memory import InMemoryHistoryStore
from isotile.tracing.models import TickRecord, grid_snapshot_from_dict, grid_snapshot_to_dict
from isotile.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
    "grid_snapshot_to_dict",
    "grid_snapshot_from_dict",
]
