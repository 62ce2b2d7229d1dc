"""Protocols for tracing infrastructure.

These protocols define the interface for tick history backends, so the
editor can record into memory today and into other sinks later.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from isotile.tracing.models import TickRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for storing and retrieving tick history.

    Implementations store TickRecords and provide random access to past grid
    states for debugging an editing session step by step.

    Usage:
        store = InMemoryHistoryStore(max_ticks=1000)
        editor = Editor(history=store)

        editor.submit(Set([Coordinate(0, 0)], 3))
        editor.tick()

        snapshot = store.get_snapshot(tick=0)
        events = store.get_events(start_tick=0, end_tick=10)
    """

    def record_tick(self, record: TickRecord) -> None:
        """Record a tick's state and events.

        Note:
            Implementations may have bounded storage (e.g., last N ticks).
            Older records may be evicted when the limit is reached.
        """
        ...

    def get_tick(self, tick: int) -> TickRecord | None:
        """Get complete tick record, None if not in storage."""
        ...

    def get_snapshot(self, tick: int) -> dict[str, Any] | None:
        """Get grid snapshot at specific tick, None if not in storage."""
        ...

    def get_events(self, start_tick: int, end_tick: int) -> list[dict[str, Any]]:
        """Get events in tick range (inclusive), flattened in tick order."""
        ...

    def get_tick_range(self) -> tuple[int, int] | None:
        """Get available (min_tick, max_tick), None if empty."""
        ...

    def clear(self) -> None:
        """Clear all stored history."""
        ...

    @property
    def tick_count(self) -> int:
        """Number of ticks currently stored."""
        ...
