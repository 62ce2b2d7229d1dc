"""Bounded in-memory HistoryStore."""

from __future__ import annotations

from collections import deque
from typing import Any

from isotile.tracing.models import TickRecord


class InMemoryHistoryStore:
    """Keeps the most recent `max_ticks` records, evicting the oldest.

    Args:
        max_ticks: Capacity. None keeps every record for the session.
    """

    def __init__(self, max_ticks: int | None = None) -> None:
        if max_ticks is not None and max_ticks < 1:
            raise ValueError(f"max_ticks must be positive, got {max_ticks}")
        self._records: deque[TickRecord] = deque(maxlen=max_ticks)

    def record_tick(self, record: TickRecord) -> None:
        self._records.append(record)

    def get_tick(self, tick: int) -> TickRecord | None:
        for record in self._records:
            if record.tick == tick:
                return record
        return None

    def get_snapshot(self, tick: int) -> dict[str, Any] | None:
        record = self.get_tick(tick)
        if record is None:
            return None
        return record.snapshot

    def get_events(self, start_tick: int, end_tick: int) -> list[dict[str, Any]]:
        events: list[dict[str, Any]] = []
        for record in self._records:
            if start_tick <= record.tick <= end_tick:
                events.extend(record.events)
        return events

    def get_tick_range(self) -> tuple[int, int] | None:
        if not self._records:
            return None
        return self._records[0].tick, self._records[-1].tick

    def clear(self) -> None:
        self._records.clear()

    @property
    def tick_count(self) -> int:
        return len(self._records)
