"""Transaction-grouped undo history.

Entries are appended at the tail and popped from the tail, one whole
transaction at a time. A transaction is every inverse recorded during one
engine tick, so a multi-cell edit undoes as a unit.
"""

from __future__ import annotations

from collections.abc import Iterator

from isotile.core.command import InverseCommand, UndoEntry


class UndoHistory:
    """Ordered log of (transaction id, inverse command) pairs."""

    def __init__(self) -> None:
        self._entries: list[UndoEntry] = []

    def record(self, transaction_id: int, inverse: InverseCommand) -> UndoEntry:
        """Append an inverse under `transaction_id`."""
        entry = UndoEntry(transaction_id=transaction_id, inverse=inverse)
        self._entries.append(entry)
        return entry

    def peek(self) -> UndoEntry | None:
        """Most recent entry without removing it."""
        if not self._entries:
            return None
        return self._entries[-1]

    def pop_transaction(self) -> list[UndoEntry]:
        """Remove and return the most recent transaction, newest entry first.

        Returns an empty list when the history is empty.
        """
        group: list[UndoEntry] = []
        if not self._entries:
            return group

        transaction_id = self._entries[-1].transaction_id
        while self._entries and self._entries[-1].transaction_id == transaction_id:
            group.append(self._entries.pop())
        return group

    def transaction_ids(self) -> list[int]:
        """Distinct transaction ids, oldest first."""
        ids: list[int] = []
        for entry in self._entries:
            if not ids or ids[-1] != entry.transaction_id:
                ids.append(entry.transaction_id)
        return ids

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> tuple[UndoEntry, ...]:
        """Snapshot of all entries, oldest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[UndoEntry]:
        return iter(tuple(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)
