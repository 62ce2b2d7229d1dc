"""Tests for UndoHistory grouping."""

from isotile.core import Coordinate, Despawn, Set
from isotile.engine import UndoHistory


def _despawn(x: int) -> Despawn:
    return Despawn(Coordinate(x, 0))


def test_empty_history() -> None:
    history = UndoHistory()

    assert history.peek() is None
    assert history.pop_transaction() == []
    assert not history
    assert len(history) == 0


def test_pop_transaction_takes_whole_tail_group_newest_first() -> None:
    history = UndoHistory()
    history.record(0, _despawn(0))
    history.record(1, _despawn(1))
    history.record(1, Set([Coordinate(2, 0)], 3))

    group = history.pop_transaction()

    assert [entry.inverse for entry in group] == [Set([Coordinate(2, 0)], 3), _despawn(1)]
    assert {entry.transaction_id for entry in group} == {1}
    assert len(history) == 1
    assert history.peek() == history.entries[0]
    assert history.peek().transaction_id == 0


def test_pop_transaction_stops_at_id_change() -> None:
    history = UndoHistory()
    history.record(4, _despawn(0))
    history.record(7, _despawn(1))

    assert len(history.pop_transaction()) == 1
    assert len(history.pop_transaction()) == 1
    assert history.pop_transaction() == []


def test_transaction_ids() -> None:
    history = UndoHistory()
    for transaction_id in (0, 0, 2, 3, 3, 3):
        history.record(transaction_id, _despawn(transaction_id))

    assert history.transaction_ids() == [0, 2, 3]


def test_clear() -> None:
    history = UndoHistory()
    history.record(0, _despawn(0))
    history.clear()

    assert len(history) == 0
