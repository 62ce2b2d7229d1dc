"""Tests for tracing data models.

Why these tests exist:
- TickRecord is the unit the editor hands to a HistoryStore
- Optional fields must be omitted from dicts when unset
- Grid snapshots must flatten to JSON-compatible dicts and back
"""

import pytest

from isotile import Coordinate
from isotile.tracing import TickRecord, grid_snapshot_from_dict, grid_snapshot_to_dict


@pytest.mark.parametrize(
    ("kwargs", "check_missing", "check_present"),
    [
        (
            {"tick": 1, "timestamp": 0.0, "snapshot": {"tiles": []}},
            ["stage_timings", "metadata"],
            {"tick": 1, "timestamp": 0.0, "snapshot": {"tiles": []}, "events": []},
        ),
        (
            {
                "tick": 5,
                "timestamp": 123.456,
                "snapshot": {"tiles": [{"x": 0, "y": 0, "layer": 0, "tile_type": 2}]},
                "events": [{"type": "undo"}],
                "stage_timings": {"engine": 0.5, "predict": 0.1},
                "metadata": {"transaction_id": 5},
            },
            [],
            {
                "tick": 5,
                "events": [{"type": "undo"}],
                "stage_timings": {"engine": 0.5, "predict": 0.1},
                "metadata": {"transaction_id": 5},
            },
        ),
    ],
    ids=["minimal", "full"],
)
def test_tick_record_to_dict(kwargs, check_missing, check_present) -> None:
    """to_dict handles optional fields correctly."""
    data = TickRecord(**kwargs).to_dict()

    for key in check_missing:
        assert key not in data

    for key, value in check_present.items():
        assert data[key] == value


def test_tick_record_from_dict_minimal() -> None:
    """from_dict handles missing optional fields."""
    record = TickRecord.from_dict({"tick": 10, "timestamp": 500.0, "snapshot": {"tiles": []}})
    assert record.tick == 10
    assert record.events == []
    assert record.stage_timings is None
    assert record.metadata is None


def test_grid_snapshot_dict_preserves_cells() -> None:
    snapshot = {Coordinate(0, 0, 0): 1, Coordinate(2, 3, 1): 8}

    data = grid_snapshot_to_dict(snapshot)

    assert {"x": 2.0, "y": 3.0, "layer": 1.0, "tile_type": 8} in data["tiles"]
    assert grid_snapshot_from_dict(data) == snapshot
