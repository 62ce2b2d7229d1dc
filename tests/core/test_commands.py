"""Tests for coordinates and command values.

Why these tests exist:
- Coordinates are store keys, so equality and hashing must be exact
- Commands are immutable values shared between engine and model
- Tracing relies on the dict conversion of every command variant
"""

import pytest

from isotile.core import (
    Coordinate,
    Despawn,
    Set,
    Undo,
    UndoEntry,
    check_command,
    command_from_dict,
    command_to_dict,
)


def test_coordinate_equality_is_exact() -> None:
    assert Coordinate(1.0, 2.0, 0.0) == Coordinate(1, 2, 0)
    assert Coordinate(1.0, 2.0, 0.0) != Coordinate(1.0, 2.0000001, 0.0)
    assert Coordinate(1.0, 2.0, 0.0) != Coordinate(1.0, 2.0, 1.0)


def test_coordinate_is_hashable_key() -> None:
    cells = {Coordinate(0, 0): "a", Coordinate(0, 0, 1): "b"}
    assert cells[Coordinate(0.0, 0.0, 0.0)] == "a"
    assert cells[Coordinate(0.0, 0.0, 1.0)] == "b"


def test_coordinate_position() -> None:
    assert Coordinate(3.0, 4.0, 2.0).position == (3.0, 4.0)


def test_set_accepts_list_and_stores_tuple() -> None:
    """Adapters pass lists; the command must stay immutable and hashable."""
    command = Set([Coordinate(0, 0), Coordinate(1, 0)], tile_type=3)
    assert command.coords == (Coordinate(0, 0), Coordinate(1, 0))
    assert hash(command) == hash(Set((Coordinate(0, 0), Coordinate(1, 0)), 3))


def test_set_is_frozen() -> None:
    command = Set([Coordinate(0, 0)], 1)
    with pytest.raises(AttributeError):
        command.tile_type = 2  # type: ignore[misc]


def test_set_rejects_negative_tile_type() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        Set([Coordinate(0, 0)], -1)


@pytest.mark.parametrize("tile_type", [1.5, True, "3", None], ids=["float", "bool", "str", "none"])
def test_set_rejects_non_int_tile_type(tile_type) -> None:
    with pytest.raises(TypeError, match="tile_type must be an int"):
        Set([Coordinate(0, 0)], tile_type)


def test_check_command_accepts_every_variant() -> None:
    for command in (Set([Coordinate(0, 0)], 1), Despawn(Coordinate(0, 0)), Undo()):
        check_command(command)


def test_check_command_rejects_other_values() -> None:
    with pytest.raises(TypeError, match="Expected Command"):
        check_command(("set", 1))


def test_set_allows_empty_coords() -> None:
    assert Set([], 4).coords == ()


def test_undo_entry_equality() -> None:
    entry = UndoEntry(transaction_id=3, inverse=Despawn(Coordinate(1, 1)))
    assert entry == UndoEntry(3, Despawn(Coordinate(1, 1)))


@pytest.mark.parametrize(
    ("command", "expected"),
    [
        (
            Set([Coordinate(1, 2, 1)], 7),
            {
                "type": "set",
                "coords": [{"x": 1, "y": 2, "layer": 1}],
                "tile_type": 7,
            },
        ),
        (Despawn(Coordinate(0, 5)), {"type": "despawn", "coord": {"x": 0, "y": 5, "layer": 0}}),
        (Undo(), {"type": "undo"}),
    ],
    ids=["set", "despawn", "undo"],
)
def test_command_to_dict(command, expected) -> None:
    data = command_to_dict(command)
    assert data == expected
    assert command_from_dict(data) == command


def test_command_from_dict_rejects_unknown_type() -> None:
    with pytest.raises(ValueError, match="Unknown command type"):
        command_from_dict({"type": "paint"})


def test_command_to_dict_rejects_non_command() -> None:
    with pytest.raises(TypeError):
        command_to_dict("set")  # type: ignore[arg-type]
