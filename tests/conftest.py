"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from isotile import Coordinate, Editor, LocalGridStore


@pytest.fixture
def editor():
    """Fresh Editor instance."""
    return Editor()


@pytest.fixture
def store():
    """Empty LocalGridStore."""
    return LocalGridStore()


@pytest.fixture
def cell():
    """Shorthand for building coordinates: cell(x, y, layer=0)."""

    def _cell(x: float, y: float, layer: float = 0.0) -> Coordinate:
        return Coordinate(float(x), float(y), float(layer))

    return _cell
