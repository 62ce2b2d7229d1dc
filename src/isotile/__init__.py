"""isotile: editing engine for isometric tile maps.

Usage:
    from isotile import Coordinate, Editor, Set, Undo

    editor = Editor()

    # One Set painting three cells is one undo transaction
    line = [Coordinate(x, 0, layer=0) for x in range(3)]
    editor.submit(Set(line, tile_type=5))
    editor.tick()

    editor.submit(Undo())
    editor.tick()  # all three cells are gone again

    # The model learns from the edit stream
    editor.predictions()
"""

__version__ = "0.1.0"

# Core primitives
from isotile.core import (
    Command,
    Coordinate,
    Copy,
    Despawn,
    Set,
    TileId,
    TileType,
    Undo,
    UndoEntry,
)

# Configuration
from isotile.config import EditorSettings

# Editor
from isotile.editor import Editor, seed_grid

# Engine
from isotile.engine import CommandEngine, CommandState, UndoHistory

# Prediction
from isotile.predict import BaseKey, PredictionModel, PredictState

# Storage
from isotile.storage import GridStore, LocalGridStore, OccupiedCellError

# Tracing (optional)
from isotile.tracing import HistoryStore, InMemoryHistoryStore, TickRecord

__all__ = [
    # Version
    "__version__",
    # Core
    "Command",
    "Coordinate",
    "Copy",
    "Despawn",
    "Set",
    "TileId",
    "TileType",
    "Undo",
    "UndoEntry",
    # Config
    "EditorSettings",
    # Editor
    "Editor",
    "seed_grid",
    # Engine
    "CommandEngine",
    "CommandState",
    "UndoHistory",
    # Prediction
    "BaseKey",
    "PredictionModel",
    "PredictState",
    # Storage
    "GridStore",
    "LocalGridStore",
    "OccupiedCellError",
    # Tracing
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
]
