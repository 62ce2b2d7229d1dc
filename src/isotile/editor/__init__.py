"""Editing session coordination."""

from isotile.editor.editor import Editor
from isotile.editor.seed import seed_grid

__all__ = [
    "Editor",
    "seed_grid",
]
