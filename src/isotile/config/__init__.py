"""Configuration module using Pydantic Settings.

Usage:
    from isotile.config import EditorSettings

    settings = EditorSettings(prediction_depth=3)
"""

from isotile.config.settings import EditorSettings

__all__ = [
    "EditorSettings",
]
