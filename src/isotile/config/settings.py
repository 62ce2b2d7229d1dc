"""Configuration settings using Pydantic Settings.

Provides typed editor configuration with environment variable support.

Usage:
    from isotile.config import EditorSettings

    # Load from environment variables (ISOTILE_*)
    settings = EditorSettings()

    # Or override with explicit values
    settings = EditorSettings(prediction_depth=3)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EditorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for an editing session.

    Attributes:
        prediction_depth: Number of past edits the prediction model conditions on.
        empty_set_layer: Layer the model assumes for a Set with no coordinates.
        allow_duplicate_occupants: Let the grid store hold several occupants on
            one cell (warns) instead of raising OccupiedCellError.
        trace_max_ticks: Keep this many TickRecords in memory (None disables tracing).

    Environment Variables:
        ISOTILE_PREDICTION_DEPTH
        ISOTILE_EMPTY_SET_LAYER
        ISOTILE_ALLOW_DUPLICATE_OCCUPANTS
        ISOTILE_TRACE_MAX_TICKS
    """

    model_config = SettingsConfigDict(
        env_prefix="ISOTILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prediction_depth: int = Field(default=2, ge=1)
    empty_set_layer: int = 1
    allow_duplicate_occupants: bool = False
    trace_max_ticks: int | None = Field(default=None, ge=1)
