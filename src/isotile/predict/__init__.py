"""Next-edit prediction model."""

from isotile.predict.model import (
    DEFAULT_DEPTH,
    DEFAULT_EMPTY_SET_LAYER,
    PredictionModel,
    sliding_windows,
)
from isotile.predict.models import BaseKey, Context, PredictState, Ranking

__all__ = [
    "PredictionModel",
    "BaseKey",
    "Context",
    "PredictState",
    "Ranking",
    "DEFAULT_DEPTH",
    "DEFAULT_EMPTY_SET_LAYER",
    "sliding_windows",
]
