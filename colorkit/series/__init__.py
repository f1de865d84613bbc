"""
colorkit Color Series
=====================

Control-point data and its containers.

- ``registry``: named, read-only series table (built-in ``rainbow``)
- ``store``: one loaded series as parallel arrays plus the input range
- ``validation``: opt-in invariant checks used by strict loading

A color series is a sequence of ``(position, (r, g, b))`` pairs with
positions running from 0.0 to 1.0 and channels in [0.0, 1.0].
"""

from .rainbow import RAINBOW
from .registry import (
    BUILTIN_SERIES,
    DEFAULT_REGISTRY,
    ColorSeriesRegistry,
    list_series_names,
    get_series,
)
from .store import SeriesStore
from .validation import validate_series

__all__ = [
    "RAINBOW",
    "BUILTIN_SERIES",
    "DEFAULT_REGISTRY",
    "ColorSeriesRegistry",
    "list_series_names",
    "get_series",
    "SeriesStore",
    "validate_series",
]
