"""
colorkit - Scalar to Color Mapping
==================================

Maps scalar values to colors by piecewise-linear interpolation over a named,
ordered color series.

Quick Start
-----------
>>> from colorkit import ColorMap, ColorFormat
>>>
>>> colormap = ColorMap("rainbow")
>>> colormap.set_input_range(-40, 160)
>>> colormap.interpolate_color(160, ColorFormat.HEX)
'#ff0000'
>>>
>>> ColorMap.list_color_series()
['rainbow']

Modules
-------
- colormap: ColorMap, the session object most callers use
- interpolation: bracket search and channel blending
- series: built-in series table, registry, series store, validation
- conversions: FRACTION / BYTE / HEX formatting
- errors: exception hierarchy
"""

from .colormap import ColorMap
from .conversions import (
    format_color,
    fraction_to_byte,
    byte_to_hex,
    hex_to_fraction,
)
from .errors import (
    ColorKitError,
    SeriesNotFoundError,
    InvalidFormatError,
    SeriesValidationError,
    NonFiniteValueError,
    DegenerateRangeError,
    DegenerateSeriesError,
)
from .interpolation import interpolate, find_bracket, normalize_value
from .series import (
    RAINBOW,
    ColorSeriesRegistry,
    SeriesStore,
    list_series_names,
    get_series,
    validate_series,
)
from .types.format_type import ColorFormat

__version__ = "1.0.0"

__all__ = [
    "ColorMap",
    "ColorFormat",
    # formatting
    "format_color",
    "fraction_to_byte",
    "byte_to_hex",
    "hex_to_fraction",
    # interpolation
    "interpolate",
    "find_bracket",
    "normalize_value",
    # series
    "RAINBOW",
    "ColorSeriesRegistry",
    "SeriesStore",
    "list_series_names",
    "get_series",
    "validate_series",
    # errors
    "ColorKitError",
    "SeriesNotFoundError",
    "InvalidFormatError",
    "SeriesValidationError",
    "NonFiniteValueError",
    "DegenerateRangeError",
    "DegenerateSeriesError",
    "__version__",
]
