from .format_type import ColorFormat
from .color_types import (
    FractionTriplet,
    ByteTriplet,
    HexString,
    FormattedColor,
    ControlPoint,
    ColorSeries,
    InputRange,
)

__all__ = [
    "ColorFormat",
    "FractionTriplet",
    "ByteTriplet",
    "HexString",
    "FormattedColor",
    "ControlPoint",
    "ColorSeries",
    "InputRange",
]
