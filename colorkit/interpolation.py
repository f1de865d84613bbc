"""Scalar -> color lookup over a loaded color series."""

import math
from typing import Sequence, Tuple

from .conversions import clamp_triplet, format_color, as_color_format
from .errors import DegenerateRangeError, DegenerateSeriesError, NonFiniteValueError
from .series.store import SeriesStore
from .types.color_types import FractionTriplet, FormattedColor
from .types.format_type import ColorFormat


def normalize_value(value: float, range_min: float, range_max: float) -> float:
    """Map ``value`` from the input range onto [0, 1] (unclamped)."""
    if math.isnan(value):
        raise NonFiniteValueError("Cannot interpolate a color for NaN")
    if range_min == range_max:
        raise DegenerateRangeError(
            f"Input range [{range_min}, {range_max}] has zero width"
        )
    x = (value - range_min) / (range_max - range_min)
    if math.isnan(x):
        raise NonFiniteValueError(
            f"Value {value} has no position in input range [{range_min}, {range_max}]"
        )
    return x


def find_bracket(positions: Sequence[float], x: float) -> Tuple[int, int]:
    """
    Find adjacent control points around ``x``, which must lie in (0, 1).

    Starts from a linear estimate of the index and walks to the bracket, so
    evenly spaced series need no steps at all. An exact hit on a control point
    returns the same index twice.

    Args:
        positions: Control point positions, increasing
        x: Normalized query position

    Returns:
        (i_lo, i_hi) with positions[i_lo] <= x <= positions[i_hi]
    """
    i_max = len(positions) - 1
    i_lo = min(math.ceil(x * i_max), i_max)
    while positions[i_lo] > x and i_lo > 0:
        i_lo -= 1

    i_hi = i_lo
    while positions[i_hi] < x and i_hi < i_max:
        i_hi += 1
    return i_lo, i_hi


def blend(lo: FractionTriplet, hi: FractionTriplet, t: float) -> FractionTriplet:
    """Per-channel linear blend, clamped to [0, 1]."""
    return clamp_triplet(tuple(a + t * (b - a) for a, b in zip(lo, hi)))


def interpolate(store: SeriesStore, value: float, fmt=ColorFormat.BYTE) -> FormattedColor:
    """
    Color for ``value`` under the store's series and input range.

    Values at or beyond either end of the input range take the end color.
    Values landing exactly on a control point return that point's color
    without blending.
    """
    color_format = as_color_format(fmt)
    x = normalize_value(value, *store.input_range)
    store.ensure_loaded()

    if x <= 0.0:
        return format_color(store.color_at(0), color_format)

    i_max = len(store) - 1
    if x >= 1.0:
        return format_color(store.color_at(i_max), color_format)

    positions = store.positions
    i_lo, i_hi = find_bracket(positions, x)
    if i_lo == i_hi:
        return format_color(store.color_at(i_lo), color_format)

    width = abs(float(positions[i_hi]) - float(positions[i_lo]))
    if width == 0.0:
        raise DegenerateSeriesError(
            f"Control points {i_lo} and {i_hi} share position {float(positions[i_lo])}"
        )
    t = (x - float(positions[i_lo])) / width

    color = blend(store.color_at(i_lo), store.color_at(i_hi), t)
    return format_color(color, color_format)
