"""Opt-in checks for color series data.

Loading never calls these on its own; malformed series produce undefined
colors unless a caller asks for strict loading.
"""
import math
from typing import Any, List, Tuple

from ..errors import SeriesValidationError
from ..types.color_types import ColorSeries, NUM_CHANNELS
from ..utils.dimension import get_dimension


def split_point(point: Any, index: int) -> Tuple[float, Tuple[float, float, float]]:
    if get_dimension(point) != 2:
        raise SeriesValidationError(f"Point {index} must be (position, (r, g, b)), got {point!r}")
    position, color = point
    if get_dimension(color) != NUM_CHANNELS:
        raise SeriesValidationError(f"Point {index} color must have {NUM_CHANNELS} channels, got {color!r}")
    try:
        r, g, b = (float(c) for c in color)
        return float(position), (r, g, b)
    except (TypeError, ValueError):
        raise SeriesValidationError(f"Point {index} holds non-numeric values: {point!r}") from None


def validate_series(points: ColorSeries) -> List[Tuple[float, Tuple[float, float, float]]]:
    """
    Check every color series invariant.

    Args:
        points: Sequence of (position, (r, g, b)) control points

    Returns:
        The points as float tuples

    Raises:
        SeriesValidationError: on the first broken invariant
    """
    checked = [split_point(p, i) for i, p in enumerate(points)]

    if len(checked) < 2:
        raise SeriesValidationError(f"A color series needs at least 2 points, got {len(checked)}")

    for i, (position, color) in enumerate(checked):
        if not all(math.isfinite(v) for v in (position, *color)):
            raise SeriesValidationError(f"Point {i} holds non-finite values")
        if any(not 0.0 <= c <= 1.0 for c in color):
            raise SeriesValidationError(f"Point {i} color {color} is outside [0, 1]")

    if checked[0][0] != 0.0:
        raise SeriesValidationError(f"First position must be 0.0, got {checked[0][0]}")
    if checked[-1][0] != 1.0:
        raise SeriesValidationError(f"Last position must be 1.0, got {checked[-1][0]}")

    for i in range(1, len(checked)):
        if checked[i][0] <= checked[i - 1][0]:
            raise SeriesValidationError(
                f"Positions must increase strictly: point {i} ({checked[i][0]}) "
                f"follows {checked[i - 1][0]}"
            )
    return checked
