from __future__ import annotations
import logging
from typing import Optional, Tuple

import numpy as np

from ..types.color_types import ColorSeries, FractionTriplet, InputRange
from ..utils.default import DEFAULT_INPUT_RANGE
from .rainbow import RAINBOW
from .validation import validate_series

logger = logging.getLogger(__name__)


class SeriesStore:
    """
    One loaded color series, split into parallel position/red/green/blue arrays,
    plus the input range that maps external values onto [0, 1].

    Loading trusts the caller unless ``strict`` is requested: positions are not
    checked for order and colors are not checked for range.
    """

    def __init__(self, input_range: InputRange = DEFAULT_INPUT_RANGE) -> None:
        self.positions: Optional[np.ndarray] = None
        self.reds: Optional[np.ndarray] = None
        self.greens: Optional[np.ndarray] = None
        self.blues: Optional[np.ndarray] = None
        range_min, range_max = input_range
        self._input_range: InputRange = (float(range_min), float(range_max))

    @property
    def input_range(self) -> InputRange:
        return self._input_range

    def set_input_range(self, range_min: float, range_max: float) -> None:
        """
        Replace the input range.

        ``range_min`` maps to the first color and ``range_max`` to the last.
        ``range_min > range_max`` is allowed and reverses the mapping.
        """
        self._input_range = (float(range_min), float(range_max))

    @property
    def is_loaded(self) -> bool:
        return self.positions is not None

    def load(self, points: ColorSeries, strict: bool = False) -> None:
        """
        Load a color series given as (position, (r, g, b)) pairs.

        The four arrays are built completely before any of them replaces the
        current series, so a failure leaves the store untouched.

        Args:
            points: Sequence of control points
            strict: Validate the series invariants first
        """
        points = validate_series(points) if strict else list(points)

        positions = np.array([p[0] for p in points], dtype=np.float64)
        reds = np.array([p[1][0] for p in points], dtype=np.float64)
        greens = np.array([p[1][1] for p in points], dtype=np.float64)
        blues = np.array([p[1][2] for p in points], dtype=np.float64)

        self.positions, self.reds, self.greens, self.blues = positions, reds, greens, blues
        logger.debug("Loaded color series with %d points", len(positions))

    def ensure_loaded(self) -> None:
        if not self.is_loaded:
            logger.debug("No color series loaded, falling back to rainbow")
            self.load(RAINBOW)

    def color_at(self, index: int) -> FractionTriplet:
        """Stored color of one control point, unclamped."""
        return (float(self.reds[index]), float(self.greens[index]), float(self.blues[index]))

    @property
    def colors(self) -> np.ndarray:
        if not self.is_loaded:
            return np.empty((0, 3), dtype=np.float64)
        return np.column_stack((self.reds, self.greens, self.blues))

    def points(self) -> Tuple[Tuple[float, FractionTriplet], ...]:
        if not self.is_loaded:
            return ()
        return tuple((float(x), self.color_at(i)) for i, x in enumerate(self.positions))

    def __len__(self) -> int:
        return 0 if self.positions is None else len(self.positions)

    def __repr__(self) -> str:
        return f"SeriesStore(points={len(self)}, input_range={self._input_range})"
