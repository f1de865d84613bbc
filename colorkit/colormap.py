from __future__ import annotations
import logging
from typing import List, Optional

from .conversions import as_color_format, format_color
from .interpolation import interpolate
from .series.rainbow import RAINBOW
from .series.registry import ColorSeriesRegistry, DEFAULT_REGISTRY
from .series.store import SeriesStore
from .types.color_types import ColorSeries, FormattedColor, InputRange
from .utils.default import (
    DEFAULT_FORMAT,
    DEFAULT_INPUT_RANGE,
    DEFAULT_SERIES_NAME,
    value_or_default,
)

logger = logging.getLogger(__name__)


class ColorMap:
    """
    Maps scalar values to colors along a color series.

    The first value of the input range maps to the first color of the series
    and the second value to the last color. A ColorMap holds mutable session
    state (the loaded series and the input range); share one instance across
    threads only behind a lock.

    Args:
        series_name: Registered series to load right away.
        registry: Where series names are looked up. Defaults to the built-in registry.
        strict: Validate series data on load instead of trusting it.
        input_range: Initial (min, max) input range. Defaults to (0.0, 1.0).
    """

    def __init__(
        self,
        series_name: Optional[str] = None,
        *,
        registry: Optional[ColorSeriesRegistry] = None,
        strict: bool = False,
        input_range: Optional[InputRange] = None,
    ) -> None:
        self.registry = value_or_default(registry, DEFAULT_REGISTRY)
        self.strict = strict
        self._store = SeriesStore(value_or_default(input_range, DEFAULT_INPUT_RANGE))
        self._series_name: Optional[str] = None

        if series_name:
            self.use_color_series(series_name)

    @staticmethod
    def list_color_series() -> List[str]:
        """Names of the available built-in color series."""
        return DEFAULT_REGISTRY.names()

    @property
    def series_name(self) -> Optional[str]:
        """Name of the loaded series; None for raw or not-yet-loaded series."""
        return self._series_name

    @property
    def input_range(self) -> InputRange:
        return self._store.input_range

    @property
    def store(self) -> SeriesStore:
        return self._store

    def set_input_range(self, range_min: float, range_max: float) -> None:
        self._store.set_input_range(range_min, range_max)

    def use_color_series(self, name: str) -> None:
        """
        Load a registered color series by name.

        Raises:
            SeriesNotFoundError: if ``name`` is not registered
        """
        values = self.registry.get(name)
        self._store.load(values, strict=self.strict)
        self._series_name = name
        logger.info("Using color series %s", name)

    def input_color_series(self, values: ColorSeries) -> None:
        """
        Load a color series from (x, (r, g, b)) values.

        A well-formed series starts at x = 0.0, ends at x = 1.0, has strictly
        increasing x and channels within [0.0, 1.0]. This is only checked when
        the ColorMap was created with ``strict=True``.
        """
        self._store.load(values, strict=self.strict)
        self._series_name = None

    def interpolate_color(self, value: float, fmt=DEFAULT_FORMAT) -> FormattedColor:
        """
        Calculate the color for an input scalar.

        Falls back to the rainbow series when nothing was loaded.

        Args:
            value: The input value to color
            fmt: Output ColorFormat (FRACTION, BYTE or HEX)

        Returns:
            The color in the requested format
        """
        was_loaded = self._store.is_loaded
        color = interpolate(self._store, value, fmt)
        if not was_loaded:
            self._series_name = DEFAULT_SERIES_NAME
        return color

    def lookup_color(self, index: int, fmt=DEFAULT_FORMAT) -> FormattedColor:
        """Color of one control point of the loaded series."""
        color_format = as_color_format(fmt)
        count = len(self._store) if self._store.is_loaded else len(RAINBOW)
        if not -count <= index < count:
            raise IndexError(f"Control point index {index} out of range for {count} points")
        if not self._store.is_loaded:
            self._store.ensure_loaded()
            self._series_name = DEFAULT_SERIES_NAME
        return format_color(self._store.color_at(index), color_format)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return (
            f"ColorMap(series={self._series_name!r}, points={len(self._store)}, "
            f"input_range={self._store.input_range})"
        )
