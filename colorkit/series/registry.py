from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..errors import SeriesNotFoundError
from ..types.color_types import ColorSeries, ControlPoint
from .rainbow import RAINBOW

# Read-only for the life of the process
BUILTIN_SERIES: Mapping[str, Tuple[ControlPoint, ...]] = MappingProxyType({
    "rainbow": RAINBOW,
})


class ColorSeriesRegistry:
    """
    Name -> color series lookup.

    Built-in series are always present. Extra series are layered on top at
    construction time; an instance never changes afterwards, ``with_series``
    returns a new registry instead.
    """

    __slots__ = ("_series",)

    def __init__(self, extra: Optional[Mapping[str, ColorSeries]] = None) -> None:
        series: Dict[str, Tuple[ControlPoint, ...]] = dict(BUILTIN_SERIES)
        for name, points in (extra or {}).items():
            if name in series:
                raise ValueError(f"Color series already registered: {name}")
            series[name] = tuple(points)
        self._series = MappingProxyType(series)

    def names(self) -> List[str]:
        return list(self._series.keys())

    def get(self, name: str) -> Tuple[ControlPoint, ...]:
        if name not in self._series:
            raise SeriesNotFoundError(name, self._series.keys())
        return self._series[name]

    def with_series(self, name: str, points: ColorSeries) -> ColorSeriesRegistry:
        extra = {k: v for k, v in self._series.items() if k not in BUILTIN_SERIES}
        if name in self._series:
            raise ValueError(f"Color series already registered: {name}")
        extra[name] = points
        return ColorSeriesRegistry(extra)

    def __contains__(self, name: object) -> bool:
        return name in self._series

    def __iter__(self) -> Iterator[str]:
        return iter(self._series)

    def __len__(self) -> int:
        return len(self._series)

    def __repr__(self) -> str:
        return f"ColorSeriesRegistry(names={self.names()})"


DEFAULT_REGISTRY = ColorSeriesRegistry()


def list_series_names() -> List[str]:
    """Names of the built-in color series, in registration order."""
    return DEFAULT_REGISTRY.names()


def get_series(name: str) -> Tuple[ControlPoint, ...]:
    return DEFAULT_REGISTRY.get(name)
