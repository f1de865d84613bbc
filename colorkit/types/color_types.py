from __future__ import annotations
from typing import Sequence, Tuple, Union

FractionTriplet = Tuple[float, float, float]
ByteTriplet = Tuple[int, int, int]
HexString = str
FormattedColor = Union[FractionTriplet, ByteTriplet, HexString]

ControlPoint = Tuple[float, FractionTriplet]
ColorSeries = Sequence[ControlPoint]
InputRange = Tuple[float, float]

NUM_CHANNELS = 3
