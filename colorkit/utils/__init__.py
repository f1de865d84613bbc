from .default import (
    value_or_default,
    DEFAULT_SERIES_NAME,
    DEFAULT_INPUT_RANGE,
    DEFAULT_FORMAT,
)
from .dimension import get_dimension

__all__ = [
    "value_or_default",
    "get_dimension",
    "DEFAULT_SERIES_NAME",
    "DEFAULT_INPUT_RANGE",
    "DEFAULT_FORMAT",
]
