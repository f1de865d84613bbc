from typing import Optional, TypeVar

from ..types.color_types import InputRange
from ..types.format_type import ColorFormat

T = TypeVar('T')

DEFAULT_SERIES_NAME = "rainbow"
DEFAULT_INPUT_RANGE: InputRange = (0.0, 1.0)
DEFAULT_FORMAT = ColorFormat.BYTE


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
