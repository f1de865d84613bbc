import math
from typing import Sequence, Dict, Callable

from boundednumbers.functions import clamp

from ..errors import InvalidFormatError
from ..types.format_type import ColorFormat, BYTE_MAX, HEX_PREFIX, HEX_LENGTH
from ..types.color_types import FractionTriplet, ByteTriplet, HexString, FormattedColor


def clamp_fraction(value: float) -> float:
    """Constrain a channel fraction to [0, 1]."""
    return float(clamp(float(value), 0.0, 1.0))


def clamp_triplet(triplet: Sequence[float]) -> FractionTriplet:
    r, g, b = triplet
    return (clamp_fraction(r), clamp_fraction(g), clamp_fraction(b))


def fraction_to_byte(triplet: Sequence[float]) -> ByteTriplet:
    """
    Scale fractions to 0-255 integers.

    Halves round away from zero (fractions are non-negative here, so this is
    ``floor(255 * v + 0.5)``), unlike Python's ``round`` which rounds half to even.
    """
    r, g, b = (int(math.floor(BYTE_MAX * float(v) + 0.5)) for v in triplet)
    return (r, g, b)


def byte_to_hex(triplet: Sequence[int]) -> HexString:
    """Render a byte triplet as ``#rrggbb`` with lowercase digits."""
    return HEX_PREFIX + "".join(f"{int(v):02x}" for v in triplet)


def hex_to_fraction(text: str) -> FractionTriplet:
    """
    Parse ``#rrggbb`` (or ``rrggbb``) into a fraction triplet.

    Args:
        text: Hex color string

    Returns:
        (r, g, b) fractions in [0, 1]
    """
    digits = text[1:] if text.startswith(HEX_PREFIX) else text
    if len(digits) != HEX_LENGTH - 1:
        raise ValueError(f"Expected 6 hex digits, got {text!r}")
    try:
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex color {text!r}") from None
    return (r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX)


FORMATTERS: Dict[ColorFormat, Callable[[FractionTriplet], FormattedColor]] = {
    ColorFormat.FRACTION: lambda t: t,
    ColorFormat.BYTE: fraction_to_byte,
    ColorFormat.HEX: lambda t: byte_to_hex(fraction_to_byte(t)),
}


def as_color_format(fmt) -> ColorFormat:
    """Coerce a ColorFormat or its string value; anything else is an InvalidFormatError."""
    if isinstance(fmt, ColorFormat):
        return fmt
    if isinstance(fmt, str):
        try:
            return ColorFormat(fmt.lower())
        except ValueError:
            pass
    raise InvalidFormatError(f"Unrecognized ColorFormat {fmt!r}")


def format_color(triplet: Sequence[float], fmt=ColorFormat.BYTE) -> FormattedColor:
    """
    Convert a fraction triplet to the requested output format.

    Channels are clamped to [0, 1] before conversion so BYTE stays in 0-255
    and HEX is always seven characters.

    Args:
        triplet: (r, g, b) fractions
        fmt: ColorFormat (or its string value)

    Returns:
        Fraction triplet, byte triplet or hex string
    """
    color_format = as_color_format(fmt)
    return FORMATTERS[color_format](clamp_triplet(triplet))
