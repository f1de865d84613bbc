"""
colorkit Color Formatting
=========================

Converts the internal triplet-of-fractions color to one of the output
encodings selected by ``ColorFormat``.

Formats
-------
FRACTION:
    (r, g, b) floats in [0.0, 1.0]
BYTE:
    (r, g, b) ints in [0, 255], ``round(255 * fraction)`` with halves rounded up
HEX:
    ``#rrggbb`` string, lowercase, always 7 characters

Examples
--------
>>> from colorkit.conversions import format_color, ColorFormat
>>> format_color((0.6, 0.2, 0.52), ColorFormat.BYTE)
(153, 51, 133)
>>> format_color((0.6, 0.2, 0.52), ColorFormat.HEX)
'#993385'
"""

from .wrapper import (
    clamp_fraction,
    clamp_triplet,
    fraction_to_byte,
    byte_to_hex,
    hex_to_fraction,
    as_color_format,
    format_color,
)

from ..types.format_type import ColorFormat

__all__ = [
    'clamp_fraction',
    'clamp_triplet',
    'fraction_to_byte',
    'byte_to_hex',
    'hex_to_fraction',
    'as_color_format',
    'format_color',
    'ColorFormat',
]
