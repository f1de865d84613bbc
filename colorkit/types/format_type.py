from enum import Enum


class ColorFormat(str, Enum):
    FRACTION = "fraction"
    BYTE = "byte"
    HEX = "hex"

    # Token names used by existing consumers
    DOUBLE = "fraction"
    RGB = "byte"


BYTE_MAX = 255

HEX_PREFIX = "#"
HEX_LENGTH = 7
