"""Exceptions raised by colorkit."""


class ColorKitError(Exception):
    """Base class for every colorkit error."""


class SeriesNotFoundError(ColorKitError, KeyError):
    """Requested color series name is not registered."""

    def __init__(self, name: str, available=()) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unrecognized color series name {self.name!r} (available={self.available})"


class InvalidFormatError(ColorKitError, ValueError):
    """Output format selector is not a ColorFormat."""


class SeriesValidationError(ColorKitError, ValueError):
    """Series data breaks a color series invariant (strict mode only)."""


class NonFiniteValueError(ColorKitError, ValueError):
    """Input scalar is NaN."""


class DegenerateRangeError(ColorKitError, ZeroDivisionError):
    """Input range collapsed to a single point."""


class DegenerateSeriesError(DegenerateRangeError):
    """Two bracketing control points share the same position."""
