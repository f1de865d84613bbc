"""Basic colorkit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

from colorkit import ColorMap, ColorFormat, ColorSeriesRegistry


def demonstrate_rainbow() -> None:
    # Map a temperature-like range onto the built-in rainbow series.
    colormap = ColorMap("rainbow")
    colormap.set_input_range(-40, 160)
    for value in (-40, 0, 60, 120, 160):
        print(f"{value:>5} ->", colormap.interpolate_color(value, ColorFormat.HEX))


def demonstrate_custom_series() -> None:
    teal_to_red = [
        (0.0, (0.0, 0.6, 0.55)),
        (0.5, (0.5, 0.2, 0.52)),
        (1.0, (1.0, 0.6, 0.50)),
    ]
    # Raw series load, no registry involved.
    colormap = ColorMap()
    colormap.input_color_series(teal_to_red)
    print("0.25 as bytes:", colormap.interpolate_color(0.25))
    print("0.25 as fractions:", colormap.interpolate_color(0.25, ColorFormat.FRACTION))

    # Same series made available by name.
    registry = ColorSeriesRegistry({"teal_to_red": teal_to_red})
    named = ColorMap("teal_to_red", registry=registry, strict=True)
    print("Registered series:", registry.names(), "->", named.interpolate_color(0.75, ColorFormat.HEX))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demonstrate_rainbow()
    demonstrate_custom_series()
