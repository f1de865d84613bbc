import pytest

from colorkit import ColorMap

SMALL_SERIES = [
    (0.0, (0.0, 0.6, 0.55)),
    (0.2, (0.2, 0.4, 0.54)),
    (0.4, (0.4, 0.2, 0.53)),
    (0.6, (0.6, 0.2, 0.52)),
    (0.8, (0.8, 0.4, 0.51)),
    (1.0, (1.0, 0.6, 0.50)),
]


@pytest.fixture
def small_series():
    return list(SMALL_SERIES)


@pytest.fixture
def small_colormap(small_series):
    colormap = ColorMap()
    colormap.input_color_series(small_series)
    return colormap
