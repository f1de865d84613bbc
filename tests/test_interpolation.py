import math

import numpy as np
import pytest

from colorkit import (
    ColorFormat,
    DegenerateRangeError,
    DegenerateSeriesError,
    NonFiniteValueError,
    SeriesStore,
    byte_to_hex,
    find_bracket,
    fraction_to_byte,
    interpolate,
    normalize_value,
)

POSITIONS = [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]


@pytest.fixture
def store(small_series):
    store = SeriesStore()
    store.load(small_series)
    return store


def test_normalize_value():
    assert normalize_value(5, 0, 10) == 0.5
    assert normalize_value(-20, -40, 160) == pytest.approx(0.1)
    assert normalize_value(2.5, 10, 0) == 0.75
    assert normalize_value(20, 0, 10) == 2.0


def test_normalize_value_collapsed_range():
    with pytest.raises(DegenerateRangeError):
        normalize_value(1.0, 2.0, 2.0)


def test_normalize_value_nan():
    with pytest.raises(NonFiniteValueError):
        normalize_value(float("nan"), 0.0, 1.0)


@pytest.mark.parametrize(
    "x, expected",
    [
        (0.5, (2, 3)),
        (0.4, (2, 2)),
        (0.01, (0, 1)),
        (0.99, (4, 5)),
        (0.6, (3, 3)),
    ],
)
def test_find_bracket(x, expected):
    assert find_bracket(POSITIONS, x) == expected


def test_find_bracket_non_uniform():
    assert find_bracket([0.0, 0.05, 0.1, 1.0], 0.5) == (2, 3)
    assert find_bracket([0.0, 0.9, 0.95, 1.0], 0.1) == (0, 1)
    assert find_bracket(np.array([0.0, 0.9, 0.95, 1.0]), 0.925) == (1, 2)


def test_two_point_series():
    store = SeriesStore()
    store.load([(0.0, (0.0, 0.0, 0.0)), (1.0, (1.0, 0.5, 0.0))])
    assert interpolate(store, 0.25, ColorFormat.FRACTION) == pytest.approx((0.25, 0.125, 0.0))
    assert find_bracket(store.positions, 0.7) == (0, 1)


def test_non_uniform_spacing():
    store = SeriesStore()
    store.load([
        (0.0, (0.0, 0.0, 0.0)),
        (0.9, (0.9, 0.9, 0.9)),
        (1.0, (1.0, 1.0, 1.0)),
    ])
    assert interpolate(store, 0.45, ColorFormat.FRACTION) == pytest.approx((0.45, 0.45, 0.45))
    assert interpolate(store, 0.95, ColorFormat.FRACTION) == pytest.approx((0.95, 0.95, 0.95))


def test_exact_hit_returns_control_point(store, small_series):
    for position, color in small_series:
        assert interpolate(store, position, ColorFormat.FRACTION) == color


def test_exact_hit_after_range_remap(store):
    store.set_input_range(0.0, 10.0)
    assert interpolate(store, 4.0, ColorFormat.FRACTION) == (0.4, 0.2, 0.53)


@pytest.mark.parametrize("value", [-100.0, -0.1, 0.0, -math.inf])
def test_clamp_low(store, value):
    assert interpolate(store, value, ColorFormat.FRACTION) == (0.0, 0.6, 0.55)


@pytest.mark.parametrize("value", [1.0, 1.1, 100.0, math.inf])
def test_clamp_high(store, value):
    assert interpolate(store, value, ColorFormat.FRACTION) == (1.0, 0.6, 0.5)


def test_byte_and_hex_follow_fraction(store):
    for value in np.linspace(-0.2, 1.2, 57):
        fraction = interpolate(store, value, ColorFormat.FRACTION)
        rgb = interpolate(store, value, ColorFormat.BYTE)
        hex_value = interpolate(store, value, ColorFormat.HEX)
        assert rgb == fraction_to_byte(fraction)
        assert hex_value == byte_to_hex(rgb)
        assert len(hex_value) == 7
        assert hex_value == hex_value.lower()


def test_fraction_always_in_unit_range():
    store = SeriesStore()
    store.load([
        (0.0, (-0.5, 2.0, 0.5)),
        (1.0, (1.5, -1.0, 0.5)),
    ])
    for value in np.linspace(-1.0, 2.0, 31):
        color = interpolate(store, value, ColorFormat.FRACTION)
        assert all(0.0 <= c <= 1.0 for c in color)
    assert interpolate(store, 0.1, ColorFormat.FRACTION) == pytest.approx((0.0, 1.0, 0.5))


def test_continuity(store):
    for value in (0.1, 0.33, 0.5, 0.77):
        a = interpolate(store, value, ColorFormat.FRACTION)
        b = interpolate(store, value + 1e-9, ColorFormat.FRACTION)
        assert max(abs(x - y) for x, y in zip(a, b)) < 1e-6


def test_zero_width_bracket_raises():
    store = SeriesStore()
    store.load([
        (0.0, (0.0, 0.0, 0.0)),
        (0.2, (0.2, 0.2, 0.2)),
        (0.2, (0.4, 0.4, 0.4)),
    ])
    with pytest.raises(DegenerateSeriesError):
        interpolate(store, 0.5)


def test_nan_value_raises(store):
    with pytest.raises(NonFiniteValueError):
        interpolate(store, float("nan"))


def test_interpolate_loads_fallback():
    store = SeriesStore()
    interpolate(store, 0.5)
    assert store.is_loaded
    assert len(store) == 256


@pytest.mark.parametrize(
    "value, range_min, range_max",
    [
        (math.inf, 0.0, math.inf),
        (0.0, -math.inf, math.inf),
        (-math.inf, -math.inf, 0.0),
    ],
)
def test_normalize_value_undefined_position(value, range_min, range_max):
    with pytest.raises(NonFiniteValueError):
        normalize_value(value, range_min, range_max)


def test_infinite_range_leaves_store_empty():
    store = SeriesStore()
    store.set_input_range(0.0, math.inf)
    with pytest.raises(NonFiniteValueError):
        interpolate(store, math.inf, ColorFormat.FRACTION)
    assert not store.is_loaded


def test_finite_value_in_half_open_range(store):
    store.set_input_range(0.0, math.inf)
    assert interpolate(store, 5.0, ColorFormat.FRACTION) == (0.0, 0.6, 0.55)
