import math

import pytest

from colorkit.errors import SeriesValidationError
from colorkit.series import validate_series

BLACK = (0.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)


def test_valid_series(small_series):
    checked = validate_series(small_series)
    assert len(checked) == 6
    assert checked[3] == (0.6, (0.6, 0.2, 0.52))


def test_valid_series_converts_to_float():
    checked = validate_series([(0, (0, 0, 0)), (1, (1, 1, 1))])
    assert checked == [(0.0, BLACK), (1.0, WHITE)]
    assert all(type(v) is float for v in checked[1][1])


@pytest.mark.parametrize(
    "points, message",
    [
        ([], "at least 2 points"),
        ([(0.0, BLACK)], "at least 2 points"),
        ([(0.1, BLACK), (1.0, WHITE)], "First position"),
        ([(0.0, BLACK), (0.9, WHITE)], "Last position"),
        ([(0.0, BLACK), (0.5, BLACK), (0.5, WHITE), (1.0, WHITE)], "increase strictly"),
        ([(0.0, BLACK), (0.6, BLACK), (0.4, WHITE), (1.0, WHITE)], "increase strictly"),
        ([(0.0, (0.0, 1.2, 0.0)), (1.0, WHITE)], "outside [0, 1]"),
        ([(0.0, (0.0, -0.1, 0.0)), (1.0, WHITE)], "outside [0, 1]"),
        ([(0.0, (0.0, math.nan, 0.0)), (1.0, WHITE)], "non-finite"),
        ([(0.0, BLACK), (math.inf, WHITE)], "non-finite"),
    ],
)
def test_invalid_series(points, message):
    with pytest.raises(SeriesValidationError) as excinfo:
        validate_series(points)
    assert message in str(excinfo.value)


@pytest.mark.parametrize(
    "point",
    [
        (0.0,),
        (0.0, (0.0, 0.0)),
        (0.0, (0.0, 0.0, 0.0, 1.0)),
        ("a", (0.0, 0.0, 0.0)),
        (0.0, (0.0, "x", 0.0)),
        0.0,
    ],
)
def test_malformed_point(point):
    with pytest.raises(SeriesValidationError):
        validate_series([point, (1.0, WHITE)])


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_series([(0.0, BLACK)])
