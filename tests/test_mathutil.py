import math

import pytest

from corekit.mathutil import (
    Point,
    mat3_to_quaternion,
    new_point,
    quaternion_to_mat3,
    round_float64_to_precision,
)


@pytest.mark.parametrize(
    "value, precision, want",
    [
        (3.14159, 0, 3.0),
        (3.14159, 1, 3.1),
        (3.14159, 2, 3.14),
        (3.14159, 3, 3.142),
        (3.14159265359, 5, 3.14159),
        (1.9999, 2, 2.0),
        (1.1111, 2, 1.11),
        (-3.14159, 2, -3.14),
        (0.0, 2, 0.0),
        (5.5, 1, 5.5),
        (123456.789, 2, 123456.79),
        (0.000123456, 6, 0.000123),
        (2.5, 0, 3.0),
        (3.5, 0, 4.0),
        (0.123456789, 8, 0.12345679),
        (12345.6789, -1, 12350.0),
        (-12345.6789, -1, -12350.0),
    ],
)
def test_round_float64_to_precision(value, precision, want):
    assert round_float64_to_precision(value, precision) == pytest.approx(want, abs=1e-7)


def test_round_infinity():
    assert round_float64_to_precision(math.inf, 2) == math.inf


def test_round_negative_infinity():
    assert round_float64_to_precision(-math.inf, 2) == -math.inf


def test_round_nan():
    assert math.isnan(round_float64_to_precision(math.nan, 2))


@pytest.mark.parametrize(
    "lon, lat",
    [
        (0.0, 0.0),
        (10.5, 20.3),
        (-10.5, -20.3),
        (-122.4194, 37.7749),
        (180.0, 0.0),
        (0.0, 90.0),
        (-180.0, 0.0),
        (0.0, -90.0),
        (-74.0060, 40.7128),
        (-0.1278, 51.5074),
        (139.6917, 35.6895),
        (12.3456789, 98.7654321),
    ],
)
def test_new_point(lon, lat):
    got = new_point(lon, lat)
    assert got == Point(lon, lat)
    assert got == (lon, lat)
    assert got.lon == pytest.approx(lon, abs=1e-6)
    assert got.lat == pytest.approx(lat, abs=1e-6)


IDENTITY = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def test_identity_matrix_to_quaternion():
    assert mat3_to_quaternion(IDENTITY) == pytest.approx((0.0, 0.0, 0.0, 1.0))


def test_identity_quaternion_to_matrix():
    got = quaternion_to_mat3((0.0, 0.0, 0.0, 1.0))
    assert got == IDENTITY


def test_half_turn_about_x():
    matrix = ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, -1.0))
    assert mat3_to_quaternion(matrix) == pytest.approx((1.0, 0.0, 0.0, 0.0))


@pytest.mark.parametrize(
    "matrix",
    [
        ((0.0, -1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
        ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, -1.0)),
        ((-1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, -1.0)),
        ((-1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, 1.0)),
    ],
)
def test_matrix_round_trip(matrix):
    q = mat3_to_quaternion(matrix)
    assert sum(c * c for c in q) == pytest.approx(1.0)
    back = quaternion_to_mat3(q)
    for row_got, row_want in zip(back, matrix):
        assert row_got == pytest.approx(row_want, abs=1e-12)