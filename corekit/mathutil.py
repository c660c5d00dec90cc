"""Numeric helpers: rounding, rotation conversions and geographic points."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

Matrix3 = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]
Quaternion = tuple[float, float, float, float]


class Point(NamedTuple):
    """A geographic point as (longitude, latitude)."""

    lon: float
    lat: float


def new_point(lon: float, lat: float) -> Point:
    """Build a point from longitude and latitude."""
    return Point(lon, lat)


def round_float64_to_precision(value: float, precision: int) -> float:
    """Round to ``precision`` decimal places, halves away from zero."""
    multiplier = math.pow(10, precision)
    scaled = value * multiplier
    if not math.isfinite(scaled):
        return scaled / multiplier
    rounded = math.copysign(float(math.floor(abs(scaled) + 0.5)), scaled)
    return rounded / multiplier


def mat3_to_quaternion(m: Sequence[Sequence[float]]) -> Quaternion:
    """Convert a 3x3 rotation matrix to a quaternion (x, y, z, w)."""
    trace = m[0][0] + m[1][1] + m[2][2]

    if trace > 0:
        s = math.sqrt(trace + 1.0) * 2
        return (
            (m[2][1] - m[1][2]) / s,
            (m[0][2] - m[2][0]) / s,
            (m[1][0] - m[0][1]) / s,
            0.25 * s,
        )
    if m[0][0] > m[1][1] and m[0][0] > m[2][2]:
        s = math.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2]) * 2
        return (
            0.25 * s,
            (m[0][1] + m[1][0]) / s,
            (m[0][2] + m[2][0]) / s,
            (m[2][1] - m[1][2]) / s,
        )
    if m[1][1] > m[2][2]:
        s = math.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2]) * 2
        return (
            (m[0][1] + m[1][0]) / s,
            0.25 * s,
            (m[1][2] + m[2][1]) / s,
            (m[0][2] - m[2][0]) / s,
        )
    s = math.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1]) * 2
    return (
        (m[0][2] + m[2][0]) / s,
        (m[1][2] + m[2][1]) / s,
        0.25 * s,
        (m[1][0] - m[0][1]) / s,
    )


def quaternion_to_mat3(q: Sequence[float]) -> Matrix3:
    """Convert a quaternion (x, y, z, w) to a 3x3 rotation matrix."""
    x, y, z, w = q
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z

    return (
        (1 - 2 * (yy + zz), 2 * (xy - wz), 2 * (xz + wy)),
        (2 * (xy + wz), 1 - 2 * (xx + zz), 2 * (yz - wx)),
        (2 * (xz - wy), 2 * (yz + wx), 1 - 2 * (xx + yy)),
    )