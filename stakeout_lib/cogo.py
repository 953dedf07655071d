# -*- coding: utf-8 -*-
"""Coordinate geometry (COGO) helpers.

Azimuths and bearings are survey angles: degrees clockwise from grid
north, in ``[0, 360)``.  Points are ``Point(easting, northing)``.
"""

from __future__ import annotations

import math

from stakeout_lib.geometry.models import Point

#: Vectors shorter than this have no direction
_DIRECTION_EPSILON = 1e-9


def bearing_deg(delta_e: float, delta_n: float) -> float:
    """Grid bearing of the vector ``(delta_e, delta_n)``."""
    az = math.degrees(math.atan2(delta_e, delta_n))
    return (az + 360.0) % 360.0


def azimuth_deg(a: Point, b: Point) -> float:
    """Grid azimuth from *a* to *b*."""
    return bearing_deg(b.x - a.x, b.y - a.y)


def horizontal_distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def slope_distance(horizontal: float, height_diff: float) -> float:
    return math.hypot(horizontal, height_diff)


def slope_ratio(horizontal: float, height_diff: float) -> str:
    """Slope as ``1:n`` (run over rise), or ``-`` when flat or vertical."""
    if abs(height_diff) < _DIRECTION_EPSILON or horizontal < _DIRECTION_EPSILON:
        return "-"
    return f"1:{horizontal / abs(height_diff):.1f}"


def forward_point(origin: Point, distance: float, azimuth: float) -> Point:
    """Point reached from *origin* after *distance* metres along *azimuth*."""
    rad = math.radians(azimuth)
    return Point(
        origin.x + distance * math.sin(rad), origin.y + distance * math.cos(rad)
    )


def angle_at(a: Point, vertex: Point, c: Point) -> float | None:
    """Interior angle ``a-vertex-c`` in ``[0, 180]`` degrees.

    Returns ``None`` when either arm has zero length.
    """
    v1 = a - vertex
    v2 = c - vertex
    len1 = v1.length
    len2 = v2.length
    if len1 < _DIRECTION_EPSILON or len2 < _DIRECTION_EPSILON:
        return None
    cos_ang = min(1.0, max(-1.0, v1.dot(v2) / (len1 * len2)))
    return math.degrees(math.acos(cos_ang))


def dms_format(degrees: float, seconds_precision: int = 2) -> str:
    """Format decimal degrees as ``DD°MM'SS.ss"``."""
    sign = "-" if degrees < 0 else ""
    a = abs(degrees)
    d = math.floor(a)
    a = (a - d) * 60.0
    m = math.floor(a)
    s = (a - m) * 60.0
    width = 2 + seconds_precision + (1 if seconds_precision > 0 else 0)
    return f"{sign}{d:02d}°{m:02d}'{s:0{width}.{seconds_precision}f}\""
