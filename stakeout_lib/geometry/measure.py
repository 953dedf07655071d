# -*- coding: utf-8 -*-
"""Lengths, areas and perimeters of planar geometry.

Areas use the shoelace formula.  Rings are implicitly closed: the last
point connects back to the first, so callers never repeat the first
vertex.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from stakeout_lib.errors import UnsupportedEntityError
from stakeout_lib.geometry.angles import sweep_deg
from stakeout_lib.geometry.bounds import entity_bounds
from stakeout_lib.geometry.models import CadArc
from stakeout_lib.geometry.models import CadCircle
from stakeout_lib.geometry.models import CadEntity
from stakeout_lib.geometry.models import CadLine
from stakeout_lib.geometry.models import CadPoint
from stakeout_lib.geometry.models import CadPolygon
from stakeout_lib.geometry.models import CadPolyline
from stakeout_lib.geometry.models import CadText
from stakeout_lib.geometry.models import Point

# ---------------------------------------------------------------------------
# Points & rings
# ---------------------------------------------------------------------------


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def polyline_length(points: Sequence[Point], closed: bool = False) -> float:
    """Sum of the segment lengths of *points*.

    With ``closed=True`` (and at least 3 points) the last-to-first
    segment is included.
    """
    total = sum(distance(points[i], points[i + 1]) for i in range(len(points) - 1))
    if closed and len(points) >= 3:
        total += distance(points[-1], points[0])
    return total


def polygon_area_signed(ring: Sequence[Point]) -> float:
    """Shoelace area; positive for counter-clockwise rings."""
    n = len(ring)
    if n < 3:
        return 0.0
    acc = 0.0
    for i in range(n):
        p = ring[i]
        q = ring[(i + 1) % n]
        acc += p.x * q.y - q.x * p.y
    return acc / 2.0


def polygon_area(ring: Sequence[Point]) -> float:
    """Unsigned area of a ring (``0`` for fewer than 3 points)."""
    return abs(polygon_area_signed(ring))


def polygon_net_area(rings: Sequence[Sequence[Point]]) -> float:
    """Outer ring area minus the area of every hole."""
    if not rings:
        return 0.0
    return polygon_area(rings[0]) - sum(polygon_area(hole) for hole in rings[1:])


def polygon_perimeter(ring: Sequence[Point]) -> float:
    """Closed perimeter of a ring."""
    if len(ring) < 2:
        return 0.0
    return polyline_length(ring) + distance(ring[-1], ring[0])


def polygon_perimeter_rings(rings: Sequence[Sequence[Point]]) -> float:
    """Summed perimeter of the outer ring and every hole."""
    return sum(polygon_perimeter(ring) for ring in rings)


# ---------------------------------------------------------------------------
# Circles & arcs
# ---------------------------------------------------------------------------


def circle_area(radius: float) -> float:
    return math.pi * radius * radius


def circle_circumference(radius: float) -> float:
    return 2.0 * math.pi * radius


def arc_sweep_deg(start_deg: float, end_deg: float) -> float:
    """Counter-clockwise sweep; equal angles are a full turn (360)."""
    return sweep_deg(start_deg, end_deg)


def arc_length(radius: float, start_deg: float, end_deg: float) -> float:
    return radius * math.radians(arc_sweep_deg(start_deg, end_deg))


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


def entity_length(entity: CadEntity) -> float:
    """Length (or perimeter) of *entity*; ``0`` for points and text."""
    match entity:
        case CadLine(start=start, end=end):
            return distance(start, end)
        case CadPolyline(points=points, closed=closed):
            return polyline_length(points, closed=closed)
        case CadPolygon(rings=rings):
            return polygon_perimeter_rings(rings)
        case CadCircle(radius=radius):
            return circle_circumference(radius)
        case CadArc(radius=radius, start_angle_deg=start, end_angle_deg=end):
            return arc_length(radius, start, end)
        case CadPoint() | CadText():
            return 0.0
        case _:
            raise UnsupportedEntityError(entity)


def entity_area(entity: CadEntity) -> float:
    """Enclosed area of *entity*.

    Only polygons (net of holes), circles and closed polylines enclose an
    area; everything else reports ``0``.
    """
    match entity:
        case CadPolygon(rings=rings):
            return polygon_net_area(rings)
        case CadCircle(radius=radius):
            return circle_area(radius)
        case CadPolyline(points=points, closed=True):
            return polygon_area(points)
        case CadPolyline() | CadLine() | CadArc() | CadPoint() | CadText():
            return 0.0
        case _:
            raise UnsupportedEntityError(entity)


def describe_entity(entity: CadEntity) -> dict[str, Any]:
    """Summary of *entity* for info panels and the ``measure`` command."""
    bounds = entity_bounds(entity)
    info: dict[str, Any] = {
        "kind": entity.kind,
        "layer": entity.layer,
        "length": entity_length(entity),
        "area": entity_area(entity),
        "bounds": [bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y],
    }

    match entity:
        case CadPolyline(points=points, closed=closed):
            info["vertices"] = len(points)
            info["closed"] = closed
        case CadPolygon(rings=rings):
            info["vertices"] = sum(len(ring) for ring in rings)
            info["holes"] = len(rings) - 1
        case CadArc(start_angle_deg=start, end_angle_deg=end):
            info["radius"] = entity.radius
            info["sweep_deg"] = arc_sweep_deg(start, end)
        case CadCircle(radius=radius):
            info["radius"] = radius
        case CadText(text=text):
            info["text"] = text
        case _:
            pass

    return info
