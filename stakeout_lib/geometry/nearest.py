# -*- coding: utf-8 -*-
"""Closest point on a CAD entity to an arbitrary query point.

All computations happen in the local projected frame (metres).  Every
division is guarded so degenerate geometry (zero-length segments, a
query sitting on a circle's center) never produces NaN or infinity.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from collections.abc import Sequence

from stakeout_lib.constants import CENTER_EPSILON
from stakeout_lib.constants import SEGMENT_EPSILON_SQ
from stakeout_lib.errors import UnsupportedEntityError
from stakeout_lib.geometry.angles import angle_in_sweep
from stakeout_lib.geometry.angles import angular_distance
from stakeout_lib.geometry.angles import polar_angle_deg
from stakeout_lib.geometry.models import CadArc
from stakeout_lib.geometry.models import CadCircle
from stakeout_lib.geometry.models import CadEntity
from stakeout_lib.geometry.models import CadLine
from stakeout_lib.geometry.models import CadPoint
from stakeout_lib.geometry.models import CadPolygon
from stakeout_lib.geometry.models import CadPolyline
from stakeout_lib.geometry.models import CadText
from stakeout_lib.geometry.models import Point

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Primitive helpers
# ---------------------------------------------------------------------------


def closest_point_on_segment(a: Point, b: Point, p: Point) -> Point:
    """Project *p* onto segment ``a -> b`` and clamp to the segment.

    A segment shorter than ``sqrt(1e-12)`` collapses to ``a``.
    """
    ab = b - a
    len_sq = ab.dot(ab)
    if len_sq < SEGMENT_EPSILON_SQ:
        return a
    t = (p - a).dot(ab) / len_sq
    t = min(1.0, max(0.0, t))
    return a + ab * t


def segments(points: Sequence[Point], closed: bool) -> Iterator[tuple[Point, Point]]:
    """Consecutive segments of a vertex chain.

    The closing segment is produced only when ``closed`` is set and the
    chain has at least 3 points.
    """
    for i in range(len(points) - 1):
        yield points[i], points[i + 1]
    if closed and len(points) >= 3:
        yield points[-1], points[0]


def closest_point_on_chain(
    points: Sequence[Point], p: Point, closed: bool = False
) -> Point:
    """Nearest point on a chain of segments; the first minimum wins ties."""
    best = points[0]
    best_d = math.inf
    for a, b in segments(points, closed):
        candidate = closest_point_on_segment(a, b, p)
        d = candidate.distance_to(p)
        if d < best_d:
            best, best_d = candidate, d
    return best


def point_on_circle(center: Point, radius: float, angle_deg: float) -> Point:
    rad = math.radians(angle_deg)
    return Point(center.x + radius * math.cos(rad), center.y + radius * math.sin(rad))


def closest_point_on_circle(center: Point, radius: float, p: Point) -> Point:
    """Radial projection of *p* onto the circle.

    A query within ``1e-6`` of the center maps to ``center + (r, 0)``.
    """
    v = p - center
    d = v.length
    if d < CENTER_EPSILON:
        return Point(center.x + radius, center.y)
    return center + v * (radius / d)


def closest_point_on_arc(arc: CadArc, p: Point) -> Point:
    """Nearest point on a counter-clockwise arc.

    Inside the sweep the query projects radially; outside it the nearer
    endpoint (by angular distance) wins.  A query on the center maps to
    the start point.
    """
    start = arc.start_angle_deg
    end = arc.end_angle_deg
    v = p - arc.center
    if v.length < CENTER_EPSILON:
        return point_on_circle(arc.center, arc.radius, start)

    angle = polar_angle_deg(v.x, v.y)
    if angle_in_sweep(angle, start, end):
        return point_on_circle(arc.center, arc.radius, angle)

    if angular_distance(angle, start) <= angular_distance(angle, end):
        return point_on_circle(arc.center, arc.radius, start)
    return point_on_circle(arc.center, arc.radius, end)


# ---------------------------------------------------------------------------
# Entity dispatch
# ---------------------------------------------------------------------------


def nearest_point_on_entity(entity: CadEntity, query_e: float, query_n: float) -> Point:
    """Closest point on *entity* to ``(query_e, query_n)``.

    Raises:
        UnsupportedEntityError: If *entity* is not a known CAD entity.
    """
    q = Point(query_e, query_n)

    match entity:
        case CadLine(start=start, end=end):
            return closest_point_on_segment(start, end, q)

        case CadPolyline(points=points, closed=closed):
            return closest_point_on_chain(points, q, closed=closed)

        case CadPolygon(rings=rings):
            candidates = [closest_point_on_chain(ring, q, closed=True) for ring in rings]
            return min(candidates, key=q.distance_to)

        case CadCircle(center=center, radius=radius):
            return closest_point_on_circle(center, radius, q)

        case CadArc():
            return closest_point_on_arc(entity, q)

        case CadText(position=position) | CadPoint(position=position):
            return position

        case _:
            logger.debug("No nearest-point rule for %r", entity)
            raise UnsupportedEntityError(entity)


def distance_to_entity(entity: CadEntity, query_e: float, query_n: float) -> float:
    """Euclidean distance from the query to its nearest point on *entity*."""
    nearest = nearest_point_on_entity(entity, query_e, query_n)
    return math.hypot(query_e - nearest.x, query_n - nearest.y)
