# -*- coding: utf-8 -*-
"""Bounding-box arithmetic over CAD entities."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator

from stakeout_lib.constants import BOUNDS_PADDING_RATIO
from stakeout_lib.errors import UnsupportedEntityError
from stakeout_lib.geometry.models import Bounds
from stakeout_lib.geometry.models import CadArc
from stakeout_lib.geometry.models import CadCircle
from stakeout_lib.geometry.models import CadEntity
from stakeout_lib.geometry.models import CadLine
from stakeout_lib.geometry.models import CadPoint
from stakeout_lib.geometry.models import CadPolygon
from stakeout_lib.geometry.models import CadPolyline
from stakeout_lib.geometry.models import CadText
from stakeout_lib.geometry.models import Point

#: Returned when there is nothing to frame
UNIT_BOUNDS = Bounds(0.0, 0.0, 1.0, 1.0)


def extent_points(entity: CadEntity) -> Iterator[Point]:
    """Yield the points that define the extent of *entity*.

    Circles and arcs contribute their full bounding square
    (``center ± radius``); polygons contribute their outer ring only.
    """
    match entity:
        case CadLine(start=start, end=end):
            yield start
            yield end
        case CadPolyline(points=points):
            yield from points
        case CadPolygon():
            yield from entity.outer
        case CadCircle(center=c, radius=r) | CadArc(center=c, radius=r):
            yield Point(c.x - r, c.y - r)
            yield Point(c.x + r, c.y + r)
        case CadText(position=position) | CadPoint(position=position):
            yield position
        case _:
            raise UnsupportedEntityError(entity)


def entity_bounds(entity: CadEntity) -> Bounds:
    """Tight (unpadded) bounding box of a single entity."""
    bounds = Bounds.of_points(tuple(extent_points(entity)))
    # Every variant yields at least one point
    assert bounds is not None
    return bounds


def bounds_of(entities: Iterable[CadEntity]) -> Bounds:
    """Display bounds of *entities*.

    Folds every extent point into a running min/max and pads the result
    by 5% of the larger span on every side.  An empty input yields the
    unit box ``(0, 0, 1, 1)``.
    """
    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")

    for entity in entities:
        for p in extent_points(entity):
            min_x = min(min_x, p.x)
            max_x = max(max_x, p.x)
            min_y = min(min_y, p.y)
            max_y = max(max_y, p.y)

    if min_x == float("inf"):
        return UNIT_BOUNDS

    pad = BOUNDS_PADDING_RATIO * max(max_x - min_x, max_y - min_y)
    return Bounds(min_x - pad, min_y - pad, max_x + pad, max_y + pad)
