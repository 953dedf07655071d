# -*- coding: utf-8 -*-
"""Display-time simplification of large entity sets.

Simplification never touches the stored entities: the functions here
return new instances built with ``model_copy`` so the caller can keep
the originals for editing and stakeout.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Collection
from collections.abc import Sequence

from stakeout_lib.constants import SIMPLIFY_ENTITY_THRESHOLD
from stakeout_lib.constants import SIMPLIFY_EPSILON
from stakeout_lib.geometry.models import CadEntity
from stakeout_lib.geometry.models import CadPolygon
from stakeout_lib.geometry.models import CadPolyline
from stakeout_lib.geometry.models import Point

logger = logging.getLogger(__name__)


def perpendicular_distance(a: Point, b: Point, p: Point) -> float:
    """Distance from *p* to the infinite line through *a* and *b*.

    When ``a == b`` the plain Euclidean distance to *a* is returned.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    if dx == 0.0 and dy == 0.0:
        return math.hypot(p.x - a.x, p.y - a.y)
    return abs(dy * p.x - dx * p.y + b.x * a.y - b.y * a.x) / math.hypot(dx, dy)


def douglas_peucker(points: Sequence[Point], epsilon: float) -> list[Point]:
    """Douglas-Peucker reduction of a vertex chain.

    The first and last points are always kept.  Chains of fewer than 3
    points are returned unchanged.
    """
    if len(points) < 3:
        return list(points)

    first = points[0]
    last = points[-1]
    max_d = 0.0
    index = 0
    for i in range(1, len(points) - 1):
        d = perpendicular_distance(first, last, points[i])
        if d > max_d:
            max_d = d
            index = i

    if max_d > epsilon:
        left = douglas_peucker(points[: index + 1], epsilon)
        right = douglas_peucker(points[index:], epsilon)
        return left[:-1] + right

    return [first, last]


def filter_layers(
    entities: Sequence[CadEntity], active_layers: Collection[str]
) -> list[CadEntity]:
    """Entities on one of *active_layers*.  No active layer shows nothing."""
    if not active_layers:
        return []
    return [entity for entity in entities if entity.layer in active_layers]


def simplify_for_display(
    entities: Sequence[CadEntity],
    threshold: int = SIMPLIFY_ENTITY_THRESHOLD,
    epsilon: float = SIMPLIFY_EPSILON,
) -> list[CadEntity]:
    """Derive a lighter copy of *entities* for rendering.

    Below *threshold* entities the input is returned as-is (as a new
    list).  Otherwise polylines are simplified and polygons are reduced to
    their simplified outer ring; every other entity passes through.
    """
    if len(entities) < threshold:
        return list(entities)

    logger.debug(
        "Simplifying %d entities for display (epsilon=%s)", len(entities), epsilon
    )

    result: list[CadEntity] = []
    for entity in entities:
        match entity:
            case CadPolyline(points=points):
                simplified = douglas_peucker(points, epsilon)
                result.append(entity.model_copy(update={"points": tuple(simplified)}))
            case CadPolygon():
                outer = douglas_peucker(entity.outer, epsilon)
                if len(outer) < 3:
                    # A ring collapsed to its chord cannot be drawn as an area
                    result.append(entity.model_copy(update={"rings": (entity.outer,)}))
                else:
                    result.append(entity.model_copy(update={"rings": (tuple(outer),)}))
            case _:
                result.append(entity)
    return result
