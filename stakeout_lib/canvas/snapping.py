# -*- coding: utf-8 -*-
"""Snapping of picked points to entity vertices and the background grid.

Two modes are supported:

* **pixel** -- distances are measured on screen.  When no vertex is
  within tolerance, grid intersections of the viewport bounds join the
  candidate set.
* **world** -- distances are true metres in the model frame, vertices
  only.

A failed snap is not an error: :func:`snap_point` then hands back the
raw, unsnapped world position.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Annotated
from typing import NamedTuple

import numpy as np
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from stakeout_lib.canvas.grid import grid_intersections
from stakeout_lib.canvas.viewport import Viewport
from stakeout_lib.constants import DEFAULT_SNAP_TOLERANCE_M
from stakeout_lib.constants import DEFAULT_SNAP_TOLERANCE_PX
from stakeout_lib.constants import DYNAMIC_SNAP_FACTOR_RANGE
from stakeout_lib.constants import DYNAMIC_SNAP_REFERENCE_ZOOM
from stakeout_lib.constants import DYNAMIC_SNAP_TOLERANCE_RANGE_PX
from stakeout_lib.constants import DYNAMIC_SNAP_ZOOM_RANGE
from stakeout_lib.enums import SnapMode
from stakeout_lib.enums import SnapSource
from stakeout_lib.errors import UnsupportedEntityError
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
# Settings & results
# ---------------------------------------------------------------------------


class SnapSettings(BaseModel):
    """User snapping preferences."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    mode: SnapMode = SnapMode.PIXEL
    tolerance_px: Annotated[int, Field(gt=0)] = DEFAULT_SNAP_TOLERANCE_PX
    tolerance_m: Annotated[float, Field(gt=0)] = DEFAULT_SNAP_TOLERANCE_M
    dynamic: bool = False


class SnapResult(NamedTuple):
    """Outcome of a snap attempt.

    ``world`` is always usable: it is the snapped point when ``snapped``
    is set, the raw picked position otherwise.
    """

    world: Point
    screen: Point | None
    snapped: bool
    source: SnapSource


# ---------------------------------------------------------------------------
# Candidates
# ---------------------------------------------------------------------------


def entity_vertices(entity: CadEntity) -> tuple[Point, ...]:
    """Snap vertices of a single entity.

    Circles and arcs snap to their center; polygons to their outer ring.
    """
    match entity:
        case CadLine(start=start, end=end):
            return (start, end)
        case CadPolyline(points=points):
            return points
        case CadPolygon():
            return entity.outer
        case CadCircle(center=center) | CadArc(center=center):
            return (center,)
        case CadText(position=position) | CadPoint(position=position):
            return (position,)
        case _:
            raise UnsupportedEntityError(entity)


def snap_vertices(entities: Sequence[CadEntity]) -> list[Point]:
    """Every snap vertex of *entities*, in entity order."""
    return [v for entity in entities for v in entity_vertices(entity)]


def _as_array(points: Sequence[Point]) -> np.ndarray:
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def _nearest(candidates: np.ndarray, target: Point) -> tuple[int, float]:
    """Index and distance of the candidate closest to *target* (first on ties)."""
    d = np.hypot(candidates[:, 0] - target.x, candidates[:, 1] - target.y)
    idx = int(np.argmin(d))
    return idx, float(d[idx])


# ---------------------------------------------------------------------------
# Snapping
# ---------------------------------------------------------------------------


def snap_pixel(
    screen_point: Point,
    entities: Sequence[CadEntity],
    viewport: Viewport,
    tolerance_px: float,
) -> SnapResult | None:
    """Snap in screen space, falling back to grid intersections.

    Returns ``None`` when neither a vertex nor a grid point lies within
    *tolerance_px*.
    """
    world_candidates = _as_array(snap_vertices(entities))
    vertex_count = len(world_candidates)

    best_d = math.inf
    best_idx = -1
    if vertex_count:
        best_idx, best_d = _nearest(
            viewport.world_to_screen_array(world_candidates), screen_point
        )

    if best_d > tolerance_px:
        world_candidates = np.vstack(
            (world_candidates, grid_intersections(viewport.bounds))
        )
        if len(world_candidates):
            best_idx, best_d = _nearest(
                viewport.world_to_screen_array(world_candidates), screen_point
            )

    if best_idx < 0 or best_d > tolerance_px:
        return None

    x, y = world_candidates[best_idx]
    world = Point(float(x), float(y))
    source = SnapSource.VERTEX if best_idx < vertex_count else SnapSource.GRID
    return SnapResult(world, viewport.world_to_screen(world), True, source)


def snap_world(
    world_point: Point,
    entities: Sequence[CadEntity],
    tolerance_m: float,
) -> SnapResult | None:
    """Snap to the nearest vertex within *tolerance_m* metres, or ``None``."""
    vertices = snap_vertices(entities)
    if not vertices:
        return None

    idx, d = _nearest(_as_array(vertices), world_point)
    if d > tolerance_m:
        return None
    return SnapResult(vertices[idx], None, True, SnapSource.VERTEX)


def snap_point(
    screen_point: Point,
    entities: Sequence[CadEntity],
    viewport: Viewport,
    settings: SnapSettings,
    zoom: float = DYNAMIC_SNAP_REFERENCE_ZOOM,
) -> SnapResult:
    """Resolve a tap into a world point, snapping per *settings*."""
    raw = viewport.screen_to_world(screen_point)
    unsnapped = SnapResult(raw, screen_point, False, SnapSource.NONE)

    if not settings.enabled:
        return unsnapped

    if settings.mode == SnapMode.WORLD:
        result = snap_world(raw, entities, settings.tolerance_m)
        if result is not None:
            result = result._replace(screen=viewport.world_to_screen(result.world))
    else:
        tolerance = effective_snap_tolerance_px(
            settings.tolerance_px, zoom, dynamic=settings.dynamic, mode=settings.mode
        )
        result = snap_pixel(screen_point, entities, viewport, tolerance)

    if result is None:
        logger.debug("No snap candidate near %s", screen_point)
        return unsnapped
    return result


# ---------------------------------------------------------------------------
# Tolerance helpers
# ---------------------------------------------------------------------------


def effective_snap_tolerance_px(
    base_px: int,
    zoom: float,
    dynamic: bool = True,
    mode: SnapMode = SnapMode.PIXEL,
) -> int:
    """Pixel tolerance adjusted for the map zoom level.

    Zoomed out (low zoom) the tolerance grows, zoomed in it shrinks,
    relative to zoom 18.  World mode and non-dynamic settings use
    *base_px* unchanged.
    """
    if mode == SnapMode.WORLD or not dynamic:
        return base_px

    z_lo, z_hi = DYNAMIC_SNAP_ZOOM_RANGE
    f_lo, f_hi = DYNAMIC_SNAP_FACTOR_RANGE
    t_lo, t_hi = DYNAMIC_SNAP_TOLERANCE_RANGE_PX

    z = min(z_hi, max(z_lo, zoom))
    factor = min(f_hi, max(f_lo, DYNAMIC_SNAP_REFERENCE_ZOOM / z))
    # Round half up, not to even
    tolerance = math.floor(base_px * factor + 0.5)
    return min(t_hi, max(t_lo, tolerance))


def cycle_preset(current: float, presets: Sequence[float]) -> float:
    """Next preset after *current*, wrapping around.

    A value that is not one of the presets jumps to the first preset.
    """
    try:
        idx = list(presets).index(current)
    except ValueError:
        return presets[0]
    return presets[(idx + 1) % len(presets)]
