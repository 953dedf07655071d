# -*- coding: utf-8 -*-
"""Greedy clustering of CAD points for zoomed-out display."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from stakeout_lib.constants import CLUSTER_BASE_RADIUS_M
from stakeout_lib.constants import CLUSTER_MAX_ZOOM_EXPONENT
from stakeout_lib.constants import CLUSTER_REFERENCE_ZOOM
from stakeout_lib.errors import InvalidParameterError
from stakeout_lib.geometry.models import CadEntity
from stakeout_lib.geometry.models import CadPoint
from stakeout_lib.geometry.models import Point


@dataclass(frozen=True)
class PointCluster:
    """A group of nearby points drawn as one marker at their centroid."""

    center: Point
    members: tuple[CadPoint, ...]

    @property
    def size(self) -> int:
        return len(self.members)


def cluster_radius_for_zoom(
    zoom: float, base: float = CLUSTER_BASE_RADIUS_M
) -> float:
    """Cluster radius in metres: doubles for every zoom level out from 14.

    The exponent is clamped to ``±5`` levels.
    """
    exponent = min(
        CLUSTER_MAX_ZOOM_EXPONENT,
        max(-CLUSTER_MAX_ZOOM_EXPONENT, CLUSTER_REFERENCE_ZOOM - zoom),
    )
    return base * 2.0**exponent


def cluster_points(
    entities: Sequence[CadEntity], radius_m: float
) -> list[PointCluster]:
    """Group the :class:`CadPoint` entities of *entities*.

    Takes the first unclustered point as a seed, absorbs every remaining
    point within *radius_m* of it and repeats.  Other entity kinds are
    ignored.
    """
    if radius_m <= 0:
        raise InvalidParameterError("radius_m", radius_m)

    remaining = [e for e in entities if isinstance(e, CadPoint)]
    clusters: list[PointCluster] = []

    while remaining:
        seed = remaining.pop(0)
        members = [seed]
        rest: list[CadPoint] = []
        for p in remaining:
            if p.position.distance_to(seed.position) <= radius_m:
                members.append(p)
            else:
                rest.append(p)
        remaining = rest

        cx = sum(m.position.x for m in members) / len(members)
        cy = sum(m.position.y for m in members) / len(members)
        clusters.append(PointCluster(Point(cx, cy), tuple(members)))

    return clusters
