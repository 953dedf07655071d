# -*- coding: utf-8 -*-
"""Stakeout guidance towards a single CAD entity."""

from __future__ import annotations

import math
from dataclasses import dataclass

from stakeout_lib.cogo import bearing_deg
from stakeout_lib.geometry.models import CadEntity
from stakeout_lib.geometry.models import Point
from stakeout_lib.geometry.nearest import nearest_point_on_entity


@dataclass(frozen=True)
class EntityProjection:
    """Nearest point on an entity and how to walk to it.

    Attributes:
        nearest: Closest point on the entity
        delta_e: Easting to go (``nearest - query``)
        delta_n: Northing to go
        distance: Horizontal distance to ``nearest``
        bearing_deg: Grid bearing from the query to ``nearest``
    """

    nearest: Point
    delta_e: float
    delta_n: float
    distance: float
    bearing_deg: float


def project_onto_entity(
    entity: CadEntity, query_e: float, query_n: float
) -> EntityProjection:
    nearest = nearest_point_on_entity(entity, query_e, query_n)
    de = nearest.x - query_e
    dn = nearest.y - query_n
    return EntityProjection(
        nearest=nearest,
        delta_e=de,
        delta_n=dn,
        distance=math.hypot(de, dn),
        bearing_deg=bearing_deg(de, dn),
    )
