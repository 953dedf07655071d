# -*- coding: utf-8 -*-
"""Planar geometry: primitives, bounds, measurement, nearest point and
display simplification."""

from stakeout_lib.geometry.bounds import bounds_of
from stakeout_lib.geometry.bounds import entity_bounds
from stakeout_lib.geometry.measure import describe_entity
from stakeout_lib.geometry.measure import entity_area
from stakeout_lib.geometry.measure import entity_length
from stakeout_lib.geometry.measure import polygon_area
from stakeout_lib.geometry.measure import polygon_net_area
from stakeout_lib.geometry.measure import polygon_perimeter
from stakeout_lib.geometry.models import ENTITY_LIST_ADAPTER
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
from stakeout_lib.geometry.nearest import closest_point_on_segment
from stakeout_lib.geometry.nearest import distance_to_entity
from stakeout_lib.geometry.nearest import nearest_point_on_entity
from stakeout_lib.geometry.simplify import douglas_peucker
from stakeout_lib.geometry.simplify import filter_layers
from stakeout_lib.geometry.simplify import simplify_for_display

__all__ = [
    "ENTITY_LIST_ADAPTER",
    "Bounds",
    "CadArc",
    "CadCircle",
    "CadEntity",
    "CadLine",
    "CadPoint",
    "CadPolygon",
    "CadPolyline",
    "CadText",
    "Point",
    "bounds_of",
    "closest_point_on_segment",
    "describe_entity",
    "distance_to_entity",
    "douglas_peucker",
    "entity_area",
    "entity_bounds",
    "entity_length",
    "filter_layers",
    "nearest_point_on_entity",
    "polygon_area",
    "polygon_net_area",
    "polygon_perimeter",
    "simplify_for_display",
]
