# -*- coding: utf-8 -*-
"""Stakeout Library.

A Python library for 2D survey geometry and field stakeout: CAD entity
geometry (bounds, nearest point, measurement, simplification), canvas
interaction (picking, snapping, grid, clustering), coordinate transforms
and the stakeout acceptance state machine.

Usage:
    from stakeout_lib import PointTarget, StakeoutInputs, StakeoutState
    from stakeout_lib import GnssObservation, recompute

    state = recompute(
        StakeoutState(),
        StakeoutInputs(
            observation=GnssObservation(lat_deg=45.0, lon_deg=7.0),
            target=PointTarget(e=777000.0, n=4995000.0),
        ),
    )
    print(state.status, state.result.horizontal_distance_m)
"""

__version__ = "0.1.0"

# Constants
from stakeout_lib.constants import FALLBACK_METERS_PER_DEGREE
from stakeout_lib.constants import JSON_ENCODING

# Enums
from stakeout_lib.enums import EntityKind
from stakeout_lib.enums import FixType
from stakeout_lib.enums import MeasurementMode
from stakeout_lib.enums import ProjectionType
from stakeout_lib.enums import SnapMode
from stakeout_lib.enums import SnapSource
from stakeout_lib.enums import StakeoutStatus
from stakeout_lib.enums import TargetKind

# Errors
from stakeout_lib.errors import InvalidParameterError
from stakeout_lib.errors import StakeoutError
from stakeout_lib.errors import TransformError
from stakeout_lib.errors import UnsupportedEntityError

# Geometry
from stakeout_lib.geometry import ENTITY_LIST_ADAPTER
from stakeout_lib.geometry import Bounds
from stakeout_lib.geometry import CadArc
from stakeout_lib.geometry import CadCircle
from stakeout_lib.geometry import CadEntity
from stakeout_lib.geometry import CadLine
from stakeout_lib.geometry import CadPoint
from stakeout_lib.geometry import CadPolygon
from stakeout_lib.geometry import CadPolyline
from stakeout_lib.geometry import CadText
from stakeout_lib.geometry import Point
from stakeout_lib.geometry import bounds_of
from stakeout_lib.geometry import nearest_point_on_entity
from stakeout_lib.geometry import simplify_for_display

# Canvas
from stakeout_lib.canvas import SnapSettings
from stakeout_lib.canvas import Viewport
from stakeout_lib.canvas import select_entity
from stakeout_lib.canvas import snap_point

# Coordinates / GNSS
from stakeout_lib.coords import CoordinateTransformer
from stakeout_lib.coords import ProjectionEngine
from stakeout_lib.coords import ProjectionSettings
from stakeout_lib.coords import to_local
from stakeout_lib.gnss import GnssObservation

# Stakeout
from stakeout_lib.measurement import MeasurementSession
from stakeout_lib.stakeout import Alignment
from stakeout_lib.stakeout import AlignmentStation
from stakeout_lib.stakeout import AlignmentTarget
from stakeout_lib.stakeout import EntityTarget
from stakeout_lib.stakeout import LineTarget
from stakeout_lib.stakeout import PointTarget
from stakeout_lib.stakeout import StakeoutInputs
from stakeout_lib.stakeout import StakeoutRecord
from stakeout_lib.stakeout import StakeoutResult
from stakeout_lib.stakeout import StakeoutState
from stakeout_lib.stakeout import ToleranceSettings
from stakeout_lib.stakeout import recompute
from stakeout_lib.stakeout import save

__all__ = [
    # Constants
    "ENTITY_LIST_ADAPTER",
    "FALLBACK_METERS_PER_DEGREE",
    "JSON_ENCODING",
    # Stakeout
    "Alignment",
    "AlignmentStation",
    "AlignmentTarget",
    # Geometry
    "Bounds",
    "CadArc",
    "CadCircle",
    "CadEntity",
    "CadLine",
    "CadPoint",
    "CadPolygon",
    "CadPolyline",
    "CadText",
    # Coordinates
    "CoordinateTransformer",
    # Enums
    "EntityKind",
    "EntityTarget",
    "FixType",
    "GnssObservation",
    # Errors
    "InvalidParameterError",
    "LineTarget",
    "MeasurementMode",
    "MeasurementSession",
    "Point",
    "PointTarget",
    "ProjectionEngine",
    "ProjectionSettings",
    "ProjectionType",
    # Canvas
    "SnapMode",
    "SnapSettings",
    "SnapSource",
    "StakeoutError",
    "StakeoutInputs",
    "StakeoutRecord",
    "StakeoutResult",
    "StakeoutState",
    "StakeoutStatus",
    "TargetKind",
    "ToleranceSettings",
    "TransformError",
    "UnsupportedEntityError",
    "Viewport",
    "bounds_of",
    "nearest_point_on_entity",
    "recompute",
    "save",
    "select_entity",
    "simplify_for_display",
    "snap_point",
    "to_local",
]
