# -*- coding: utf-8 -*-
"""Enumerations for the stakeout engine.

This module contains all enumerations used across the geometry,
canvas and stakeout packages.
"""

from enum import Enum


class EntityKind(str, Enum):
    """Discriminator values of the CAD entity union.

    Attributes:
        POINT: Standalone survey / CAD point
        LINE: Two-point line segment
        POLYLINE: Open or closed chain of segments
        POLYGON: Area with an outer ring and optional holes
        TEXT: Text label anchored at a position
        CIRCLE: Full circle
        ARC: Circular arc swept counter-clockwise from its start angle
    """

    POINT = "point"
    LINE = "line"
    POLYLINE = "polyline"
    POLYGON = "polygon"
    TEXT = "text"
    CIRCLE = "circle"
    ARC = "arc"


class FixType(str, Enum):
    """GNSS solution type reported by the receiver.

    Attributes:
        NO_FIX: No position solution
        SINGLE: Autonomous single-point solution
        DGPS: Code-differential solution
        RTK_FLOAT: RTK with float ambiguities
        RTK_FIX: RTK with fixed ambiguities
        PPP: Precise point positioning
        MANUAL: Manually entered position
    """

    NO_FIX = "NO_FIX"
    SINGLE = "SINGLE"
    DGPS = "DGPS"
    RTK_FLOAT = "RTK_FLOAT"
    RTK_FIX = "RTK_FIX"
    PPP = "PPP"
    MANUAL = "MANUAL"

    @property
    def accuracy_level(self) -> int:
        """Coarse quality ranking (0 = no fix, 4 = RTK fixed)."""
        return {
            FixType.NO_FIX: 0,
            FixType.SINGLE: 1,
            FixType.DGPS: 2,
            FixType.RTK_FLOAT: 3,
            FixType.RTK_FIX: 4,
            FixType.PPP: 3,
            FixType.MANUAL: 1,
        }[self]

    @property
    def is_rtk(self) -> bool:
        return self in (FixType.RTK_FLOAT, FixType.RTK_FIX)

    @property
    def is_differential(self) -> bool:
        return self.accuracy_level >= 2


class StakeoutStatus(str, Enum):
    """Acceptance state of a stakeout tick.

    Attributes:
        NO_FIX: No live position available
        NO_TARGET: Live position, but nothing selected to stake out
        OUT_OF_TOLERANCE: At least one checked axis exceeds its tolerance
        WITHIN_TOLERANCE: Every checked axis passes; saving is allowed
        SAVED: A record was saved for the current target
    """

    NO_FIX = "no_fix"
    NO_TARGET = "no_target"
    OUT_OF_TOLERANCE = "out_of_tolerance"
    WITHIN_TOLERANCE = "within_tolerance"
    SAVED = "saved"


class TargetKind(str, Enum):
    """Discriminator values of the stakeout target union."""

    POINT = "point"
    LINE = "line"
    ALIGNMENT = "alignment"
    ENTITY = "entity"


class SnapMode(str, Enum):
    """Space in which snap distances are measured.

    Attributes:
        PIXEL: Screen pixels, with grid fallback
        WORLD: Model-space metres, vertices only
    """

    PIXEL = "pixel"
    WORLD = "world"


class SnapSource(str, Enum):
    """What a snapped point was taken from."""

    VERTEX = "vertex"
    GRID = "grid"
    NONE = "none"


class MeasurementMode(str, Enum):
    """What the measurement session reports to the user."""

    DISTANCE = "distance"
    AREA = "area"


class ProjectionType(str, Enum):
    """Map projections supported by the projection engine.

    Attributes:
        UTM: Universal Transverse Mercator (zone + hemisphere)
        TRANSVERSE_MERCATOR: Generic Transverse Mercator
        LAMBERT_CONFORMAL_CONIC_2SP: Lambert Conformal Conic, two standard parallels
    """

    UTM = "UTM"
    TRANSVERSE_MERCATOR = "Transverse_Mercator"
    LAMBERT_CONFORMAL_CONIC_2SP = "Lambert_Conformal_Conic_2SP"
