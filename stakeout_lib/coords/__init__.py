# -*- coding: utf-8 -*-
"""Coordinate transforms between geodetic fixes and the local grid.

Available transformers:

- :class:`NoOpTransformer` -- no projection configured (linear fallback)
- :class:`CrsTransformer` -- UTM, Transverse Mercator or Lambert
  Conformal Conic through pyproj
- :class:`LocalizedTransformer` -- site calibration on top of another
  transformer
"""

from stakeout_lib.coords.models import ProjectionSettings
from stakeout_lib.coords.transform import NOOP_TRANSFORMER
from stakeout_lib.coords.transform import CoordinateTransformer
from stakeout_lib.coords.transform import CrsTransformer
from stakeout_lib.coords.transform import LocalizedTransformer
from stakeout_lib.coords.transform import NoOpTransformer
from stakeout_lib.coords.transform import ProjectionEngine
from stakeout_lib.coords.transform import fallback_local
from stakeout_lib.coords.transform import suggest_utm_zone
from stakeout_lib.coords.transform import to_local

__all__ = [
    "NOOP_TRANSFORMER",
    "CoordinateTransformer",
    "CrsTransformer",
    "LocalizedTransformer",
    "NoOpTransformer",
    "ProjectionEngine",
    "ProjectionSettings",
    "fallback_local",
    "suggest_utm_zone",
    "to_local",
]
