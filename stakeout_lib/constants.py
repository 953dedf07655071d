# -*- coding: utf-8 -*-
"""Constants used throughout the stakeout_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# Numeric Guards
# -----------------------------------------------------------------------------

#: Squared segment lengths below this are treated as a single point
SEGMENT_EPSILON_SQ: float = 1e-12

#: Query-to-center distances below this use the fixed circle fallback direction
CENTER_EPSILON: float = 1e-6

#: Offsets smaller than this are treated as "on the alignment"
OFFSET_EPSILON: float = 1e-9

#: Squared alignment segment lengths below this are skipped during projection
ALIGNMENT_SEGMENT_EPSILON_SQ: float = 1e-9

# -----------------------------------------------------------------------------
# Coordinate Transform
# -----------------------------------------------------------------------------

#: Linear degrees-to-metres factor used when no projection is configured.
#: easting = lon * factor, northing = lat * factor
FALLBACK_METERS_PER_DEGREE: float = 111000.0

#: WGS84 ellipsoid parameters
WGS84_SEMI_MAJOR_M: float = 6378137.0
WGS84_INVERSE_FLATTENING: float = 298.257223563

# -----------------------------------------------------------------------------
# Bounds & Display
# -----------------------------------------------------------------------------

#: Fraction of the larger span added on every side of computed bounds
BOUNDS_PADDING_RATIO: float = 0.05

#: Number of major grid divisions targeted across the visible bounds
GRID_MAJOR_DIVISIONS: int = 8

#: Entity count at which display simplification kicks in
SIMPLIFY_ENTITY_THRESHOLD: int = 500

#: Douglas-Peucker tolerance (map units) for display simplification
SIMPLIFY_EPSILON: float = 0.5

# -----------------------------------------------------------------------------
# Picking & Snapping
# -----------------------------------------------------------------------------

#: Maximum screen distance (px) for an entity hit to be selected
HIT_TEST_THRESHOLD_PX: float = 40.0

#: Default pixel snap tolerance
DEFAULT_SNAP_TOLERANCE_PX: int = 24

#: Pixel snap tolerance presets cycled by the UI
SNAP_TOLERANCE_PRESETS_PX: tuple[int, ...] = (5, 10, 24, 40, 64)

#: Default world-space snap tolerance (metres)
DEFAULT_SNAP_TOLERANCE_M: float = 1.0

#: World-space snap tolerance presets (metres)
SNAP_TOLERANCE_PRESETS_M: tuple[float, ...] = (0.5, 1.0, 2.0, 5.0, 10.0)

#: Zoom level at which the dynamic snap factor equals 1
DYNAMIC_SNAP_REFERENCE_ZOOM: float = 18.0

#: Zoom range considered by the dynamic snap tolerance
DYNAMIC_SNAP_ZOOM_RANGE: tuple[float, float] = (3.0, 23.0)

#: Clamp range of the dynamic snap scale factor
DYNAMIC_SNAP_FACTOR_RANGE: tuple[float, float] = (0.4, 3.0)

#: Clamp range of the resulting dynamic snap tolerance (px)
DYNAMIC_SNAP_TOLERANCE_RANGE_PX: tuple[int, int] = (4, 96)

#: Point cluster radius (metres) at the reference zoom level
CLUSTER_BASE_RADIUS_M: float = 20.0

#: Zoom level at which the cluster radius equals the base radius
CLUSTER_REFERENCE_ZOOM: float = 14.0

#: Maximum zoom exponent (either direction) applied to the cluster radius
CLUSTER_MAX_ZOOM_EXPONENT: float = 5.0

# -----------------------------------------------------------------------------
# Stakeout
# -----------------------------------------------------------------------------

#: Weight of the lateral offset in nearest-station selection
NEAREST_STATION_OFFSET_WEIGHT: float = 0.5

#: Slack (metres) allowed past the line end when generating line stations
LINE_STATION_END_SLACK_M: float = 0.01

#: Default station interval for line stakeout (metres)
DEFAULT_LINE_STATION_INTERVAL_M: float = 10.0

#: Default station interval for road stakeout (metres)
DEFAULT_ROAD_STATION_INTERVAL_M: float = 20.0

#: Default tolerances (metres)
DEFAULT_HORIZONTAL_TOLERANCE_M: float = 0.10
DEFAULT_VERTICAL_TOLERANCE_M: float = 0.05
DEFAULT_LATERAL_TOLERANCE_M: float = 0.20
DEFAULT_CHAIN_TOLERANCE_M: float = 0.50
DEFAULT_ROAD_CHAIN_TOLERANCE_M: float = 0.20
DEFAULT_ROAD_LATERAL_TOLERANCE_M: float = 0.10
DEFAULT_ROAD_ELEVATION_TOLERANCE_M: float = 0.05
DEFAULT_ENTITY_DISTANCE_TOLERANCE_M: float = 0.05

# -----------------------------------------------------------------------------
# Measurement
# -----------------------------------------------------------------------------

#: Maximum number of snapshots kept on each undo / redo stack
UNDO_STACK_LIMIT: int = 100

#: Default CAD layer name
DEFAULT_LAYER: str = "0"

#: Encoding used for JSON files read and written by the CLI
JSON_ENCODING = "utf-8"
