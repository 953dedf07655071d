# -*- coding: utf-8 -*-
"""Screen-space interaction: viewport mapping, picking, snapping, grid
and point clustering."""

from stakeout_lib.canvas.cluster import PointCluster
from stakeout_lib.canvas.cluster import cluster_points
from stakeout_lib.canvas.cluster import cluster_radius_for_zoom
from stakeout_lib.canvas.grid import grid_intersections
from stakeout_lib.canvas.grid import grid_lines
from stakeout_lib.canvas.grid import nice_step
from stakeout_lib.canvas.hit_test import HitResult
from stakeout_lib.canvas.hit_test import entity_hit_test
from stakeout_lib.canvas.hit_test import select_entity
from stakeout_lib.canvas.snapping import SnapResult
from stakeout_lib.canvas.snapping import SnapSettings
from stakeout_lib.canvas.snapping import cycle_preset
from stakeout_lib.canvas.snapping import effective_snap_tolerance_px
from stakeout_lib.canvas.snapping import snap_point
from stakeout_lib.canvas.snapping import snap_vertices
from stakeout_lib.canvas.viewport import Viewport

__all__ = [
    "HitResult",
    "PointCluster",
    "SnapResult",
    "SnapSettings",
    "Viewport",
    "cluster_points",
    "cluster_radius_for_zoom",
    "cycle_preset",
    "effective_snap_tolerance_px",
    "entity_hit_test",
    "grid_intersections",
    "grid_lines",
    "nice_step",
    "select_entity",
    "snap_point",
    "snap_vertices",
]
