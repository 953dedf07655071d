# -*- coding: utf-8 -*-
"""Background grid with "nice" step sizes.

Steps are picked from ``{1, 2, 5, 10} x 10^n`` so labels stay readable,
targeting :data:`~stakeout_lib.constants.GRID_MAJOR_DIVISIONS` divisions
across the bounds.
"""

from __future__ import annotations

import math

import numpy as np

from stakeout_lib.constants import GRID_MAJOR_DIVISIONS
from stakeout_lib.geometry.models import Bounds


def nice_step(raw: float) -> float:
    """Round *raw* to a readable grid step.

    ``raw <= 0`` yields ``1``.  Otherwise the mantissa of *raw* is mapped
    to 1 (< 1.5), 2 (< 3.5), 5 (< 7.5) or 10 and scaled back.
    """
    if raw <= 0:
        return 1.0
    exponent = math.floor(math.log10(raw))
    scale = 10.0**exponent
    base = raw / scale
    if base < 1.5:
        nice = 1.0
    elif base < 3.5:
        nice = 2.0
    elif base < 7.5:
        nice = 5.0
    else:
        nice = 10.0
    return nice * scale


def grid_steps(
    bounds: Bounds, divisions: int = GRID_MAJOR_DIVISIONS
) -> tuple[float, float]:
    """Grid step along x and y for *bounds*."""
    return nice_step(bounds.width / divisions), nice_step(bounds.height / divisions)


def _axis_ticks(lo: float, hi: float, step: float) -> np.ndarray:
    start = math.floor(lo / step) * step
    count = math.floor((hi - start) / step) + 1
    ticks = start + np.arange(max(count, 0), dtype=np.float64) * step
    return ticks[ticks <= hi]


def grid_lines(
    bounds: Bounds, divisions: int = GRID_MAJOR_DIVISIONS
) -> tuple[np.ndarray, np.ndarray]:
    """World x positions of vertical lines and y positions of horizontal lines.

    Each axis starts at the bounds' minimum floored to a step multiple
    and steps while the value stays ``<=`` the maximum.
    """
    step_x, step_y = grid_steps(bounds, divisions)
    return (
        _axis_ticks(bounds.min_x, bounds.max_x, step_x),
        _axis_ticks(bounds.min_y, bounds.max_y, step_y),
    )


def grid_intersections(
    bounds: Bounds, divisions: int = GRID_MAJOR_DIVISIONS
) -> np.ndarray:
    """Every grid intersection as an ``(N, 2)`` array, x-major order."""
    xs, ys = grid_lines(bounds, divisions)
    gx, gy = np.meshgrid(xs, ys, indexing="ij")
    return np.column_stack((gx.ravel(), gy.ravel()))
