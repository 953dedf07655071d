# -*- coding: utf-8 -*-
"""Angle helpers shared by the nearest-point engine and hit-testing.

Arc angles are measured in degrees, counter-clockwise from the +x (east)
axis.  Survey bearings (see :mod:`stakeout_lib.cogo`) are a different
convention: clockwise from north.
"""

from __future__ import annotations

import math


def normalize_deg(angle: float) -> float:
    """Wrap *angle* into ``[0, 360)``."""
    value = angle % 360.0
    # -1e-17 % 360 == 360.0 in floating point
    return 0.0 if value >= 360.0 else value


def sweep_deg(start: float, end: float) -> float:
    """Counter-clockwise sweep from *start* to *end* in ``(0, 360]``.

    A zero sweep (``start == end`` after normalisation) is a full circle.
    """
    sweep = normalize_deg(end) - normalize_deg(start)
    if sweep < 0:
        sweep += 360.0
    return 360.0 if sweep == 0.0 else sweep


def angle_in_sweep(angle: float, start: float, end: float) -> bool:
    """Whether *angle* lies on the counter-clockwise sweep ``start -> end``.

    Handles the wraparound case (``start > end``, e.g. 350° -> 10°).
    Endpoints are inclusive; ``start == end`` contains every angle.
    """
    a = normalize_deg(angle)
    s = normalize_deg(start)
    e = normalize_deg(end)
    if s == e:
        return True
    if s <= e:
        return s <= a <= e
    return a >= s or a <= e


def angular_distance(a: float, b: float) -> float:
    """Smallest absolute difference between two angles, in ``[0, 180]``."""
    delta = abs(normalize_deg(a) - normalize_deg(b))
    return min(delta, 360.0 - delta)


def polar_angle_deg(dx: float, dy: float) -> float:
    """Counter-clockwise angle of the vector ``(dx, dy)`` from +x, in ``[0, 360)``."""
    return normalize_deg(math.degrees(math.atan2(dy, dx)))
