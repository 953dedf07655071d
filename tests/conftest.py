# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

Provides small, hand-checkable drawings shared by the geometry, canvas
and stakeout tests.
"""

from __future__ import annotations

import logging

import pytest

from stakeout_lib.geometry.models import Bounds
from stakeout_lib.geometry.models import CadArc
from stakeout_lib.geometry.models import CadCircle
from stakeout_lib.geometry.models import CadLine
from stakeout_lib.geometry.models import CadPoint
from stakeout_lib.geometry.models import CadPolygon
from stakeout_lib.geometry.models import CadPolyline
from stakeout_lib.geometry.models import CadText
from stakeout_lib.geometry.models import Point
from stakeout_lib.stakeout.alignment import Alignment

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Geometry Fixtures
# =============================================================================

SQUARE_10 = (Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10))
HOLE_2 = (Point(4, 4), Point(6, 4), Point(6, 6), Point(4, 6))


@pytest.fixture
def square_ring() -> tuple[Point, ...]:
    """Counter-clockwise 10 x 10 square anchored at the origin."""
    return SQUARE_10


@pytest.fixture
def square_polygon() -> CadPolygon:
    return CadPolygon(rings=(SQUARE_10,))


@pytest.fixture
def holed_polygon() -> CadPolygon:
    """10 x 10 square with a centered 2 x 2 hole (net area 96)."""
    return CadPolygon(rings=(SQUARE_10, HOLE_2))


@pytest.fixture
def drawing() -> list:
    """One entity of every kind, spread over roughly (-5, -5) - (120, 60)."""
    return [
        CadPoint(position=Point(0, 0), layer="PTS"),
        CadLine(start=Point(0, 0), end=Point(100, 0), layer="ROAD"),
        CadPolyline(
            points=(Point(0, 20), Point(50, 20), Point(50, 40)), layer="KERB"
        ),
        CadPolygon(rings=(SQUARE_10,), layer="BLDG"),
        CadText(position=Point(30, 30), text="A1", layer="TXT"),
        CadCircle(center=Point(100, 50), radius=5, layer="MH"),
        CadArc(
            center=Point(-5, -5),
            radius=2,
            start_angle_deg=0,
            end_angle_deg=90,
            layer="ARC",
        ),
    ]


# =============================================================================
# Stakeout Fixtures
# =============================================================================


@pytest.fixture
def east_alignment() -> Alignment:
    """Straight eastbound alignment, 100 m long, stations every 10 m."""
    return Alignment.from_vertices([Point(float(x), 0.0) for x in range(0, 101, 10)])


@pytest.fixture
def l_alignment() -> Alignment:
    """East for 100 m then north for 100 m, with a design grade."""
    return Alignment.from_vertices(
        [Point(0, 0), Point(100, 0), Point(100, 100)],
        elevations=[10.0, 11.0, 12.0],
    )


@pytest.fixture
def unit_bounds_viewport_args() -> tuple[Bounds, float, float]:
    """A 100 x 100 m world on a 1000 x 1000 px canvas (10 px per metre)."""
    return Bounds(0, 0, 100, 100), 1000.0, 1000.0
