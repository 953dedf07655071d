# -*- coding: utf-8 -*-
"""Tests for coordinate geometry helpers."""

import pytest

from stakeout_lib.cogo import angle_at
from stakeout_lib.cogo import azimuth_deg
from stakeout_lib.cogo import bearing_deg
from stakeout_lib.cogo import dms_format
from stakeout_lib.cogo import forward_point
from stakeout_lib.cogo import horizontal_distance
from stakeout_lib.cogo import slope_distance
from stakeout_lib.cogo import slope_ratio
from stakeout_lib.geometry.models import Point


class TestBearings:
    """Tests for grid bearings (clockwise from north)."""

    @pytest.mark.parametrize(
        ("de", "dn", "expected"),
        [(0, 1, 0), (1, 0, 90), (0, -1, 180), (-1, 0, 270), (1, 1, 45), (-1, 1, 315)],
    )
    def test_bearing(self, de, dn, expected):
        assert bearing_deg(de, dn) == pytest.approx(expected)

    def test_azimuth(self):
        assert azimuth_deg(Point(10, 10), Point(10, 0)) == pytest.approx(180.0)

    def test_forward_point(self):
        p = forward_point(Point(100, 100), 10, 90)
        assert p == pytest.approx((110, 100))

    def test_forward_then_azimuth(self):
        origin = Point(5, -3)
        p = forward_point(origin, 25, 123.4)
        assert azimuth_deg(origin, p) == pytest.approx(123.4)
        assert horizontal_distance(origin, p) == pytest.approx(25.0)


class TestDistancesAndAngles:
    """Tests for slope and angle helpers."""

    def test_slope_distance(self):
        assert slope_distance(3, 4) == pytest.approx(5.0)

    def test_slope_ratio(self):
        assert slope_ratio(20, 2) == "1:10.0"
        assert slope_ratio(20, -4) == "1:5.0"
        assert slope_ratio(20, 0) == "-"
        assert slope_ratio(0, 3) == "-"

    def test_angle_at(self):
        assert angle_at(Point(1, 0), Point(0, 0), Point(0, 1)) == pytest.approx(90.0)
        assert angle_at(Point(1, 0), Point(0, 0), Point(-1, 0)) == pytest.approx(180.0)
        assert angle_at(Point(0, 0), Point(0, 0), Point(0, 1)) is None

    def test_dms_format(self):
        assert dms_format(45.5) == "45°30'00.00\""
        assert dms_format(-12.25, seconds_precision=0) == "-12°15'00\""
