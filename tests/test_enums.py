# -*- coding: utf-8 -*-
"""Tests for enums module."""

import pytest

from stakeout_lib.enums import EntityKind
from stakeout_lib.enums import FixType
from stakeout_lib.enums import ProjectionType
from stakeout_lib.enums import StakeoutStatus
from stakeout_lib.geometry.models import CadArc
from stakeout_lib.geometry.models import CadCircle
from stakeout_lib.geometry.models import CadLine
from stakeout_lib.geometry.models import CadPoint
from stakeout_lib.geometry.models import CadPolygon
from stakeout_lib.geometry.models import CadPolyline
from stakeout_lib.geometry.models import CadText


class TestEntityKind:
    """Tests for EntityKind enum."""

    @pytest.mark.parametrize(
        ("model", "kind"),
        [
            (CadPoint, EntityKind.POINT),
            (CadLine, EntityKind.LINE),
            (CadPolyline, EntityKind.POLYLINE),
            (CadPolygon, EntityKind.POLYGON),
            (CadText, EntityKind.TEXT),
            (CadCircle, EntityKind.CIRCLE),
            (CadArc, EntityKind.ARC),
        ],
    )
    def test_matches_model_discriminator(self, model, kind):
        assert model.model_fields["kind"].default == kind.value


class TestFixType:
    """Tests for FixType enum."""

    def test_values(self):
        assert FixType("RTK_FIX") is FixType.RTK_FIX
        assert FixType.SINGLE.value == "SINGLE"

    def test_accuracy_ordering(self):
        levels = [
            FixType.NO_FIX,
            FixType.SINGLE,
            FixType.DGPS,
            FixType.RTK_FLOAT,
            FixType.RTK_FIX,
        ]
        assert [f.accuracy_level for f in levels] == [0, 1, 2, 3, 4]


class TestStakeoutStatus:
    """Tests for StakeoutStatus enum."""

    def test_str_values(self):
        assert StakeoutStatus.WITHIN_TOLERANCE == "within_tolerance"
        assert StakeoutStatus("saved") is StakeoutStatus.SAVED


class TestProjectionType:
    """Tests for ProjectionType enum."""

    def test_values(self):
        assert ProjectionType("UTM") is ProjectionType.UTM
        assert ProjectionType.LAMBERT_CONFORMAL_CONIC_2SP.value == (
            "Lambert_Conformal_Conic_2SP"
        )
