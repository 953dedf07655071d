# -*- coding: utf-8 -*-
"""Tests for tolerances, the stakeout state machine and saving."""

import logging

import pytest
from pydantic import ValidationError

from stakeout_lib.constants import FALLBACK_METERS_PER_DEGREE
from stakeout_lib.coords.transform import CoordinateTransformer
from stakeout_lib.enums import FixType
from stakeout_lib.enums import StakeoutStatus
from stakeout_lib.enums import TargetKind
from stakeout_lib.geometry.models import CadLine
from stakeout_lib.geometry.models import Point
from stakeout_lib.gnss import GnssObservation
from stakeout_lib.stakeout.models import AlignmentTarget
from stakeout_lib.stakeout.models import EntityTarget
from stakeout_lib.stakeout.models import LineTarget
from stakeout_lib.stakeout.models import PointTarget
from stakeout_lib.stakeout.models import StakeoutState
from stakeout_lib.stakeout.state import StakeoutInputs
from stakeout_lib.stakeout.state import recompute
from stakeout_lib.stakeout.state import save
from stakeout_lib.stakeout.tolerance import ToleranceSettings
from stakeout_lib.stakeout.tolerance import within

CLOCK_MS = 1_700_000_012_345

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _obs(e: float, n: float, h: float | None = None) -> GnssObservation:
    """RTK fix that the linear fallback maps onto local ``(e, n)``."""
    return GnssObservation(
        epoch_ms=CLOCK_MS,
        lat_deg=n / FALLBACK_METERS_PER_DEGREE,
        lon_deg=e / FALLBACK_METERS_PER_DEGREE,
        ellipsoidal_height=h,
        fix_type=FixType.RTK_FIX,
        satellites_in_use=18,
        hrms=0.012,
        vrms=0.021,
        pdop=1.3,
    )


def _tick(observation, target, state=None, **kwargs) -> StakeoutState:
    return recompute(
        state if state is not None else StakeoutState(),
        StakeoutInputs(observation=observation, target=target, **kwargs),
    )


class _RecordingSink:
    def __init__(self):
        self.records = []

    def __call__(self, record):
        self.records.append(record)


class _ShiftTransformer(CoordinateTransformer):
    """Maps degrees to ``(lon * 1000 + 5, lat * 1000 + 7)``."""

    @property
    def name(self) -> str:
        return "shift"

    def forward(self, lat_deg, lon_deg):
        return lon_deg * 1000 + 5, lat_deg * 1000 + 7

    def inverse(self, easting, northing):
        return (northing - 7) / 1000, (easting - 5) / 1000


POINT = PointTarget(name="P1", e=200.05, n=100.0, elevation=50.0)
LINE = LineTarget(name="L1", start=Point(0, 0), end=Point(100, 0), interval_m=10)
ENTITY = EntityTarget(entity=CadLine(start=Point(0, 0), end=Point(100, 0)))


def _road(l_alignment, chain=50.0, offset=2.0) -> AlignmentTarget:
    return AlignmentTarget(
        alignment=l_alignment, target_chain_m=chain, target_offset_m=offset
    )


# ---------------------------------------------------------------------------
# Tolerances
# ---------------------------------------------------------------------------


class TestToleranceSettings:
    """Tests for tolerance validation and updates."""

    def test_defaults(self):
        tol = ToleranceSettings()
        assert tol.horizontal_m == 0.10
        assert tol.vertical_m == 0.05
        assert tol.lateral_m == 0.20
        assert tol.chain_m == 0.50
        assert tol.road_chain_m == 0.20
        assert tol.road_lateral_m == 0.10
        assert tol.road_elevation_m == 0.05
        assert tol.entity_distance_m == 0.05

    @pytest.mark.parametrize("value", [0.0, -0.1])
    def test_construction_rejects_non_positive(self, value):
        with pytest.raises(ValidationError):
            ToleranceSettings(horizontal_m=value)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            ToleranceSettings(sideways_m=1.0)

    def test_updated_ignores_non_positive(self, caplog):
        tol = ToleranceSettings()
        with caplog.at_level(logging.WARNING):
            new = tol.updated(horizontal_m=0.02, vertical_m=0.0, chain_m=-1)
        assert new.horizontal_m == 0.02
        assert new.vertical_m == 0.05
        assert new.chain_m == 0.50
        assert tol.horizontal_m == 0.10
        assert "vertical_m" in caplog.text
        assert "chain_m" in caplog.text

    def test_updated_unknown_name(self):
        with pytest.raises(KeyError):
            ToleranceSettings().updated(sideways_m=1.0)

    def test_within(self):
        assert within(0.1, 0.1)
        assert within(-0.1, 0.1)
        assert not within(0.1000001, 0.1)
        assert not within(None, 0.1)


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


class TestFixAndTarget:
    """Tests for the NO_FIX and NO_TARGET states."""

    def test_no_observation(self):
        state = _tick(None, POINT)
        assert state.status == StakeoutStatus.NO_FIX
        assert state.result is None

    def test_observation_without_position(self):
        state = _tick(GnssObservation(fix_type=FixType.NO_FIX), POINT)
        assert state.status == StakeoutStatus.NO_FIX

    def test_no_target(self):
        state = _tick(_obs(200, 100), None)
        assert state.status == StakeoutStatus.NO_TARGET
        assert state.current_e == pytest.approx(200.0)
        assert state.current_n == pytest.approx(100.0)
        assert state.result is None
        assert not state.within_all

    def test_uses_transformer(self):
        obs = GnssObservation(lat_deg=0.1, lon_deg=0.2)
        state = _tick(obs, None, transformer=_ShiftTransformer())
        assert state.current_e == pytest.approx(205.0)
        assert state.current_n == pytest.approx(107.0)


class TestPointStakeout:
    """Tests for point targets."""

    def test_within_tolerance(self):
        state = _tick(_obs(200, 100, 50.02), POINT)
        result = state.result
        assert state.status == StakeoutStatus.WITHIN_TOLERANCE
        assert result.target_kind == TargetKind.POINT
        assert result.delta_e == pytest.approx(0.05)
        assert result.delta_n == pytest.approx(0.0, abs=1e-6)
        assert result.horizontal_distance_m == pytest.approx(0.05)
        assert result.bearing_deg == pytest.approx(90.0, abs=1e-3)
        assert result.vertical_delta_m == pytest.approx(-0.02)
        assert result.within_horizontal
        assert result.within_vertical
        assert state.within_all

    def test_too_far(self):
        state = _tick(_obs(199, 100, 50.0), POINT)
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE
        assert not state.result.within_horizontal
        assert state.result.within_vertical
        assert state.result.bearing_deg == pytest.approx(90.0, abs=1e-3)

    def test_unknown_height_fails_vertical(self):
        state = _tick(_obs(200, 100), POINT)
        assert state.result.within_horizontal
        assert state.result.vertical_delta_m is None
        assert state.result.within_vertical is False
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE

    def test_target_without_elevation(self):
        target = PointTarget(e=200.0, n=100.0)
        state = _tick(_obs(200, 100, 12.0), target)
        assert state.result.design_elevation is None
        assert state.result.within_vertical is False

    def test_nothing_carried_between_ticks(self):
        first = _tick(_obs(199, 100, 50.0), POINT)
        second = _tick(_obs(200, 100, 50.0), POINT, state=first)
        assert second.status == StakeoutStatus.WITHIN_TOLERANCE
        assert second.result.horizontal_distance_m == pytest.approx(0.05)


class TestLineStakeout:
    """Tests for straight line targets."""

    def test_on_station(self):
        state = _tick(_obs(50.1, 0.05), LINE)
        result = state.result
        assert result.target_kind == TargetKind.LINE
        assert result.chain_m == pytest.approx(50.1)
        assert result.offset_m == pytest.approx(0.05)
        assert result.nearest_station.chain_m == pytest.approx(50.0)
        assert result.length_m == pytest.approx(100.0)
        assert result.bearing_deg == pytest.approx(90.0)
        assert result.within_lateral
        assert result.within_chain
        assert state.status == StakeoutStatus.WITHIN_TOLERANCE

    def test_between_stations(self):
        state = _tick(_obs(55, 0), LINE)
        assert state.result.nearest_station.chain_m == pytest.approx(50.0)
        assert state.result.within_lateral
        assert not state.result.within_chain
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE

    def test_off_line(self):
        state = _tick(_obs(50, -1), LINE)
        assert state.result.offset_m == pytest.approx(-1.0)
        assert not state.result.within_lateral

    def test_bearing_to_end(self):
        state = _tick(_obs(50, -50), LINE)
        assert state.result.bearing_to_end_deg == pytest.approx(45.0)

    def test_partial_last_interval(self):
        target = LineTarget(start=Point(0, 0), end=Point(25, 0), interval_m=10)
        state = _tick(_obs(24, 0), target)
        assert state.result.chain_m == pytest.approx(24.0)
        assert state.result.nearest_station.chain_m == pytest.approx(20.0)
        assert not state.result.within_chain
        assert not state.result.within_all
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE

    def test_past_end_clamps_to_line_length(self):
        target = LineTarget(start=Point(0, 0), end=Point(25, 0), interval_m=10)
        state = _tick(_obs(25.3, 0), target)
        assert state.result.chain_m == pytest.approx(25.0)
        assert not state.result.within_chain

    def test_shorter_than_interval(self):
        target = LineTarget(start=Point(0, 0), end=Point(5, 0), interval_m=10)
        state = _tick(_obs(2.5, 0.1), target)
        assert state.result.chain_m == pytest.approx(2.5)
        assert state.result.offset_m == pytest.approx(0.1)
        assert state.result.nearest_station.chain_m == 0.0
        assert state.result.within_lateral
        assert not state.result.within_chain

    def test_shorter_than_interval_near_start(self):
        target = LineTarget(start=Point(0, 0), end=Point(5, 0), interval_m=10)
        state = _tick(_obs(0.3, -0.1), target)
        assert state.result.chain_m == pytest.approx(0.3)
        assert state.result.offset_m == pytest.approx(-0.1)
        assert state.status == StakeoutStatus.WITHIN_TOLERANCE

    def test_degenerate_line(self):
        target = LineTarget(start=Point(5, 5), end=Point(5, 5))
        state = _tick(_obs(8, 9), target)
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE
        assert state.result.chain_m is None
        assert state.result.horizontal_distance_m == pytest.approx(5.0)


class TestAlignmentStakeout:
    """Tests for road alignment targets."""

    def test_within_tolerance(self, l_alignment):
        state = _tick(_obs(50.05, 2.0, 10.52), _road(l_alignment))
        result = state.result
        assert result.target_kind == TargetKind.ALIGNMENT
        assert result.chain_m == pytest.approx(50.05)
        assert result.offset_m == pytest.approx(2.0)
        assert result.delta_chain_m == pytest.approx(-0.05)
        assert result.delta_lateral_m == pytest.approx(0.0, abs=1e-6)
        assert result.design_elevation == pytest.approx(10.5)
        assert result.vertical_delta_m == pytest.approx(-0.02)
        assert (result.target_e, result.target_n) == pytest.approx((50, 2))
        assert state.status == StakeoutStatus.WITHIN_TOLERANCE

    def test_level_out_of_tolerance(self, l_alignment):
        state = _tick(_obs(50.0, 2.0, 10.7), _road(l_alignment))
        assert state.result.within_chain
        assert state.result.within_lateral
        assert not state.result.within_vertical
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE

    def test_without_target_chain(self, l_alignment):
        target = AlignmentTarget(alignment=l_alignment)
        state = _tick(_obs(50.0, 0.0, 10.5), target)
        assert state.result.chain_m == pytest.approx(50.0)
        assert state.result.delta_chain_m is None
        assert state.result.target_e is None
        assert not state.result.within_all
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE

    def test_unknown_height(self, l_alignment):
        state = _tick(_obs(50.0, 2.0), _road(l_alignment))
        assert state.result.vertical_delta_m is None
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE


class TestEntityStakeout:
    """Tests for CAD entity targets."""

    def test_within_tolerance(self):
        state = _tick(_obs(30, 0.03), ENTITY)
        result = state.result
        assert result.target_kind == TargetKind.ENTITY
        assert (result.target_e, result.target_n) == pytest.approx((30, 0))
        assert result.horizontal_distance_m == pytest.approx(0.03)
        assert result.bearing_deg == pytest.approx(180.0)
        assert state.status == StakeoutStatus.WITHIN_TOLERANCE

    def test_out_of_tolerance(self):
        state = _tick(_obs(30, 0.2), ENTITY)
        assert state.status == StakeoutStatus.OUT_OF_TOLERANCE

    def test_custom_tolerance(self):
        tolerances = ToleranceSettings(entity_distance_m=0.5)
        state = _tick(_obs(30, 0.2), ENTITY, tolerances=tolerances)
        assert state.status == StakeoutStatus.WITHIN_TOLERANCE


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------


class TestSave:
    """Tests for saving stakeout records."""

    def test_save_within_tolerance(self):
        sink = _RecordingSink()
        state = _tick(_obs(200, 100, 50.02), POINT)
        saved = save(state, sink, clock=lambda: CLOCK_MS)

        assert saved.status == StakeoutStatus.SAVED
        assert saved.saved
        assert len(sink.records) == 1

        record = sink.records[0]
        assert record.name == "P1_STK"
        assert record.code == "STK"
        assert record.latitude == pytest.approx(100 / FALLBACK_METERS_PER_DEGREE)
        assert record.easting == pytest.approx(200.0)
        assert record.northing == pytest.approx(100.0)
        assert record.elevation == 50.02
        assert record.hrms == 0.012
        assert record.satellites == 18
        assert record.fix_type == FixType.RTK_FIX
        assert record.timestamp_ms == CLOCK_MS

    def test_save_out_of_tolerance_is_noop(self):
        sink = _RecordingSink()
        state = _tick(_obs(150, 100, 50.0), POINT)
        assert save(state, sink) is state
        assert sink.records == []

    def test_save_incomplete_state_is_noop(self):
        sink = _RecordingSink()
        state = StakeoutState(status=StakeoutStatus.WITHIN_TOLERANCE)
        assert save(state, sink) is state
        assert sink.records == []

    def test_save_twice_records_once(self):
        sink = _RecordingSink()
        state = _tick(_obs(200, 100, 50.02), POINT)
        saved = save(state, sink)
        assert save(saved, sink) is saved
        assert len(sink.records) == 1

    def test_saved_marker_kept_for_same_target(self):
        state = save(_tick(_obs(200, 100, 50.02), POINT), _RecordingSink())
        again = _tick(_obs(200.01, 100, 50.02), POINT, state=state)
        assert again.status == StakeoutStatus.SAVED
        # Even when the position drifts out of tolerance
        drifted = _tick(_obs(190, 100, 50.02), POINT, state=again)
        assert drifted.status == StakeoutStatus.SAVED

    def test_saved_marker_cleared_on_new_target(self):
        state = save(_tick(_obs(200, 100, 50.02), POINT), _RecordingSink())
        other = POINT.model_copy(update={"name": "P2"})
        again = _tick(_obs(200, 100, 50.02), other, state=state)
        assert again.status == StakeoutStatus.WITHIN_TOLERANCE
        assert not again.saved

    def test_point_without_name(self):
        sink = _RecordingSink()
        target = PointTarget(e=200.0, n=100.0, elevation=50.0)
        save(_tick(_obs(200, 100, 50.0), target), sink)
        assert sink.records[0].name == "STK_STK"

    def test_line_record_name(self):
        sink = _RecordingSink()
        save(_tick(_obs(50.1, 0.05), LINE), sink)
        assert sink.records[0].name == "L1_50.1"
        assert sink.records[0].code == "LINE_STK"

    def test_road_record_name(self, l_alignment):
        sink = _RecordingSink()
        save(_tick(_obs(50.05, 2.0, 10.52), _road(l_alignment)), sink)
        assert sink.records[0].name == "RD_50"
        assert sink.records[0].code == "ROAD_STK"

    def test_entity_record_name(self):
        sink = _RecordingSink()
        save(_tick(_obs(30, 0.03), ENTITY), sink, clock=lambda: CLOCK_MS)
        assert sink.records[0].name == "CAD_12345"
        assert sink.records[0].code == "CAD_STK"
