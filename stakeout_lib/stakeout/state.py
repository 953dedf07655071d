# -*- coding: utf-8 -*-
"""Stakeout acceptance state machine.

``NO_FIX -> NO_TARGET -> OUT_OF_TOLERANCE <-> WITHIN_TOLERANCE -> SAVED``

:func:`recompute` rebuilds the whole state from the current inputs on
every tick; the only thing carried over from the previous state is the
``saved`` marker, and only while the target stays the same.
:func:`save` is the user action that turns a within-tolerance state into
a persisted record.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from typing import Protocol

from stakeout_lib.cogo import azimuth_deg
from stakeout_lib.cogo import bearing_deg
from stakeout_lib.coords.transform import CoordinateTransformer
from stakeout_lib.coords.transform import to_local
from stakeout_lib.enums import StakeoutStatus
from stakeout_lib.enums import TargetKind
from stakeout_lib.geometry.models import Point
from stakeout_lib.gnss import GnssObservation
from stakeout_lib.stakeout.alignment import Alignment
from stakeout_lib.stakeout.alignment import compute_point_from_chainage_offset
from stakeout_lib.stakeout.alignment import generate_line_stations
from stakeout_lib.stakeout.alignment import nearest_station
from stakeout_lib.stakeout.alignment import project_onto_alignment
from stakeout_lib.stakeout.models import AlignmentTarget
from stakeout_lib.stakeout.models import EntityTarget
from stakeout_lib.stakeout.models import LineTarget
from stakeout_lib.stakeout.models import PointTarget
from stakeout_lib.stakeout.models import StakeoutRecord
from stakeout_lib.stakeout.models import StakeoutResult
from stakeout_lib.stakeout.models import StakeoutState
from stakeout_lib.stakeout.models import StakeoutTarget
from stakeout_lib.stakeout.projector import project_onto_entity
from stakeout_lib.stakeout.tolerance import ToleranceSettings
from stakeout_lib.stakeout.tolerance import within

logger = logging.getLogger(__name__)


class RecordSink(Protocol):
    """Persistence boundary receiving saved stakeout records."""

    def __call__(self, record: StakeoutRecord) -> None: ...


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class StakeoutInputs:
    """Inputs of one tick.

    Attributes:
        observation: Latest GNSS fix, if any
        target: What is being staked out, if anything
        tolerances: Acceptance tolerances
        transformer: Geodetic -> local grid transform (linear fallback if None)
    """

    observation: GnssObservation | None = None
    target: StakeoutTarget | None = None
    tolerances: ToleranceSettings = field(default_factory=ToleranceSettings)
    transformer: CoordinateTransformer | None = None


# ---------------------------------------------------------------------------
# Per-target evaluation
# ---------------------------------------------------------------------------


def evaluate_point(
    target: PointTarget,
    e: float,
    n: float,
    elevation: float | None,
    tolerances: ToleranceSettings,
) -> StakeoutResult:
    de = target.e - e
    dn = target.n - n
    horizontal = math.hypot(de, dn)
    vertical = (
        target.elevation - elevation
        if target.elevation is not None and elevation is not None
        else None
    )
    within_h = within(horizontal, tolerances.horizontal_m)
    within_v = within(vertical, tolerances.vertical_m)
    return StakeoutResult(
        target_kind=TargetKind.POINT,
        target_e=target.e,
        target_n=target.n,
        delta_e=de,
        delta_n=dn,
        horizontal_distance_m=horizontal,
        bearing_deg=bearing_deg(de, dn),
        design_elevation=target.elevation,
        vertical_delta_m=vertical,
        within_horizontal=within_h,
        within_vertical=within_v,
        within_all=within_h and within_v,
    )


def evaluate_line(
    target: LineTarget,
    e: float,
    n: float,
    tolerances: ToleranceSettings,
) -> StakeoutResult:
    length = target.start.distance_to(target.end)
    here = Point(e, n)
    bearing_line = azimuth_deg(target.start, target.end)
    bearing_to_end = azimuth_deg(here, target.end)

    # Chain and offset come from the whole line; the last station can
    # fall short of the end point
    axis = Alignment.from_vertices((target.start, target.end))
    projection = project_onto_alignment(axis, e, n)
    if projection is None:
        # Degenerate line: only the distance to its single point is meaningful
        return StakeoutResult(
            target_kind=TargetKind.LINE,
            length_m=length,
            bearing_deg=bearing_line,
            bearing_to_end_deg=bearing_to_end,
            horizontal_distance_m=here.distance_to(target.start),
            within_lateral=False,
            within_chain=False,
        )

    stations = generate_line_stations(target.start, target.end, target.interval_m)
    station = nearest_station(stations.stations, projection.chain_m, projection.offset_m)
    within_lat = within(projection.offset_m, tolerances.lateral_m)
    within_ch = within(station.chain_m - projection.chain_m, tolerances.chain_m)
    return StakeoutResult(
        target_kind=TargetKind.LINE,
        chain_m=projection.chain_m,
        offset_m=projection.offset_m,
        nearest_station=station,
        length_m=length,
        target_e=station.e,
        target_n=station.n,
        delta_e=station.e - e,
        delta_n=station.n - n,
        horizontal_distance_m=math.hypot(station.e - e, station.n - n),
        bearing_deg=bearing_line,
        bearing_to_end_deg=bearing_to_end,
        within_lateral=within_lat,
        within_chain=within_ch,
        within_all=within_lat and within_ch,
    )


def evaluate_alignment(
    target: AlignmentTarget,
    e: float,
    n: float,
    elevation: float | None,
    tolerances: ToleranceSettings,
) -> StakeoutResult:
    projection = project_onto_alignment(target.alignment, e, n)
    chain = projection.chain_m if projection is not None else None
    lateral = projection.offset_m if projection is not None else None

    design = None
    if target.target_chain_m is not None:
        design = compute_point_from_chainage_offset(
            target.alignment, target.target_chain_m, target.target_offset_m
        )

    target_e = target_n = design_z = None
    if design is not None:
        target_e, target_n, design_z = design

    d_chain = (
        target.target_chain_m - chain
        if target.target_chain_m is not None and chain is not None
        else None
    )
    d_lateral = target.target_offset_m - lateral if lateral is not None else None
    d_z = design_z - elevation if design_z is not None and elevation is not None else None

    de = dn = horizontal = bearing = None
    if target_e is not None and target_n is not None:
        de = target_e - e
        dn = target_n - n
        horizontal = math.hypot(de, dn)
        bearing = bearing_deg(de, dn)

    within_ch = within(d_chain, tolerances.road_chain_m)
    within_lat = within(d_lateral, tolerances.road_lateral_m)
    within_v = within(d_z, tolerances.road_elevation_m)
    return StakeoutResult(
        target_kind=TargetKind.ALIGNMENT,
        chain_m=chain,
        offset_m=lateral,
        nearest_station=projection.nearest_station if projection else None,
        length_m=target.alignment.total_length,
        delta_chain_m=d_chain,
        delta_lateral_m=d_lateral,
        target_e=target_e,
        target_n=target_n,
        delta_e=de,
        delta_n=dn,
        horizontal_distance_m=horizontal,
        bearing_deg=bearing,
        design_elevation=design_z,
        vertical_delta_m=d_z,
        within_chain=within_ch,
        within_lateral=within_lat,
        within_vertical=within_v,
        within_all=within_ch and within_lat and within_v,
    )


def evaluate_entity(
    target: EntityTarget,
    e: float,
    n: float,
    tolerances: ToleranceSettings,
) -> StakeoutResult:
    projection = project_onto_entity(target.entity, e, n)
    within_h = within(projection.distance, tolerances.entity_distance_m)
    return StakeoutResult(
        target_kind=TargetKind.ENTITY,
        target_e=projection.nearest.x,
        target_n=projection.nearest.y,
        delta_e=projection.delta_e,
        delta_n=projection.delta_n,
        horizontal_distance_m=projection.distance,
        bearing_deg=projection.bearing_deg,
        within_horizontal=within_h,
        within_all=within_h,
    )


def evaluate_target(
    target: StakeoutTarget,
    e: float,
    n: float,
    elevation: float | None,
    tolerances: ToleranceSettings,
) -> StakeoutResult:
    """Guidance from ``(e, n, elevation)`` to *target*."""
    match target:
        case PointTarget():
            return evaluate_point(target, e, n, elevation, tolerances)
        case LineTarget():
            return evaluate_line(target, e, n, tolerances)
        case AlignmentTarget():
            return evaluate_alignment(target, e, n, elevation, tolerances)
        case EntityTarget():
            return evaluate_entity(target, e, n, tolerances)
        case _:
            raise TypeError(f"Unsupported stakeout target: {type(target).__name__}")


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


def recompute(state: StakeoutState, inputs: StakeoutInputs) -> StakeoutState:
    """New state for *inputs*.

    Only the ``saved`` marker survives from *state*, and only when the
    target is unchanged.
    """
    obs = inputs.observation
    saved = state.saved and state.target == inputs.target

    if obs is None or not obs.has_position:
        return StakeoutState(
            status=StakeoutStatus.NO_FIX,
            observation=obs,
            target=inputs.target,
            saved=saved,
        )

    e, n = to_local(inputs.transformer, obs.lat_deg, obs.lon_deg)
    elevation = obs.ellipsoidal_height

    if inputs.target is None:
        return StakeoutState(
            status=StakeoutStatus.NO_TARGET,
            observation=obs,
            current_e=e,
            current_n=n,
            current_elevation=elevation,
        )

    result = evaluate_target(inputs.target, e, n, elevation, inputs.tolerances)

    if saved:
        status = StakeoutStatus.SAVED
    elif result.within_all:
        status = StakeoutStatus.WITHIN_TOLERANCE
    else:
        status = StakeoutStatus.OUT_OF_TOLERANCE

    logger.debug(
        "Stakeout tick: %s at (%.3f, %.3f) -> %s",
        inputs.target.kind,
        e,
        n,
        status.value,
    )
    return StakeoutState(
        status=status,
        observation=obs,
        target=inputs.target,
        current_e=e,
        current_n=n,
        current_elevation=elevation,
        result=result,
        saved=saved,
    )


def _record_identity(
    target: StakeoutTarget, result: StakeoutResult, now_ms: int
) -> tuple[str, str]:
    match target:
        case PointTarget(name=name):
            return f"{name or 'STK'}_STK", "STK"
        case LineTarget(name=name):
            return f"{name}_{result.chain_m or 0.0:.1f}", "LINE_STK"
        case AlignmentTarget(target_chain_m=chain):
            suffix = f"{chain:.0f}" if chain is not None else str(now_ms)[-4:]
            return f"RD_{suffix}", "ROAD_STK"
        case EntityTarget():
            return f"CAD_{str(now_ms)[-5:]}", "CAD_STK"
        case _:
            raise TypeError(f"Unsupported stakeout target: {type(target).__name__}")


def save(
    state: StakeoutState,
    sink: RecordSink,
    clock: Callable[[], int] = _now_ms,
) -> StakeoutState:
    """Persist the current position when it is within tolerance.

    Anything but ``WITHIN_TOLERANCE`` (including an already saved state)
    returns *state* unchanged and records nothing.
    """
    if state.status != StakeoutStatus.WITHIN_TOLERANCE:
        logger.debug("Not saving: state is %s", state.status.value)
        return state

    obs = state.observation
    if obs is None or state.target is None or state.result is None:
        logger.warning("Not saving: incomplete state flagged within tolerance")
        return state

    now_ms = clock()
    name, code = _record_identity(state.target, state.result, now_ms)
    record = StakeoutRecord(
        name=name,
        code=code,
        latitude=obs.lat_deg,
        longitude=obs.lon_deg,
        elevation=obs.ellipsoidal_height,
        easting=state.current_e,
        northing=state.current_n,
        hrms=obs.hrms,
        vrms=obs.vrms,
        pdop=obs.pdop,
        satellites=obs.satellites_in_use,
        fix_type=obs.fix_type,
        timestamp_ms=now_ms,
    )
    sink(record)
    logger.info("Saved stakeout record %s (%s)", record.name, record.code)
    return state.model_copy(update={"status": StakeoutStatus.SAVED, "saved": True})
