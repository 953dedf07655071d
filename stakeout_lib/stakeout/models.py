# -*- coding: utf-8 -*-
"""Stakeout targets, per-tick results and saved records.

Targets form a closed union discriminated by ``kind``:

- :class:`PointTarget` -- a design point (e, n, optional elevation)
- :class:`LineTarget` -- a straight line staked at a station interval
- :class:`AlignmentTarget` -- a road alignment with a target chain/offset
- :class:`EntityTarget` -- any CAD entity
"""

from __future__ import annotations

from typing import Annotated
from typing import Literal
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from stakeout_lib.constants import DEFAULT_LINE_STATION_INTERVAL_M
from stakeout_lib.enums import FixType
from stakeout_lib.enums import StakeoutStatus
from stakeout_lib.enums import TargetKind
from stakeout_lib.geometry.models import CadEntity
from stakeout_lib.geometry.models import Point
from stakeout_lib.gnss import GnssObservation
from stakeout_lib.stakeout.alignment import Alignment
from stakeout_lib.stakeout.alignment import AlignmentStation

# ---------------------------------------------------------------------------
# Targets
# ---------------------------------------------------------------------------


class _TargetBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PointTarget(_TargetBase):
    """A design point."""

    kind: Literal["point"] = "point"
    name: str | None = None
    e: float
    n: float
    elevation: float | None = None


class LineTarget(_TargetBase):
    """A straight line from ``start`` to ``end``, staked every ``interval_m``."""

    kind: Literal["line"] = "line"
    name: str = "LINE"
    start: Point
    end: Point
    interval_m: Annotated[float, Field(gt=0)] = DEFAULT_LINE_STATION_INTERVAL_M


class AlignmentTarget(_TargetBase):
    """A road alignment and the chain / offset to set out.

    Without ``target_chain_m`` only the current chain and offset are
    reported; nothing can be within tolerance.
    """

    kind: Literal["alignment"] = "alignment"
    name: str = "ROAD"
    alignment: Alignment
    target_chain_m: float | None = None
    target_offset_m: float = 0.0


class EntityTarget(_TargetBase):
    """Any CAD entity; the nearest point on it is the target."""

    kind: Literal["entity"] = "entity"
    name: str | None = None
    entity: CadEntity


StakeoutTarget = Annotated[
    Union[PointTarget, LineTarget, AlignmentTarget, EntityTarget],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class StakeoutResult(BaseModel):
    """Guidance for one tick, recomputed from scratch.

    Deltas are ``target - current``.  ``within_*`` flags are ``None`` when
    the axis is not checked for the target kind; ``within_all`` is true
    when every checked axis passes.
    """

    model_config = ConfigDict(frozen=True)

    target_kind: TargetKind

    # Along-path guidance (line / alignment)
    chain_m: float | None = None
    offset_m: float | None = None
    nearest_station: AlignmentStation | None = None
    delta_chain_m: float | None = None
    delta_lateral_m: float | None = None
    length_m: float | None = None
    bearing_to_end_deg: float | None = None

    # Planar guidance (point / entity / design point)
    target_e: float | None = None
    target_n: float | None = None
    delta_e: float | None = None
    delta_n: float | None = None
    horizontal_distance_m: float | None = None
    bearing_deg: float | None = None

    # Height
    design_elevation: float | None = None
    vertical_delta_m: float | None = None

    within_horizontal: bool | None = None
    within_vertical: bool | None = None
    within_lateral: bool | None = None
    within_chain: bool | None = None
    within_all: bool = False


class StakeoutState(BaseModel):
    """Everything the stakeout screen shows for the current tick."""

    model_config = ConfigDict(frozen=True)

    status: StakeoutStatus = StakeoutStatus.NO_FIX
    observation: GnssObservation | None = None
    target: StakeoutTarget | None = None
    current_e: float | None = None
    current_n: float | None = None
    current_elevation: float | None = None
    result: StakeoutResult | None = None
    saved: bool = False

    @property
    def within_all(self) -> bool:
        return self.result is not None and self.result.within_all


class StakeoutRecord(BaseModel):
    """A staked point handed to the persistence layer."""

    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    latitude: float
    longitude: float
    elevation: float | None = None
    easting: float
    northing: float
    hrms: float | None = None
    vrms: float | None = None
    pdop: float | None = None
    satellites: int = 0
    fix_type: FixType
    timestamp_ms: int
