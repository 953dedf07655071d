# -*- coding: utf-8 -*-
"""Stakeout guidance and acceptance.

Supported targets:

- :class:`PointTarget` -- walk to a design point
- :class:`LineTarget` -- chain and offset along a straight line
- :class:`AlignmentTarget` -- chain / offset / level along a road
- :class:`EntityTarget` -- nearest point of any CAD entity
"""

from stakeout_lib.stakeout.alignment import Alignment
from stakeout_lib.stakeout.alignment import AlignmentProjection
from stakeout_lib.stakeout.alignment import AlignmentStation
from stakeout_lib.stakeout.alignment import compute_point_from_chainage_offset
from stakeout_lib.stakeout.alignment import generate_line_stations
from stakeout_lib.stakeout.alignment import generate_synthetic_alignment
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
from stakeout_lib.stakeout.projector import EntityProjection
from stakeout_lib.stakeout.projector import project_onto_entity
from stakeout_lib.stakeout.state import RecordSink
from stakeout_lib.stakeout.state import StakeoutInputs
from stakeout_lib.stakeout.state import evaluate_target
from stakeout_lib.stakeout.state import recompute
from stakeout_lib.stakeout.state import save
from stakeout_lib.stakeout.tolerance import ToleranceSettings
from stakeout_lib.stakeout.tolerance import within

__all__ = [
    "Alignment",
    "AlignmentProjection",
    "AlignmentStation",
    "AlignmentTarget",
    "EntityProjection",
    "EntityTarget",
    "LineTarget",
    "PointTarget",
    "RecordSink",
    "StakeoutInputs",
    "StakeoutRecord",
    "StakeoutResult",
    "StakeoutState",
    "StakeoutTarget",
    "ToleranceSettings",
    "compute_point_from_chainage_offset",
    "evaluate_target",
    "generate_line_stations",
    "generate_synthetic_alignment",
    "nearest_station",
    "project_onto_alignment",
    "project_onto_entity",
    "recompute",
    "save",
    "within",
]
