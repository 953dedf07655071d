# -*- coding: utf-8 -*-
"""Per-axis stakeout tolerances."""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from stakeout_lib.constants import DEFAULT_CHAIN_TOLERANCE_M
from stakeout_lib.constants import DEFAULT_ENTITY_DISTANCE_TOLERANCE_M
from stakeout_lib.constants import DEFAULT_HORIZONTAL_TOLERANCE_M
from stakeout_lib.constants import DEFAULT_LATERAL_TOLERANCE_M
from stakeout_lib.constants import DEFAULT_ROAD_CHAIN_TOLERANCE_M
from stakeout_lib.constants import DEFAULT_ROAD_ELEVATION_TOLERANCE_M
from stakeout_lib.constants import DEFAULT_ROAD_LATERAL_TOLERANCE_M
from stakeout_lib.constants import DEFAULT_VERTICAL_TOLERANCE_M

logger = logging.getLogger(__name__)

PositiveMeters = Annotated[float, Field(gt=0)]


class ToleranceSettings(BaseModel):
    """Acceptance tolerances in metres, one per checked axis.

    Attributes:
        horizontal_m: Point stakeout, horizontal distance
        vertical_m: Point stakeout, height difference
        lateral_m: Line stakeout, offset from the line
        chain_m: Line stakeout, chain distance to the nearest station
        road_chain_m: Road stakeout, chain distance to the target
        road_lateral_m: Road stakeout, offset from the target offset
        road_elevation_m: Road stakeout, height difference to design
        entity_distance_m: CAD entity stakeout, distance to the entity
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    horizontal_m: PositiveMeters = DEFAULT_HORIZONTAL_TOLERANCE_M
    vertical_m: PositiveMeters = DEFAULT_VERTICAL_TOLERANCE_M
    lateral_m: PositiveMeters = DEFAULT_LATERAL_TOLERANCE_M
    chain_m: PositiveMeters = DEFAULT_CHAIN_TOLERANCE_M
    road_chain_m: PositiveMeters = DEFAULT_ROAD_CHAIN_TOLERANCE_M
    road_lateral_m: PositiveMeters = DEFAULT_ROAD_LATERAL_TOLERANCE_M
    road_elevation_m: PositiveMeters = DEFAULT_ROAD_ELEVATION_TOLERANCE_M
    entity_distance_m: PositiveMeters = DEFAULT_ENTITY_DISTANCE_TOLERANCE_M

    def updated(self, **values: float) -> ToleranceSettings:
        """Copy with *values* applied.

        Non-positive values are ignored (and logged) so a bad entry keeps
        the previous tolerance.

        Raises:
            KeyError: If a name is not a tolerance field.
        """
        changes: dict[str, float] = {}
        for name, value in values.items():
            if name not in type(self).model_fields:
                raise KeyError(f"Unknown tolerance `{name}`")
            if value <= 0:
                logger.warning(
                    "Ignoring non-positive tolerance %s=%r (keeping %r)",
                    name,
                    value,
                    getattr(self, name),
                )
                continue
            changes[name] = float(value)
        return self.model_copy(update=changes)


def within(delta: float | None, tolerance: float) -> bool:
    """``abs(delta) <= tolerance``; an unknown delta never passes."""
    if delta is None:
        return False
    return abs(delta) <= tolerance
