# -*- coding: utf-8 -*-
"""Live GNSS fix as delivered by the receiver layer."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic_extra_types.coordinate import Latitude  # noqa: TC002
from pydantic_extra_types.coordinate import Longitude  # noqa: TC002

from stakeout_lib.enums import FixType


class GnssObservation(BaseModel):
    """One epoch of receiver output.

    A missing latitude or longitude means the receiver has no position,
    whatever ``fix_type`` claims.

    Attributes:
        epoch_ms: Receiver epoch, milliseconds since the Unix epoch
        lat_deg: Latitude in decimal degrees
        lon_deg: Longitude in decimal degrees
        ellipsoidal_height: Height above the ellipsoid (metres)
        fix_type: Solution type
        satellites_in_use: Satellites used in the solution
        hrms: Horizontal RMS error (metres)
        vrms: Vertical RMS error (metres)
        pdop: Position dilution of precision
    """

    model_config = ConfigDict(frozen=True)

    epoch_ms: Annotated[int, Field(ge=0)] = 0
    lat_deg: Latitude | None = None
    lon_deg: Longitude | None = None
    ellipsoidal_height: float | None = None
    fix_type: FixType = FixType.SINGLE
    satellites_in_use: Annotated[int, Field(ge=0)] = 0
    hrms: Annotated[float | None, Field(default=None, ge=0)]
    vrms: Annotated[float | None, Field(default=None, ge=0)]
    pdop: Annotated[float | None, Field(default=None, ge=0)]

    @property
    def has_position(self) -> bool:
        return self.lat_deg is not None and self.lon_deg is not None

    @property
    def accuracy_level(self) -> int:
        return self.fix_type.accuracy_level
