# -*- coding: utf-8 -*-
"""Project projection settings.

A project stores its ellipsoid, a projection choice and optionally a
local similarity transform (site calibration) applied on top of the
projected grid.  Every field is optional: incomplete settings degrade
to the next projection in line, and finally to no projection at all.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from stakeout_lib.enums import ProjectionType


class ProjectionSettings(BaseModel):
    """Ellipsoid, projection and site calibration of a project.

    Attributes:
        semi_major_m: Ellipsoid semi-major axis ``a`` in metres
        inverse_flattening: Ellipsoid ``1/f``
        projection_type: Preferred projection
        utm_zone: UTM zone number (1-60)
        utm_north: Northern hemisphere for UTM
        central_meridian_deg: TM / LCC longitude of origin
        lat_origin_deg: TM / LCC latitude of origin
        scale_factor: TM scale factor at the central meridian
        false_easting_m: Projection false easting
        false_northing_m: Projection false northing
        std_parallel_1_deg: LCC first standard parallel
        std_parallel_2_deg: LCC second standard parallel
        loc_scale: Site calibration scale
        loc_rotation_rad: Site calibration rotation (radians, counter-clockwise)
        loc_tx: Site calibration easting shift
        loc_ty: Site calibration northing shift
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    semi_major_m: Annotated[float | None, Field(default=None, gt=0)]
    inverse_flattening: Annotated[float | None, Field(default=None, gt=0)]
    projection_type: ProjectionType | None = None

    utm_zone: Annotated[int | None, Field(default=None, ge=1, le=60)]
    utm_north: bool = True

    central_meridian_deg: Annotated[
        float | None, Field(default=None, ge=-180, le=180)
    ]
    lat_origin_deg: Annotated[float | None, Field(default=None, ge=-90, le=90)]
    scale_factor: Annotated[float | None, Field(default=None, gt=0)]
    false_easting_m: float | None = None
    false_northing_m: float | None = None
    std_parallel_1_deg: Annotated[float | None, Field(default=None, ge=-90, le=90)]
    std_parallel_2_deg: Annotated[float | None, Field(default=None, ge=-90, le=90)]

    loc_scale: Annotated[float | None, Field(default=None, gt=0)]
    loc_rotation_rad: float | None = None
    loc_tx: float | None = None
    loc_ty: float | None = None

    @model_validator(mode="after")
    def validate_ellipsoid(self) -> ProjectionSettings:
        if (self.semi_major_m is None) != (self.inverse_flattening is None):
            raise ValueError(
                "`semi_major_m` and `inverse_flattening` must be set together"
            )
        return self

    @property
    def has_ellipsoid(self) -> bool:
        return self.semi_major_m is not None and self.inverse_flattening is not None

    @property
    def has_localization(self) -> bool:
        """True when all four site calibration values are present."""
        return None not in (
            self.loc_scale,
            self.loc_rotation_rad,
            self.loc_tx,
            self.loc_ty,
        )

    @property
    def utm_label(self) -> str | None:
        """Zone label such as ``35N``, or ``None`` without a zone."""
        if self.utm_zone is None:
            return None
        return f"{self.utm_zone}{'N' if self.utm_north else 'S'}"
