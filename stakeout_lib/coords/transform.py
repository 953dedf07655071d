# -*- coding: utf-8 -*-
"""Geodetic <-> local grid transforms.

Every transformer maps WGS84-style geodetic coordinates (degrees) to a
local projected frame ``(easting, northing)`` in metres and back.  The
projection maths is delegated to pyproj; this module only decides which
projection a project uses and layers an optional site calibration on top.

Usage::

    transformer = ProjectionEngine.for_project(settings)
    e, n = to_local(transformer, lat, lon)
"""

from __future__ import annotations

import logging
import math
from abc import ABC
from abc import abstractmethod

import utm
from pyproj import CRS
from pyproj import Transformer
from pyproj.enums import TransformDirection
from pyproj.exceptions import CRSError

from stakeout_lib.constants import FALLBACK_METERS_PER_DEGREE
from stakeout_lib.constants import WGS84_INVERSE_FLATTENING
from stakeout_lib.constants import WGS84_SEMI_MAJOR_M
from stakeout_lib.coords.models import ProjectionSettings
from stakeout_lib.enums import ProjectionType
from stakeout_lib.errors import TransformError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Transformers
# ---------------------------------------------------------------------------


class CoordinateTransformer(ABC):
    """Two-way mapping between geodetic and local grid coordinates."""

    @property
    def name(self) -> str:
        """Human-readable name of the transformer (for logging / UI)."""
        return self.__class__.__name__

    @abstractmethod
    def forward(self, lat_deg: float, lon_deg: float) -> tuple[float, float]:
        """Geodetic ``(lat, lon)`` to grid ``(easting, northing)``."""
        ...

    @abstractmethod
    def inverse(self, easting: float, northing: float) -> tuple[float, float]:
        """Grid ``(easting, northing)`` to geodetic ``(lat, lon)``."""
        ...


class NoOpTransformer(CoordinateTransformer):
    """Placeholder used when a project has no usable projection.

    Passes the coordinates through unchanged (latitude first).
    :func:`to_local` recognises it and applies the linear fallback instead.
    """

    def forward(self, lat_deg: float, lon_deg: float) -> tuple[float, float]:
        return lat_deg, lon_deg

    def inverse(self, easting: float, northing: float) -> tuple[float, float]:
        return easting, northing


#: Shared no-op instance
NOOP_TRANSFORMER = NoOpTransformer()


# Cache for pyproj transformers (proj string -> transformer)
_transformer_cache: dict[str, Transformer] = {}


def _get_transformer(proj_string: str) -> Transformer:
    """Get or create a cached geodetic -> projected transformer."""
    if proj_string not in _transformer_cache:
        try:
            crs = CRS.from_proj4(proj_string)
        except CRSError as e:
            raise TransformError(f"Invalid projection `{proj_string}`: {e}") from e
        _transformer_cache[proj_string] = Transformer.from_crs(
            crs.geodetic_crs,
            crs,
            always_xy=True,
        )
    return _transformer_cache[proj_string]


class CrsTransformer(CoordinateTransformer):
    """pyproj-backed projection defined by a PROJ string."""

    def __init__(self, proj_string: str, label: str | None = None):
        self.proj_string = proj_string
        self._label = label
        self._transformer = _get_transformer(proj_string)

    @property
    def name(self) -> str:
        return self._label or self.proj_string

    def forward(self, lat_deg: float, lon_deg: float) -> tuple[float, float]:
        easting, northing = self._transformer.transform(
            lon_deg, lat_deg, errcheck=True
        )
        return float(easting), float(northing)

    def inverse(self, easting: float, northing: float) -> tuple[float, float]:
        lon, lat = self._transformer.transform(
            easting,
            northing,
            direction=TransformDirection.INVERSE,
            errcheck=True,
        )
        return float(lat), float(lon)

    # -----------------------------
    # Factories
    # -----------------------------

    @staticmethod
    def _ellipsoid(semi_major_m: float, inverse_flattening: float) -> str:
        return f"+a={semi_major_m} +rf={inverse_flattening}"

    @classmethod
    def utm(
        cls,
        zone: int,
        north: bool = True,
        semi_major_m: float = WGS84_SEMI_MAJOR_M,
        inverse_flattening: float = WGS84_INVERSE_FLATTENING,
    ) -> CrsTransformer:
        hemisphere = "" if north else " +south"
        return cls(
            f"+proj=utm +zone={zone}{hemisphere} "
            f"{cls._ellipsoid(semi_major_m, inverse_flattening)} +units=m +no_defs",
            label=f"UTM {zone}{'N' if north else 'S'}",
        )

    @classmethod
    def transverse_mercator(
        cls,
        semi_major_m: float,
        inverse_flattening: float,
        central_meridian_deg: float,
        lat_origin_deg: float = 0.0,
        scale_factor: float = 1.0,
        false_easting_m: float = 0.0,
        false_northing_m: float = 0.0,
    ) -> CrsTransformer:
        return cls(
            f"+proj=tmerc +lat_0={lat_origin_deg} +lon_0={central_meridian_deg} "
            f"+k_0={scale_factor} +x_0={false_easting_m} +y_0={false_northing_m} "
            f"{cls._ellipsoid(semi_major_m, inverse_flattening)} +units=m +no_defs",
            label=f"TM {central_meridian_deg}",
        )

    @classmethod
    def lambert_conformal_conic_2sp(
        cls,
        semi_major_m: float,
        inverse_flattening: float,
        lat_origin_deg: float,
        central_meridian_deg: float,
        std_parallel_1_deg: float,
        std_parallel_2_deg: float,
        false_easting_m: float = 0.0,
        false_northing_m: float = 0.0,
    ) -> CrsTransformer:
        return cls(
            f"+proj=lcc +lat_0={lat_origin_deg} +lon_0={central_meridian_deg} "
            f"+lat_1={std_parallel_1_deg} +lat_2={std_parallel_2_deg} "
            f"+x_0={false_easting_m} +y_0={false_northing_m} "
            f"{cls._ellipsoid(semi_major_m, inverse_flattening)} +units=m +no_defs",
            label=f"LCC {std_parallel_1_deg}/{std_parallel_2_deg}",
        )


class LocalizedTransformer(CoordinateTransformer):
    """Similarity transform (site calibration) on top of another transformer.

    ``local = scale * R(rotation) * grid + (tx, ty)``
    """

    def __init__(
        self,
        delegate: CoordinateTransformer,
        scale: float,
        rotation_rad: float,
        tx: float,
        ty: float,
    ):
        if scale <= 0:
            raise TransformError(f"Localization scale must be > 0, got {scale!r}")
        self.delegate = delegate
        self.scale = scale
        self.rotation_rad = rotation_rad
        self.tx = tx
        self.ty = ty
        self._cos = math.cos(rotation_rad)
        self._sin = math.sin(rotation_rad)

    @property
    def name(self) -> str:
        return f"Localized({self.delegate.name})"

    def forward(self, lat_deg: float, lon_deg: float) -> tuple[float, float]:
        e, n = self.delegate.forward(lat_deg, lon_deg)
        e_loc = self.scale * (self._cos * e - self._sin * n) + self.tx
        n_loc = self.scale * (self._sin * e + self._cos * n) + self.ty
        return e_loc, n_loc

    def inverse(self, easting: float, northing: float) -> tuple[float, float]:
        e_loc = easting - self.tx
        n_loc = northing - self.ty
        e = (self._cos * e_loc + self._sin * n_loc) / self.scale
        n = (-self._sin * e_loc + self._cos * n_loc) / self.scale
        return self.delegate.inverse(e, n)


# ---------------------------------------------------------------------------
# Projection selection
# ---------------------------------------------------------------------------


class ProjectionEngine:
    """Builds the transformer described by a project's settings."""

    @staticmethod
    def _base(settings: ProjectionSettings) -> CoordinateTransformer:
        if not settings.has_ellipsoid:
            return NOOP_TRANSFORMER

        a = settings.semi_major_m
        rf = settings.inverse_flattening

        match settings.projection_type:
            case ProjectionType.TRANSVERSE_MERCATOR if (
                settings.central_meridian_deg is not None
            ):
                return CrsTransformer.transverse_mercator(
                    a,
                    rf,
                    settings.central_meridian_deg,
                    lat_origin_deg=settings.lat_origin_deg or 0.0,
                    scale_factor=settings.scale_factor or 1.0,
                    false_easting_m=settings.false_easting_m or 0.0,
                    false_northing_m=settings.false_northing_m or 0.0,
                )

            case ProjectionType.LAMBERT_CONFORMAL_CONIC_2SP if None not in (
                settings.central_meridian_deg,
                settings.lat_origin_deg,
                settings.std_parallel_1_deg,
                settings.std_parallel_2_deg,
            ):
                return CrsTransformer.lambert_conformal_conic_2sp(
                    a,
                    rf,
                    settings.lat_origin_deg,
                    settings.central_meridian_deg,
                    settings.std_parallel_1_deg,
                    settings.std_parallel_2_deg,
                    false_easting_m=settings.false_easting_m or 0.0,
                    false_northing_m=settings.false_northing_m or 0.0,
                )

            case _:
                pass

        # Advanced projection missing or incomplete: fall back to UTM
        if settings.utm_zone is not None:
            return CrsTransformer.utm(
                settings.utm_zone,
                north=settings.utm_north,
                semi_major_m=a,
                inverse_flattening=rf,
            )

        return NOOP_TRANSFORMER

    @classmethod
    def for_project(
        cls, settings: ProjectionSettings | None
    ) -> CoordinateTransformer:
        """Transformer for *settings* (no-op when nothing usable is set).

        Raises:
            TransformError: If the configured projection is rejected by PROJ.
        """
        if settings is None:
            return NOOP_TRANSFORMER

        base = cls._base(settings)
        if not settings.has_localization:
            logger.debug("Using projection %s", base.name)
            return base

        if isinstance(base, NoOpTransformer):
            logger.warning(
                "Ignoring site calibration: no projection configured to apply it to"
            )
            return base

        transformer = LocalizedTransformer(
            base,
            settings.loc_scale,
            settings.loc_rotation_rad,
            settings.loc_tx,
            settings.loc_ty,
        )
        logger.debug("Using projection %s", transformer.name)
        return transformer


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def fallback_local(lat_deg: float, lon_deg: float) -> tuple[float, float]:
    """Linear degrees-to-metres approximation ``(lon * 111000, lat * 111000)``."""
    return lon_deg * FALLBACK_METERS_PER_DEGREE, lat_deg * FALLBACK_METERS_PER_DEGREE


def to_local(
    transformer: CoordinateTransformer | None, lat_deg: float, lon_deg: float
) -> tuple[float, float]:
    """Project a fix into the local frame, never raising.

    Without a real transformer, or when it fails, the linear fallback of
    :func:`fallback_local` is used.
    """
    if transformer is None or isinstance(transformer, NoOpTransformer):
        return fallback_local(lat_deg, lon_deg)

    try:
        e, n = transformer.forward(lat_deg, lon_deg)
    except Exception:  # noqa: BLE001
        logger.warning(
            "Transform %s failed for (%.8f, %.8f), using linear fallback",
            transformer.name,
            lat_deg,
            lon_deg,
        )
        return fallback_local(lat_deg, lon_deg)

    if not (math.isfinite(e) and math.isfinite(n)):
        logger.warning(
            "Transform %s returned a non-finite position, using linear fallback",
            transformer.name,
        )
        return fallback_local(lat_deg, lon_deg)

    return e, n


def suggest_utm_zone(lat_deg: float, lon_deg: float) -> ProjectionSettings:
    """WGS84 UTM settings for the zone containing ``(lat, lon)``."""
    zone = utm.latlon_to_zone_number(lat_deg, lon_deg)
    return ProjectionSettings(
        semi_major_m=WGS84_SEMI_MAJOR_M,
        inverse_flattening=WGS84_INVERSE_FLATTENING,
        projection_type=ProjectionType.UTM,
        utm_zone=zone,
        utm_north=lat_deg >= 0,
    )
