# -*- coding: utf-8 -*-
"""World <-> screen mapping for a CAD canvas.

The base mapping stretches ``bounds`` over a ``width x height`` pixel
canvas with the y axis flipped (screen y grows downwards).  User zoom
and pan are then applied on top: ``screen = base * scale + pan``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from stakeout_lib.errors import InvalidParameterError
from stakeout_lib.geometry.models import ORIGIN
from stakeout_lib.geometry.models import Bounds
from stakeout_lib.geometry.models import Point


def _span(value: float) -> float:
    # Zero-width bounds (a single point) would otherwise divide by zero
    return value if value > 0 else 1.0


@dataclass(frozen=True)
class Viewport:
    """A canvas showing ``bounds`` at a user zoom and pan.

    Attributes:
        bounds: World box stretched over the whole canvas at ``scale=1``
        width: Canvas width in pixels
        height: Canvas height in pixels
        scale: User zoom factor
        pan: User pan offset in pixels
    """

    bounds: Bounds
    width: float
    height: float
    scale: float = 1.0
    pan: Point = ORIGIN

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise InvalidParameterError("width", self.width)
        if self.height <= 0:
            raise InvalidParameterError("height", self.height)
        if self.scale <= 0:
            raise InvalidParameterError("scale", self.scale)

    def world_to_screen(self, point: Point) -> Point:
        b = self.bounds
        sx = (point.x - b.min_x) / _span(b.width)
        sy = 1.0 - (point.y - b.min_y) / _span(b.height)
        return Point(
            sx * self.width * self.scale + self.pan.x,
            sy * self.height * self.scale + self.pan.y,
        )

    def world_to_screen_array(self, xy: np.ndarray) -> np.ndarray:
        """Vectorised :meth:`world_to_screen` over an ``(N, 2)`` array."""
        b = self.bounds
        xy = np.asarray(xy, dtype=np.float64).reshape(-1, 2)
        sx = (xy[:, 0] - b.min_x) / _span(b.width)
        sy = 1.0 - (xy[:, 1] - b.min_y) / _span(b.height)
        return np.column_stack(
            (
                sx * self.width * self.scale + self.pan.x,
                sy * self.height * self.scale + self.pan.y,
            )
        )

    def screen_to_world(self, point: Point) -> Point:
        """Inverse of :meth:`world_to_screen`."""
        b = self.bounds
        nx = (point.x - self.pan.x) / self.scale / self.width
        ny = (point.y - self.pan.y) / self.scale / self.height
        return Point(
            b.min_x + nx * _span(b.width),
            b.min_y + (1.0 - ny) * _span(b.height),
        )

    def radius_to_px(self, radius: float) -> float:
        """Screen length of a world distance.

        Scaled against the larger world span and the smaller canvas side.
        """
        world_max = _span(max(self.bounds.width, self.bounds.height))
        view_min = min(self.width, self.height)
        return radius / world_max * view_min * self.scale

    def visible_bounds(self) -> Bounds:
        """World box currently visible on the canvas."""
        w0 = self.screen_to_world(Point(0.0, 0.0))
        w1 = self.screen_to_world(Point(self.width, self.height))
        return Bounds(
            min(w0.x, w1.x), min(w0.y, w1.y), max(w0.x, w1.x), max(w0.y, w1.y)
        )

    def zoomed(self, scale: float, pan: Point | None = None) -> Viewport:
        """Copy of this viewport with a new zoom (and optionally pan)."""
        return Viewport(
            self.bounds,
            self.width,
            self.height,
            scale=scale,
            pan=self.pan if pan is None else pan,
        )
