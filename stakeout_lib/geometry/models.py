# -*- coding: utf-8 -*-
"""Geometry primitives and CAD entity models.

All coordinates live in the project's local projected frame (metres):
``x`` is easting and ``y`` is northing.  Every model is immutable; edits
create new instances through ``model_copy(update=...)``.

The CAD entity union is closed.  Geometry operations dispatch on it with
exhaustive ``match`` statements, so adding a variant requires touching
every consumer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Annotated
from typing import Literal
from typing import NamedTuple
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import TypeAdapter
from pydantic import field_validator

from stakeout_lib.constants import DEFAULT_LAYER

# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


class Point(NamedTuple):
    """An immutable planar coordinate (easting, northing) in metres."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:  # type: ignore[override]
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:  # type: ignore[override]
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Point:  # type: ignore[override]
        return self.__mul__(scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """Z component of the 2D cross product ``self × other``."""
        return self.x * other.y - self.y * other.x

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Western edge
        min_y: Southern edge
        max_x: Eastern edge
        max_y: Northern edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Invalid bounds: ({self.min_x}, {self.min_y}) - "
                f"({self.max_x}, {self.max_y})"
            )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point(self.min_x + self.width / 2.0, self.min_y + self.height / 2.0)

    def expand(self, pad: float) -> Bounds:
        return Bounds(
            self.min_x - pad, self.min_y - pad, self.max_x + pad, self.max_y + pad
        )

    def union(self, other: Bounds) -> Bounds:
        return Bounds(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def overlaps(self, other: Bounds) -> bool:
        """True when the two boxes share at least one point (edges included)."""
        return (
            self.max_x >= other.min_x
            and self.min_x <= other.max_x
            and self.max_y >= other.min_y
            and self.min_y <= other.max_y
        )

    def contains(self, point: Point) -> bool:
        return (
            self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y
        )

    @classmethod
    def of_points(cls, points: list[Point] | tuple[Point, ...]) -> Bounds | None:
        """Tight box around *points*, or ``None`` when there are none."""
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


# ---------------------------------------------------------------------------
# CAD entities
# ---------------------------------------------------------------------------


class _CadEntityBase(BaseModel):
    """Attributes shared by every CAD entity."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    layer: str = DEFAULT_LAYER
    color_index: Annotated[
        int | None,
        Field(default=None, ge=0, le=255, description="ACI palette index"),
    ]


class CadPoint(_CadEntityBase):
    """A standalone point."""

    kind: Literal["point"] = "point"
    position: Point


class CadLine(_CadEntityBase):
    """A straight segment between two points."""

    kind: Literal["line"] = "line"
    start: Point
    end: Point


class CadPolyline(_CadEntityBase):
    """A chain of segments; ``closed`` adds the last-to-first segment."""

    kind: Literal["polyline"] = "polyline"
    points: Annotated[tuple[Point, ...], Field(min_length=2)]
    closed: bool = False


class CadPolygon(_CadEntityBase):
    """An area bounded by implicitly closed rings.

    ``rings[0]`` is the outer boundary; any further rings are holes.
    """

    kind: Literal["polygon"] = "polygon"
    rings: Annotated[tuple[tuple[Point, ...], ...], Field(min_length=1)]

    @field_validator("rings")
    @classmethod
    def validate_rings(
        cls, value: tuple[tuple[Point, ...], ...]
    ) -> tuple[tuple[Point, ...], ...]:
        for idx, ring in enumerate(value):
            if len(ring) < 3:
                raise ValueError(
                    f"Polygon ring {idx} needs at least 3 points, got {len(ring)}"
                )
        return value

    @property
    def outer(self) -> tuple[Point, ...]:
        return self.rings[0]

    @property
    def holes(self) -> tuple[tuple[Point, ...], ...]:
        return self.rings[1:]


class CadText(_CadEntityBase):
    """A text label anchored at ``position``."""

    kind: Literal["text"] = "text"
    position: Point
    text: str
    height: Annotated[float, Field(gt=0)] = 2.5
    rotation_deg: float = 0.0


class CadCircle(_CadEntityBase):
    """A full circle."""

    kind: Literal["circle"] = "circle"
    center: Point
    radius: Annotated[float, Field(gt=0)]


class CadArc(_CadEntityBase):
    """A circular arc.

    Angles are in degrees, counter-clockwise from the +x (east) axis.
    The arc sweeps counter-clockwise from ``start_angle_deg`` to
    ``end_angle_deg``; equal angles describe a full circle.
    """

    kind: Literal["arc"] = "arc"
    center: Point
    radius: Annotated[float, Field(gt=0)]
    start_angle_deg: float
    end_angle_deg: float


CadEntity = Annotated[
    Union[CadPoint, CadLine, CadPolyline, CadPolygon, CadText, CadCircle, CadArc],
    Field(discriminator="kind"),
]

#: Validates / serializes lists of entities (e.g. from JSON documents)
ENTITY_LIST_ADAPTER: TypeAdapter[list[CadEntity]] = TypeAdapter(list[CadEntity])
