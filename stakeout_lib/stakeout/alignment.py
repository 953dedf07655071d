# -*- coding: utf-8 -*-
"""Station-based alignments and projection onto them.

An alignment is an ordered chain of stations ``(chain, e, n[, z])``.
Chainage is the distance travelled along the chain from the first
station; the lateral offset is signed, positive to the **left** of the
direction of travel (a point north of an eastbound alignment has a
positive offset).

Algorithm
---------
Forward projection (:func:`project_onto_alignment`) walks every
non-degenerate segment, clamps the query's foot point onto it and keeps
the segment whose foot is closest.  The inverse
(:func:`compute_point_from_chainage_offset`) finds the bracketing pair
of stations, interpolates, then steps perpendicular to that segment, so
``inverse(forward(q)) == q`` for any query whose foot is not clamped to
an end of the alignment.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from stakeout_lib.constants import ALIGNMENT_SEGMENT_EPSILON_SQ
from stakeout_lib.constants import DEFAULT_ROAD_STATION_INTERVAL_M
from stakeout_lib.constants import LINE_STATION_END_SLACK_M
from stakeout_lib.constants import NEAREST_STATION_OFFSET_WEIGHT
from stakeout_lib.constants import OFFSET_EPSILON
from stakeout_lib.errors import InvalidParameterError
from stakeout_lib.geometry.models import Point

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AlignmentStation:
    """A sample point along an alignment.

    Attributes:
        chain_m: Chainage from the alignment start, in metres
        e: Easting
        n: Northing
        elevation: Design elevation, when known
    """

    chain_m: float
    e: float
    n: float
    elevation: float | None = None

    @property
    def position(self) -> Point:
        return Point(self.e, self.n)


@dataclass(frozen=True)
class Alignment:
    """An ordered, immutable chain of stations."""

    stations: tuple[AlignmentStation, ...]

    def __len__(self) -> int:
        return len(self.stations)

    @property
    def chainages(self) -> tuple[float, ...]:
        return tuple(s.chain_m for s in self.stations)

    @property
    def total_length(self) -> float:
        """Summed planar length of every segment."""
        return sum(
            math.hypot(b.e - a.e, b.n - a.n)
            for a, b in zip(self.stations, self.stations[1:])
        )

    @classmethod
    def from_vertices(
        cls,
        vertices: Sequence[Point],
        elevations: Sequence[float] | None = None,
    ) -> Alignment:
        """Alignment through *vertices*, chained by cumulative length."""
        stations: list[AlignmentStation] = []
        chain = 0.0
        for idx, v in enumerate(vertices):
            if idx:
                chain += vertices[idx - 1].distance_to(v)
            z = elevations[idx] if elevations is not None else None
            stations.append(AlignmentStation(chain, v.x, v.y, z))
        return cls(tuple(stations))


@dataclass(frozen=True)
class AlignmentProjection:
    """Where a query point falls relative to an alignment.

    Attributes:
        chain_m: Chainage of the foot point, clamped to the alignment
        offset_m: Signed lateral offset (positive = left of travel)
        foot: Foot point on the alignment
        distance_m: Distance from the query to ``foot``
        segment_index: Index of the segment's first station
        nearest_station: Station nearest by chain, weighted by offset
    """

    chain_m: float
    offset_m: float
    foot: Point
    distance_m: float
    segment_index: int
    nearest_station: AlignmentStation


# ---------------------------------------------------------------------------
# Station generation
# ---------------------------------------------------------------------------


def generate_line_stations(
    start: Point, end: Point, interval: float
) -> Alignment:
    """Stations every *interval* metres from *start* towards *end*.

    Stations are emitted while ``chain <= length + 0.01`` so a line whose
    length is a multiple of the interval ends exactly on a station.  A
    degenerate line yields a single station at *start*.
    """
    if interval <= 0:
        raise InvalidParameterError("interval", interval)

    length = start.distance_to(end)
    if length == 0.0:
        return Alignment((AlignmentStation(0.0, start.x, start.y),))

    d = end - start
    stations: list[AlignmentStation] = []
    idx = 0
    pos = 0.0
    while pos <= length + LINE_STATION_END_SLACK_M:
        ratio = pos / length
        stations.append(
            AlignmentStation(pos, start.x + d.x * ratio, start.y + d.y * ratio)
        )
        idx += 1
        pos = idx * interval
    return Alignment(tuple(stations))


def generate_synthetic_alignment(
    start: AlignmentStation,
    total_length: float,
    interval: float = DEFAULT_ROAD_STATION_INTERVAL_M,
    north_rate: float = 0.45,
    east_rate: float = 0.30,
    grade: float = 0.0015,
) -> Alignment:
    """A straight demo road running away from *start*.

    For every generation step ``ch`` (``0, interval, ...`` up to
    *total_length*) the station sits at
    ``(e + ch * east_rate, n + ch * north_rate, z + ch * grade)``.
    Station chainages are the planar distance from *start*, so they
    agree with :func:`project_onto_alignment`.
    """
    if interval <= 0:
        raise InvalidParameterError("interval", interval)
    if total_length < 0:
        raise InvalidParameterError("total_length", total_length, ">= 0")

    z0 = start.elevation if start.elevation is not None else 0.0
    planar_rate = math.hypot(north_rate, east_rate)
    stations: list[AlignmentStation] = []
    idx = 0
    ch = 0.0
    while ch <= total_length + 1e-6:
        stations.append(
            AlignmentStation(
                ch * planar_rate,
                start.e + ch * east_rate,
                start.n + ch * north_rate,
                z0 + ch * grade,
            )
        )
        idx += 1
        ch = idx * interval
    return Alignment(tuple(stations))


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


def nearest_station(
    stations: Sequence[AlignmentStation], chain_m: float, offset_m: float
) -> AlignmentStation:
    """Station minimising ``|station.chain - chain| + 0.5 * |offset|``.

    The offset term is common to every station; it only shifts the score.
    The first station wins ties.
    """
    return min(
        stations,
        key=lambda s: abs(s.chain_m - chain_m)
        + NEAREST_STATION_OFFSET_WEIGHT * abs(offset_m),
    )


def project_onto_alignment(
    alignment: Alignment, query_e: float, query_n: float
) -> AlignmentProjection | None:
    """Chainage and signed offset of ``(query_e, query_n)``.

    Returns ``None`` when the alignment has fewer than 2 stations or only
    zero-length segments.
    """
    stations = alignment.stations
    if len(stations) < 2:
        return None

    q = Point(query_e, query_n)
    total = alignment.total_length
    cumulative = 0.0
    best: tuple[float, float, Point, float, int] | None = None

    for idx, (s0, s1) in enumerate(zip(stations, stations[1:])):
        a = s0.position
        ab = s1.position - a
        len_sq = ab.dot(ab)
        if len_sq < ALIGNMENT_SEGMENT_EPSILON_SQ:
            continue

        seg_len = math.sqrt(len_sq)
        aq = q - a
        t = min(1.0, max(0.0, aq.dot(ab) / len_sq))
        foot = a + ab * t
        dist = foot.distance_to(q)

        if best is None or dist < best[3]:
            chain = cumulative + t * seg_len
            offset = ab.cross(aq) / seg_len
            best = (chain, offset, foot, dist, idx)

        cumulative += seg_len

    if best is None:
        logger.debug("Alignment has no usable segment")
        return None

    chain, offset, foot, dist, idx = best
    chain = min(total, max(0.0, chain))
    return AlignmentProjection(
        chain_m=chain,
        offset_m=offset,
        foot=foot,
        distance_m=dist,
        segment_index=idx,
        nearest_station=nearest_station(stations, chain, offset),
    )


def _left_normal(a: AlignmentStation, b: AlignmentStation) -> Point | None:
    d = b.position - a.position
    length = d.length
    if length < OFFSET_EPSILON:
        return None
    return Point(-d.y / length, d.x / length)


def _shift(
    base: Point, a: AlignmentStation, b: AlignmentStation, offset: float
) -> Point:
    if abs(offset) < OFFSET_EPSILON:
        return base
    normal = _left_normal(a, b)
    if normal is None:
        # No direction to offset along; shift east
        return Point(base.x + offset, base.y)
    return base + normal * offset


def _lerp(a: float | None, b: float | None, t: float) -> float | None:
    if a is None or b is None:
        return None
    return a + (b - a) * t


def compute_point_from_chainage_offset(
    alignment: Alignment, chain_m: float, offset_m: float = 0.0
) -> tuple[float, float, float | None] | None:
    """Design point ``(e, n, elevation)`` at *chain_m* and *offset_m*.

    Chainage is measured along the planar length of the alignment, the
    same quantity :func:`project_onto_alignment` reports.  Outside the
    alignment the point is clamped to the first / last station.  An
    empty alignment yields ``None``.
    """
    stations = alignment.stations
    if not stations:
        return None

    if len(stations) == 1:
        s = stations[0]
        return (s.e + offset_m, s.n, s.elevation)

    # Cumulative planar chainage of every station
    chains = [0.0]
    for s0, s1 in zip(stations, stations[1:]):
        chains.append(chains[-1] + math.hypot(s1.e - s0.e, s1.n - s0.n))

    if chain_m <= chains[0]:
        s0, s1 = stations[0], stations[1]
        p = _shift(s0.position, s0, s1, offset_m)
        return (p.x, p.y, s0.elevation)

    if chain_m >= chains[-1]:
        prev, last = stations[-2], stations[-1]
        p = _shift(last.position, prev, last, offset_m)
        return (p.x, p.y, last.elevation)

    idx = 0
    while idx < len(chains) - 2 and chains[idx + 1] < chain_m:
        idx += 1

    s0, s1 = stations[idx], stations[idx + 1]
    span = chains[idx + 1] - chains[idx]
    t = 0.0 if span <= OFFSET_EPSILON else (chain_m - chains[idx]) / span
    base = s0.position + (s1.position - s0.position) * t
    p = _shift(base, s0, s1, offset_m)
    return (p.x, p.y, _lerp(s0.elevation, s1.elevation, t))
