# -*- coding: utf-8 -*-
"""Interactive distance / area measurement with undo and redo.

The session owns an ordered list of picked points.  Every mutation
pushes a snapshot of the previous points onto the undo stack and clears
the redo stack; both stacks are bounded so the oldest snapshots are
dropped first.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

from stakeout_lib.constants import UNDO_STACK_LIMIT
from stakeout_lib.enums import MeasurementMode
from stakeout_lib.errors import InvalidParameterError
from stakeout_lib.geometry.measure import polygon_area
from stakeout_lib.geometry.measure import polygon_perimeter
from stakeout_lib.geometry.measure import polyline_length
from stakeout_lib.geometry.models import Point

logger = logging.getLogger(__name__)


class MeasurementSession:
    """Picked points plus bounded undo / redo history.

    Not thread safe; a session belongs to a single caller.
    """

    def __init__(
        self,
        limit: int = UNDO_STACK_LIMIT,
        mode: MeasurementMode = MeasurementMode.DISTANCE,
    ):
        if limit <= 0:
            raise InvalidParameterError("limit", limit)
        self._points: tuple[Point, ...] = ()
        self._undo: deque[tuple[Point, ...]] = deque(maxlen=limit)
        self._redo: deque[tuple[Point, ...]] = deque(maxlen=limit)
        self.mode = mode

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(points={len(self._points)}, "
            f"mode={self.mode.value})"
        )

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _commit(self, points: tuple[Point, ...]) -> None:
        self._undo.append(self._points)
        self._redo.clear()
        self._points = points

    def add(self, point: Point) -> None:
        self._commit((*self._points, Point(*point)))

    def remove_at(self, index: int) -> None:
        """Drop the point at *index*; an out-of-range index is ignored."""
        if not 0 <= index < len(self._points):
            logger.debug("Ignoring remove_at(%d) on %d points", index, len(self))
            return
        self._commit(self._points[:index] + self._points[index + 1 :])

    def clear(self) -> None:
        if not self._points:
            return
        self._commit(())

    def undo(self) -> bool:
        """Restore the previous snapshot. Returns ``False`` when there is none."""
        if not self._undo:
            return False
        self._redo.append(self._points)
        self._points = self._undo.pop()
        return True

    def redo(self) -> bool:
        """Re-apply the last undone mutation. Returns ``False`` when there is none."""
        if not self._redo:
            return False
        self._undo.append(self._points)
        self._points = self._redo.pop()
        return True

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def toggle_mode(self) -> MeasurementMode:
        self.mode = (
            MeasurementMode.AREA
            if self.mode == MeasurementMode.DISTANCE
            else MeasurementMode.DISTANCE
        )
        return self.mode

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def total_distance(self) -> float:
        """Length of the open path through every point."""
        return polyline_length(self._points)

    @property
    def polygon_area(self) -> float:
        """Area enclosed by the points (``0`` for fewer than 3)."""
        return polygon_area(self._points)

    @property
    def perimeter(self) -> float:
        if len(self._points) < 3:
            return 0.0
        return polygon_perimeter(self._points)

    def summary(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "points": len(self._points),
            "total_distance": self.total_distance,
            "area": self.polygon_area,
            "perimeter": self.perimeter,
            "can_undo": bool(self._undo),
            "can_redo": bool(self._redo),
        }
