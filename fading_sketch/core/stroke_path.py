"""
Stroke path data model.

A DrawPath is one continuous freehand stroke: a uuid plus the ordered
points the pointer passed through.
"""

import math
import time
import uuid as uuid_lib
from typing import List, NamedTuple, Optional, Tuple

from .errors import PathSealedError


class Point(NamedTuple):
    """Surface-local coordinate pair."""
    x: float
    y: float

    @classmethod
    def from_coords(cls, x, y) -> 'Point':
        """
        Build a point from raw event coordinates.

        Raises:
            ValueError: if either coordinate is not a finite number
        """
        fx = float(x)
        fy = float(y)
        if not (math.isfinite(fx) and math.isfinite(fy)):
            raise ValueError(f"Non-finite point: ({x}, {y})")
        return cls(fx, fy)


class DrawPath:
    """
    One freehand stroke.

    Points can only be appended while the path is live. After commit the
    path is sealed and the only allowed mutation is clear_points(), which
    the decay step performs once.
    """

    def __init__(self, path_id: Optional[str] = None):
        self._id = path_id or str(uuid_lib.uuid4())
        self._points: List[Point] = []
        self._committed_at: Optional[float] = None
        self._decayed = False

    def __repr__(self):
        return f"DrawPath(id={self._id!r}, points={len(self._points)})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    @property
    def committed(self) -> bool:
        return self._committed_at is not None

    @property
    def committed_at(self) -> Optional[float]:
        return self._committed_at

    @property
    def decayed(self) -> bool:
        return self._decayed

    def is_empty(self) -> bool:
        return not self._points

    def __len__(self):
        return len(self._points)

    def append(self, point: Point):
        """Append a point to a live path."""
        if self.committed:
            raise PathSealedError(f"Path {self._id} is committed")
        self._points.append(point)

    def seal(self):
        """Mark the path as committed. Later appends raise PathSealedError."""
        if self._committed_at is None:
            self._committed_at = time.monotonic()

    def clear_points(self):
        """Drop all points (decay). The id stays valid."""
        self._points = []
        self._decayed = True


__all__ = ['Point', 'DrawPath']
