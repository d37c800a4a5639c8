"""Deduplicated, x-sorted storage for incoming sample points."""

import logging
from bisect import bisect_left, bisect_right
from math import sqrt
from typing import Any, Iterator, List, Tuple

from room_footprint.value_objects import Bounds, Point

logger = logging.getLogger(__name__)

DEFAULT_DUPLICATE_DISTANCE_SQ = 1e-5


class PointSet:
    """
    Ordered collection of unique sample points.

    Points are kept non-decreasing by x. Points sharing an x stay in the
    order they were added. Two points closer than the duplicate threshold
    are never both stored.
    """

    def __init__(
        self, duplicate_distance_sq: float = DEFAULT_DUPLICATE_DISTANCE_SQ
    ):
        if duplicate_distance_sq <= 0:
            raise ValueError("duplicate_distance_sq must be positive")
        self.duplicate_distance_sq = duplicate_distance_sq
        self._points: List[Point] = []
        # Parallel list of x keys for bisect
        self._xs: List[float] = []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __repr__(self) -> str:
        return f"PointSet(size={len(self._points)})"

    def add(self, point: Any) -> bool:
        """
        Insert a point at its sorted position.

        Args:
            point: A Point, an (x, y, z) sequence or a dict with x/y/z keys.

        Returns:
            bool: True if the point was stored, False if a stored point lies
                within the duplicate threshold and the call was a no-op.

        Raises:
            InvalidPointError: If a coordinate is non-numeric or non-finite.
                The set is left unmodified.
        """
        point = Point.coerce(point)

        # Only points whose x is within the threshold radius can be
        # duplicates.
        radius = sqrt(self.duplicate_distance_sq)
        lo = bisect_left(self._xs, point.x - radius)
        hi = bisect_right(self._xs, point.x + radius)
        for existing in self._points[lo:hi]:
            if existing.distance_squared(point) < self.duplicate_distance_sq:
                logger.debug(
                    "Skipping near-duplicate point %s (matches %s)",
                    point,
                    existing,
                )
                return False

        index = bisect_right(self._xs, point.x)
        self._points.insert(index, point)
        self._xs.insert(index, point.x)
        return True

    def bounds(self) -> Bounds:
        """
        Axis-aligned bounding box of every stored point.

        Raises:
            EmptySetError: If no points have been added.
        """
        return Bounds.from_points(self._points)

    def snapshot(self) -> Tuple[Point, ...]:
        """Immutable copy of the sorted points for a single query."""
        return tuple(self._points)
