"""
Room footprint estimation from an incrementally growing point cloud.

Example:
    ```python
    from room_footprint import RoomFinder

    finder = RoomFinder()
    for sample in scan_samples:
        finder.add(sample)

    bounds = finder.find_bounds()
    footprint = finder.fit()
    ```
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from room_footprint.config import FootprintConfig, get_config
from room_footprint.exceptions import EmptySetError
from room_footprint.hull import build_hull, hull_points
from room_footprint.point_set import PointSet
from room_footprint.rectangle import fit_rectangle
from room_footprint.value_objects import Bounds, Point, Rectangle

logger = logging.getLogger(__name__)


class RoomFinder:
    """
    Owns a PointSet and answers bounds, hull and rectangle queries on it.

    The hull and rectangle are recomputed from the current points on every
    query; nothing is cached between insertions. Not thread-safe: callers
    adding from several threads must hold their own lock.
    """

    def __init__(self, config: Optional[FootprintConfig] = None):
        self.config = config if config is not None else get_config()
        self._points = self._new_point_set()

    def _new_point_set(self) -> PointSet:
        return PointSet(
            duplicate_distance_sq=self.config.duplicate_distance_sq
        )

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points.snapshot()

    def add(self, point: Any) -> bool:
        """Add one sample point. Returns False for a near-duplicate."""
        return self._points.add(point)

    def add_many(self, points: Iterable[Any]) -> int:
        """Add every point in order and return how many were stored."""
        added = 0
        for point in points:
            if self._points.add(point):
                added += 1
        return added

    def reset(self) -> None:
        """Discard every point and start over with an empty set."""
        logger.info("Resetting room finder (%d points)", len(self._points))
        self._points = self._new_point_set()

    def find_bounds(self) -> Bounds:
        return self._points.bounds()

    def _snapshot(self) -> Tuple[Point, ...]:
        snapshot = self._points.snapshot()
        if not snapshot:
            raise EmptySetError("No points have been added")
        return snapshot

    def build_hull(self) -> List[int]:
        """Convex hull of the current points as indices into ``points``."""
        return build_hull(
            self._snapshot(), epsilon=self.config.orientation_epsilon
        )

    def hull_points(self) -> List[Point]:
        snapshot = self._snapshot()
        hull = build_hull(snapshot, epsilon=self.config.orientation_epsilon)
        return hull_points(snapshot, hull)

    def fit(self) -> Rectangle:
        """
        Minimum-area rectangle enclosing the current points in the x-z
        plane.

        Raises:
            EmptySetError: If no points have been added.
            DegenerateHullError: If only one point has been added.
        """
        snapshot = self._snapshot()
        hull = build_hull(snapshot, epsilon=self.config.orientation_epsilon)
        rect = fit_rectangle(snapshot, hull)
        logger.debug(
            "Room footprint from %d points (%d on hull): angle %.2f deg",
            len(snapshot),
            len(hull),
            rect.angle_degrees,
        )
        return rect
