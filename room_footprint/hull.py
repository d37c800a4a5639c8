"""Planar convex hull of a point set, projected onto the x-z plane."""

import logging
from math import hypot
from typing import List, Sequence, Tuple

from room_footprint.value_objects import Point

logger = logging.getLogger(__name__)


def orientation(a: Point, b: Point, c: Point) -> float:
    """
    Turn direction of the path a -> b -> c in the horizontal plane.

    Computed as the 2D cross product of (a - b) and (c - b) taken around
    ``b``:

        (c.x - b.x) * (a.z - b.z) - (a.x - b.x) * (c.z - b.z)

    Returns:
        float: Positive for a counter-clockwise turn (x to the right, z up),
            negative for clockwise, zero when the points are collinear.
    """
    return (c.x - b.x) * (a.z - b.z) - (a.x - b.x) * (c.z - b.z)


def _chain(
    points: Sequence[Point], order: Sequence[int], epsilon: float
) -> List[int]:
    chain: List[int] = []
    for i in order:
        while (
            len(chain) >= 2
            and orientation(points[chain[-2]], points[chain[-1]], points[i])
            <= epsilon
        ):
            chain.pop()
        chain.append(i)
    return chain


def build_hull(points: Sequence[Point], epsilon: float = 0.0) -> List[int]:
    """
    Compute the convex hull of ``points`` using the monotone chain
    algorithm.

    The points are expected to be sorted by x (as a PointSet snapshot is).
    Runs of equal x are visited in ascending z so both chains see a
    lexicographic ordering. The upper chain is built left to right, the
    lower chain right to left, and each loses its last point (shared with
    the start of the other chain) before they are joined.

    Args:
        points: Sorted sample points.
        epsilon: Turns with orientation at or below this are popped, so
            collinear points are dropped from the hull.

    Returns:
        List[int]: Indices into ``points`` in counter-clockwise order.
            Empty for no points, a single index for one point, two indices
            when every point is collinear.
    """
    n = len(points)
    if n <= 1:
        return list(range(n))

    order = sorted(range(n), key=lambda i: (points[i].x, points[i].z))

    upper = _chain(points, order, epsilon)
    upper.pop()
    lower = _chain(points, list(reversed(order)), epsilon)
    lower.pop()

    hull = upper + lower
    logger.debug("Built hull with %d of %d points", len(hull), n)
    return hull


def hull_points(points: Sequence[Point], hull: Sequence[int]) -> List[Point]:
    """Resolve hull indices to the points they reference."""
    return [points[i] for i in hull]


def polygon_contains(
    polygon: Sequence[Tuple[float, float]],
    x: float,
    z: float,
    tolerance: float = 1e-9,
) -> bool:
    """
    Determines if (x, z) lies inside or on a counter-clockwise convex
    polygon.

    Degenerate polygons are handled too: a single vertex contains only
    points within ``tolerance`` of it, two vertices contain the segment
    between them.
    """
    n = len(polygon)
    if n == 0:
        return False
    if n == 1:
        px, pz = polygon[0]
        return hypot(x - px, z - pz) <= tolerance
    if n == 2:
        (ax, az), (bx, bz) = polygon
        dx, dz = bx - ax, bz - az
        length_sq = dx * dx + dz * dz
        if length_sq == 0:
            return hypot(x - ax, z - az) <= tolerance
        t = ((x - ax) * dx + (z - az) * dz) / length_sq
        t = max(0.0, min(1.0, t))
        return hypot(x - (ax + t * dx), z - (az + t * dz)) <= tolerance

    for i in range(n):
        ax, az = polygon[i]
        bx, bz = polygon[(i + 1) % n]
        length = hypot(bx - ax, bz - az)
        if length == 0:
            continue
        # Signed distance to the left of edge a -> b
        cross = (bx - ax) * (z - az) - (bz - az) * (x - ax)
        if cross / length < -tolerance:
            return False
    return True
