"""Minimum-area enclosing rectangle of a convex hull (rotating calipers)."""

import logging
from math import hypot
from typing import Iterator, Optional, Sequence

from room_footprint.exceptions import DegenerateHullError
from room_footprint.value_objects import Point, Rectangle

logger = logging.getLogger(__name__)


def _edge_rectangle(
    points: Sequence[Point], hull: Sequence[int], edge_index: int
) -> Optional[Rectangle]:
    """
    Smallest rectangle enclosing the hull with one side on a given edge.

    Every hull vertex is projected onto the edge direction and onto its
    perpendicular, relative to the edge start. The height is the largest
    perpendicular distance. Along the edge, vertices ahead of the start
    (positive dot product) set the forward extent and the rest set the
    backward extent.

    The edge's own endpoints are not projected: they sit on the edge line
    at distances 0 and the edge length.

    Returns None for a zero-length edge.
    """
    h = len(hull)
    start_index = hull[edge_index]
    end_index = hull[(edge_index + 1) % h]
    start = points[start_index]
    end = points[end_index]
    dx = end.x - start.x
    dz = end.z - start.z
    length = hypot(dx, dz)
    if length == 0:
        return None
    ux, uz = dx / length, dz / length
    # Left normal; points into a counter-clockwise hull
    nx, nz = -uz, ux

    height = 0.0
    forward = 0.0
    backward = 0.0
    for i in hull:
        if i == start_index:
            continue
        if i == end_index:
            # Lies on the edge line; projecting would add rounding error
            along, across = length, 0.0
        else:
            p = points[i]
            px = p.x - start.x
            pz = p.z - start.z
            along = px * ux + pz * uz
            across = abs(px * nx + pz * nz)
        if across > height:
            height = across
        if along > 0:
            if along > forward:
                forward = along
        elif -along > backward:
            backward = -along

    c0 = (start.x - ux * backward, start.z - uz * backward)
    c1 = (start.x + ux * forward, start.z + uz * forward)
    c2 = (c1[0] + nx * height, c1[1] + nz * height)
    c3 = (c0[0] + nx * height, c0[1] + nz * height)
    return Rectangle(
        corners=(c0, c1, c2, c3),
        edge_index=edge_index,
        direction=(ux, uz),
        normal=(nx, nz),
        width=forward + backward,
        height=height,
    )


def edge_candidates(
    points: Sequence[Point], hull: Sequence[int]
) -> Iterator[Rectangle]:
    """Yield one enclosing rectangle per non-degenerate hull edge, in order."""
    for i in range(len(hull)):
        rect = _edge_rectangle(points, hull, i)
        if rect is not None:
            yield rect


def fit_rectangle(points: Sequence[Point], hull: Sequence[int]) -> Rectangle:
    """
    Compute the minimum-area rectangle enclosing a convex hull.

    One candidate is tested per hull edge; the smallest area wins and ties
    keep the lowest edge index. A two-vertex hull produces a rectangle of
    zero height spanning the segment.

    Args:
        points: The snapshot the hull indices refer to.
        hull: Counter-clockwise hull indices from ``build_hull``.

    Returns:
        Rectangle: The winning edge-aligned rectangle.

    Raises:
        DegenerateHullError: If the hull has fewer than two distinct
            vertices.
    """
    if len(hull) < 2:
        raise DegenerateHullError(
            f"Hull with {len(hull)} vertices has no edge to fit against"
        )

    best: Optional[Rectangle] = None
    for rect in edge_candidates(points, hull):
        if best is None or rect.area < best.area:
            best = rect

    if best is None:
        raise DegenerateHullError("Hull vertices are all coincident")

    logger.debug(
        "Fitted rectangle on edge %d: %.4f x %.4f (area %.4f)",
        best.edge_index,
        best.width,
        best.height,
        best.area,
    )
    return best
