"""
Room footprint - minimum-area rectangle fitting for scanned floor points.

Feed 3D sample points into a RoomFinder as they arrive and query the
axis-aligned bounds or the edge-aligned minimum-area rectangle of their
footprint in the horizontal (x, z) plane at any time.
"""

from room_footprint.config import FootprintConfig, get_config
from room_footprint.exceptions import (
    DegenerateHullError,
    EmptySetError,
    InvalidPointError,
    RoomFootprintError,
)
from room_footprint.hull import (
    build_hull,
    hull_points,
    orientation,
    polygon_contains,
)
from room_footprint.point_set import PointSet
from room_footprint.rectangle import edge_candidates, fit_rectangle
from room_footprint.room_finder import RoomFinder
from room_footprint.value_objects import Bounds, Point, Rectangle

__version__ = "0.1.0"

__all__ = [
    # Facade & config
    "RoomFinder",
    "FootprintConfig",
    "get_config",
    # Value objects
    "Point",
    "Bounds",
    "Rectangle",
    # Geometry
    "PointSet",
    "orientation",
    "build_hull",
    "hull_points",
    "polygon_contains",
    "edge_candidates",
    "fit_rectangle",
    # Errors
    "RoomFootprintError",
    "EmptySetError",
    "DegenerateHullError",
    "InvalidPointError",
]
