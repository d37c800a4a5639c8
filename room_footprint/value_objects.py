"""
Immutable value objects for the room_footprint package.

These frozen dataclasses are the read-only snapshots handed to consumers of
the geometry queries.

Value objects are:
- Immutable (frozen=True)
- Hashable (can be used in sets/dict keys)
- Self-validating (validate in __post_init__)

Classes:
    Point: 3D sample coordinate (x, y, z), y is the vertical axis
    Bounds: Axis-aligned box spanning a set of points
    Rectangle: Edge-aligned rectangle in the horizontal (x, z) plane
"""

from dataclasses import dataclass
from math import atan2, degrees, isfinite
from numbers import Real
from typing import Any, Dict, List, Sequence, Tuple

from room_footprint.exceptions import EmptySetError, InvalidPointError

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Point:
    """
    Immutable 3D sample point.

    Only x and z take part in hull and rectangle computation; y is kept
    for the bounding volume.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
        z: Horizontal coordinate
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Validate and normalize to float."""
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidPointError(
                    f"{name} must be numeric, got {type(value).__name__}"
                )
            if not isfinite(value):
                raise InvalidPointError(f"{name} must be finite, got {value}")
            # Convert to float if int (frozen dataclass workaround)
            object.__setattr__(self, name, float(value))

    def planar(self) -> Vec2:
        """Projection onto the horizontal plane as (x, z)."""
        return (self.x, self.z)

    def distance_squared(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Point":
        """
        Create from dictionary.

        Args:
            d: Dict with 'x', 'y' and 'z' keys

        Returns:
            Point instance
        """
        try:
            return cls(x=d["x"], y=d["y"], z=d["z"])
        except KeyError as e:
            raise InvalidPointError(f"Missing coordinate {e}") from e

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Point":
        """Create from an (x, y, z) tuple or list."""
        if len(values) != 3:
            raise InvalidPointError(
                f"Expected 3 coordinates, got {len(values)}"
            )
        return cls(x=values[0], y=values[1], z=values[2])

    @classmethod
    def coerce(cls, value: Any) -> "Point":
        """Return ``value`` as a Point, accepting Points and sequences."""
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls.from_dict(value)
        if isinstance(value, (tuple, list)):
            return cls.from_sequence(value)
        raise InvalidPointError(
            f"Cannot build a Point from {type(value).__name__}"
        )


@dataclass(frozen=True)
class Bounds:
    """
    Immutable axis-aligned bounding box.

    Attributes:
        minimum: Corner with the smallest x, y and z
        maximum: Corner with the largest x, y and z
    """

    minimum: Point
    maximum: Point

    def __post_init__(self) -> None:
        if (
            self.minimum.x > self.maximum.x
            or self.minimum.y > self.maximum.y
            or self.minimum.z > self.maximum.z
        ):
            raise ValueError(
                f"minimum {self.minimum} exceeds maximum {self.maximum}"
            )

    @property
    def center(self) -> Point:
        return Point(
            (self.minimum.x + self.maximum.x) / 2.0,
            (self.minimum.y + self.maximum.y) / 2.0,
            (self.minimum.z + self.maximum.z) / 2.0,
        )

    @property
    def size(self) -> Tuple[float, float, float]:
        return (
            self.maximum.x - self.minimum.x,
            self.maximum.y - self.minimum.y,
            self.maximum.z - self.minimum.z,
        )

    @property
    def extents(self) -> Tuple[float, float, float]:
        """Half of ``size`` along each axis."""
        sx, sy, sz = self.size
        return (sx / 2.0, sy / 2.0, sz / 2.0)

    def contains(self, point: Point) -> bool:
        return bool(
            self.minimum.x <= point.x <= self.maximum.x
            and self.minimum.y <= point.y <= self.maximum.y
            and self.minimum.z <= point.z <= self.maximum.z
        )

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {"min": self.minimum.to_dict(), "max": self.maximum.to_dict()}

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "Bounds":
        """
        Build the smallest box containing every point.

        Raises:
            EmptySetError: If ``points`` is empty.
        """
        if not points:
            raise EmptySetError("Cannot compute bounds of an empty point set")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        zs = [p.z for p in points]
        return cls(
            minimum=Point(min(xs), min(ys), min(zs)),
            maximum=Point(max(xs), max(ys), max(zs)),
        )


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable rectangle in the horizontal plane, aligned to a hull edge.

    Corners are (x, z) pairs in order, so consecutive corners share an
    edge and the last corner connects back to the first. The first two
    corners lie on the line through the source hull edge.

    Attributes:
        corners: Four (x, z) corner coordinates
        edge_index: Index into the hull of the edge the rectangle is
            aligned to
        direction: Unit vector of the source edge
        normal: Unit vector perpendicular to ``direction``, pointing into
            the rectangle
        width: Extent along ``direction``
        height: Extent along ``normal``
    """

    corners: Tuple[Vec2, Vec2, Vec2, Vec2]
    edge_index: int
    direction: Vec2
    normal: Vec2
    width: float
    height: float

    def __post_init__(self) -> None:
        if len(self.corners) != 4:
            raise ValueError(
                f"Rectangle needs 4 corners, got {len(self.corners)}"
            )
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle extents must be non-negative")

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Vec2:
        return (
            sum(c[0] for c in self.corners) / 4.0,
            sum(c[1] for c in self.corners) / 4.0,
        )

    @property
    def angle_degrees(self) -> float:
        """Angle of the source edge measured from +x towards +z."""
        return degrees(atan2(self.direction[1], self.direction[0]))

    def contains(self, x: float, z: float, tolerance: float = 1e-9) -> bool:
        """Determines if (x, z) lies inside or on the rectangle.

        Args:
            x (float): The x-coordinate of the point.
            z (float): The z-coordinate of the point.
            tolerance (float, optional): Slack allowed on every side.
                Defaults to 1e-9.

        Returns:
            bool: True if the point is inside the rectangle.
        """
        ox, oz = self.corners[0]
        along = (x - ox) * self.direction[0] + (z - oz) * self.direction[1]
        across = (x - ox) * self.normal[0] + (z - oz) * self.normal[1]
        return bool(
            -tolerance <= along <= self.width + tolerance
            and -tolerance <= across <= self.height + tolerance
        )

    def to_points(self, y: float = 0.0) -> List[Point]:
        """Lift the corners back into 3D at height ``y``."""
        return [Point(cx, y, cz) for cx, cz in self.corners]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "corners": [{"x": cx, "z": cz} for cx, cz in self.corners],
            "edge_index": self.edge_index,
            "angle_degrees": self.angle_degrees,
            "width": self.width,
            "height": self.height,
            "area": self.area,
        }
