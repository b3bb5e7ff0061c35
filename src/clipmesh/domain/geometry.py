"""Core geometric types for polygon representation.

This module defines the fundamental geometric types used throughout clipmesh:
- Point: A 2-D or 3-D point compared by exact coordinates
- Line / Segment: Oriented lines defining a half-plane
- Ring: A closed polygonal boundary
- Polygon: An outer ring with optional holes
- WindingDirection: Enum for ring winding direction
- Side: Enum for the side of a line a point lies on
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar


class WindingDirection(Enum):
    """Ring winding direction.

    By convention the outer ring of a polygon winds counter-clockwise and
    holes wind clockwise.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class Side(Enum):
    """Position of a point relative to an oriented line."""

    LEFT = auto()
    RIGHT = auto()
    ON = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2-D or 3-D space.

    Immutable and hashable for use in sets/dicts. A point is 2-D when
    ``z`` is None.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate, or None for planar points
    """

    x: float
    y: float
    z: float | None = None

    @property
    def dim(self) -> int:
        """Number of coordinates."""
        return 2 if self.z is None else 3

    def to_tuple(self) -> tuple[float, ...]:
        """Convert to a plain coordinate tuple.

        Returns:
            Tuple of (x, y) or (x, y, z) coordinates
        """
        if self.z is None:
            return (self.x, self.y)
        return (self.x, self.y, self.z)

    @classmethod
    def from_tuple(cls, coords: tuple[float, ...] | list[float]) -> "Point":
        """Build a point from 2 or 3 coordinates.

        Raises:
            ValueError: If the sequence does not hold 2 or 3 numbers
        """
        if len(coords) == 2:
            return cls(float(coords[0]), float(coords[1]))
        if len(coords) == 3:
            return cls(float(coords[0]), float(coords[1]), float(coords[2]))
        raise ValueError(f"Expected 2 or 3 coordinates, got {len(coords)}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x, y and (for 3-D points) z fields
        """
        data: dict[str, Any] = {"x": self.x, "y": self.y}
        if self.z is not None:
            data["z"] = self.z
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and optional z fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"], z=data.get("z"))


@dataclass(frozen=True, slots=True)
class Line:
    """An oriented infinite line through two points.

    The left side of the line (looking from ``start`` towards ``end``) is
    the inside half-plane used by the clipper.

    Attributes:
        start: First point on the line
        end: Second point on the line, fixes the orientation
    """

    start: Point
    end: Point

    bounded: ClassVar[bool] = False

    def direction(self) -> tuple[float, float]:
        """Planar direction vector from start to end."""
        return (self.end.x - self.start.x, self.end.y - self.start.y)

    def point_at(self, t: float) -> Point:
        """Evaluate the line at parameter ``t`` (0 = start, 1 = end)."""
        x = self.start.x + t * (self.end.x - self.start.x)
        y = self.start.y + t * (self.end.y - self.start.y)
        if self.start.z is None or self.end.z is None:
            return Point(x, y)
        return Point(x, y, self.start.z + t * (self.end.z - self.start.z))


@dataclass(frozen=True, slots=True)
class Segment(Line):
    """A line segment, the bounded part of a line between its two points."""

    bounded: ClassVar[bool] = True


@dataclass(frozen=True)
class Ring:
    """A closed polygonal boundary.

    The last point implicitly connects back to the first. The ring is
    expected to be simple (non self-intersecting); this is not verified.

    Attributes:
        points: Ordered ring vertices
    """

    points: tuple[Point, ...]
    _area: float = field(default=0.0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        points = tuple(self.points)
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "_area", _shoelace(points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def vertices(self) -> tuple[Point, ...]:
        return self.points

    def signed_area(self) -> float:
        """Signed area using the shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Returns:
            Signed area of the ring
        """
        return self._area

    def orientation(self) -> WindingDirection:
        """Winding direction derived from the signed area."""
        if self._area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE

    def reverse(self) -> "Ring":
        """Return the same ring traversed in the opposite direction."""
        return Ring(tuple(reversed(self.points)))

    def edges(self) -> list[Segment]:
        """Directed edges of the ring, including the closing edge."""
        n = len(self.points)
        return [Segment(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def is_degenerate(self) -> bool:
        """True if the ring has fewer than 3 distinct points."""
        return len(set(self.points)) < 3

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the ring.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ring":
        """Deserialize from dictionary."""
        return cls(tuple(Point.from_dict(p) for p in data["points"]))


@dataclass(frozen=True)
class Polygon:
    """A polygonal area bounded by an outer ring and optional holes.

    The outer ring winds counter-clockwise by convention and holes wind
    clockwise.

    Attributes:
        rings: Outer ring followed by the hole rings
    """

    rings: tuple[Ring, ...]

    def __post_init__(self) -> None:
        rings = tuple(self.rings)
        if not rings:
            raise ValueError("Polygon requires at least an outer ring")
        object.__setattr__(self, "rings", rings)

    @property
    def outer(self) -> Ring:
        return self.rings[0]

    @property
    def holes(self) -> tuple[Ring, ...]:
        return self.rings[1:]

    def has_holes(self) -> bool:
        return len(self.rings) > 1

    def boundary(self) -> Ring:
        """Outer boundary ring."""
        return self.outer

    def area(self) -> float:
        """Enclosed area: outer area minus the hole areas."""
        total = abs(self.outer.signed_area())
        for hole in self.holes:
            total -= abs(hole.signed_area())
        return total

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"rings": [r.to_dict() for r in self.rings]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary."""
        return cls(tuple(Ring.from_dict(r) for r in data["rings"]))


def _shoelace(points: tuple[Point, ...]) -> float:
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0
