"""Intersection result types."""

from dataclasses import dataclass
from enum import Enum, auto

from clipmesh.domain.geometry import Point


class IntersectionType(Enum):
    """Kind of intersection between two lines or segments.

    - CROSSING: the arguments meet in a single point
    - OVERLAPPING: the arguments are collinear and share a stretch
    - NONE: parallel, or the crossing lies outside a bounded argument
    """

    CROSSING = auto()
    OVERLAPPING = auto()
    NONE = auto()


@dataclass(frozen=True, slots=True)
class IntersectionResult:
    """Tagged intersection result.

    For OVERLAPPING results ``point`` is only a representative vertex (the
    start of the first argument), not the overlap geometry.

    Attributes:
        type: Kind of intersection
        point: Intersection point, None for NONE results
    """

    type: IntersectionType
    point: Point | None = None

    @classmethod
    def crossing(cls, point: Point) -> "IntersectionResult":
        return cls(IntersectionType.CROSSING, point)

    @classmethod
    def overlapping(cls, point: Point) -> "IntersectionResult":
        return cls(IntersectionType.OVERLAPPING, point)

    @classmethod
    def none(cls) -> "IntersectionResult":
        return cls(IntersectionType.NONE)

    def __bool__(self) -> bool:
        return self.type is not IntersectionType.NONE
