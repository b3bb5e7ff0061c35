"""Mesh and topology types.

A mesh is a flat point array plus connectivity tuples indexing into it.
The topology descriptor classifies how a regular parametric sample grid is
closed into a surface: which axes wrap around and which grid ends collapse
onto (or are capped by) an extra pole vertex.
"""

from dataclasses import dataclass, field
from typing import Any

from clipmesh.domain.geometry import Point

Element = tuple[int, ...]


@dataclass(frozen=True, slots=True)
class Pole:
    """An extra vertex closing one end of a parametric axis.

    Attributes:
        axis: Parametric axis the pole sits on (0 or 1)
        at_end: False for the start of the axis (parameter 0), True for its end
        collapsed: True when the parametrization itself degenerates onto the
            pole (sphere apex, disk center); the pole's parameter value is
            then excluded from the sample grid. False for cap centers.
    """

    axis: int
    at_end: bool
    collapsed: bool = True


@dataclass(frozen=True)
class TopologyDescriptor:
    """Connectivity class of a parametric primitive.

    Attributes:
        periodic: Per-axis flag, True where the axis wraps around
        poles: Pole vertices, appended after the grid points in this order
    """

    periodic: tuple[bool, ...]
    poles: tuple[Pole, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "periodic", tuple(self.periodic))
        object.__setattr__(self, "poles", tuple(self.poles))
        for pole in self.poles:
            if not 0 <= pole.axis < len(self.periodic):
                raise ValueError(f"Pole axis {pole.axis} outside {len(self.periodic)} axes")
            if self.periodic[pole.axis]:
                raise ValueError(f"Pole on periodic axis {pole.axis}")

    @property
    def paramdim(self) -> int:
        return len(self.periodic)

    def excludes_start(self, axis: int) -> bool:
        """True if a collapsed pole replaces the start of ``axis``."""
        return any(p.axis == axis and not p.at_end and p.collapsed for p in self.poles)

    def excludes_end(self, axis: int) -> bool:
        """True if a collapsed pole replaces the end of ``axis``."""
        return any(p.axis == axis and p.at_end and p.collapsed for p in self.poles)


@dataclass(frozen=True)
class Mesh:
    """A polygonal mesh with outward-facing elements.

    Attributes:
        points: Vertex positions
        elements: Connectivity tuples (3 = triangle, 4 = quad) into ``points``
    """

    points: tuple[Point, ...]
    elements: tuple[Element, ...]
    _counts: dict[int, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "elements", tuple(tuple(e) for e in self.elements))
        counts: dict[int, int] = {}
        for element in self.elements:
            counts[len(element)] = counts.get(len(element), 0) + 1
        object.__setattr__(self, "_counts", counts)

    @property
    def n_vertices(self) -> int:
        return len(self.points)

    @property
    def n_elements(self) -> int:
        return len(self.elements)

    @property
    def n_triangles(self) -> int:
        return self._counts.get(3, 0)

    @property
    def n_quads(self) -> int:
        return self._counts.get(4, 0)

    def triangles(self) -> list[Element]:
        return [e for e in self.elements if len(e) == 3]

    def quads(self) -> list[Element]:
        return [e for e in self.elements if len(e) == 4]

    def element_points(self, idx: int) -> tuple[Point, ...]:
        """Vertex positions of element ``idx`` in connectivity order."""
        return tuple(self.points[i] for i in self.elements[idx])

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "points": [list(p.to_tuple()) for p in self.points],
            "elements": [list(e) for e in self.elements],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Mesh":
        """Deserialize from dictionary."""
        return cls(
            points=tuple(Point.from_tuple(p) for p in data["points"]),
            elements=tuple(tuple(e) for e in data["elements"]),
        )
