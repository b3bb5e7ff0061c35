"""Mesh assembly from points and connectivity."""

from collections.abc import Iterable, Sequence

from clipmesh.domain import Element, Mesh, Point
from clipmesh.exceptions import IndexOutOfRangeError

ELEMENT_SIZES = (3, 4)


def assemble(points: Sequence[Point], elements: Iterable[Element]) -> Mesh:
    """Combine points and connectivity into a mesh.

    Args:
        points: Vertex positions
        elements: Triangles and quads as index tuples into ``points``

    Returns:
        Mesh owning copies of the points and elements

    Raises:
        IndexOutOfRangeError: If an element is neither a triangle nor a
            quad, or references an index outside [0, len(points))
    """
    n = len(points)
    checked: list[Element] = []

    for k, element in enumerate(elements):
        element = tuple(element)
        if len(element) not in ELEMENT_SIZES:
            raise IndexOutOfRangeError(k, f"expected 3 or 4 indices, got {len(element)}")
        for idx in element:
            if not 0 <= idx < n:
                raise IndexOutOfRangeError(k, f"index {idx} outside [0, {n})")
        checked.append(element)

    return Mesh(points=tuple(points), elements=tuple(checked))
