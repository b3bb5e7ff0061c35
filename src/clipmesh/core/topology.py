"""Connectivity generation for regular parametric sample grids.

Works purely on integer indices. Grid point (i, j) has index ``i + j * n1``
(first parametric axis fastest) and pole vertices follow the grid in
descriptor order, starting at ``n1 * n2``.

Element orientation is fixed by the interior quad traversal
``(i, j) -> (i+1, j) -> (i+1, j+1) -> (i, j+1)``, which faces along the
parametric normal dP/du x dP/dv. Pole triangles are the quads of the cell
between the pole and its neighbouring ring with the two pole corners
merged, so they inherit the same orientation; the two ends of an axis
therefore wind in opposite directions.
"""

import logging
import math

from clipmesh.domain import Element, Pole, TopologyDescriptor
from clipmesh.exceptions import InvalidResolutionError

logger = logging.getLogger(__name__)

MIN_SAMPLES = 2


class TopologyBuilder:
    """Builds quad/triangle connectivity for a 2-D sample grid.

    Example:
        builder = TopologyBuilder((8, 16), descriptor)
        elements = builder.build()
    """

    def __init__(self, dims: tuple[int, ...], descriptor: TopologyDescriptor) -> None:
        """Validate grid dimensions against the descriptor.

        Args:
            dims: Samples per parametric axis
            descriptor: Periodicity and poles of the primitive

        Raises:
            ValueError: If dims and descriptor disagree or the grid is not 2-D
            InvalidResolutionError: If an axis has fewer than MIN_SAMPLES samples
        """
        if len(dims) != descriptor.paramdim:
            raise ValueError(
                f"Grid has {len(dims)} axes but topology describes {descriptor.paramdim}"
            )
        if len(dims) != 2:
            raise ValueError(f"Surface connectivity needs a 2-D grid, got {len(dims)}-D")

        for axis, n in enumerate(dims):
            if n < MIN_SAMPLES:
                raise InvalidResolutionError(axis, n, MIN_SAMPLES)

        self.dims = tuple(dims)
        self.descriptor = descriptor

    @property
    def grid_size(self) -> int:
        return math.prod(self.dims)

    @property
    def n_points(self) -> int:
        """Grid points plus pole vertices."""
        return self.grid_size + len(self.descriptor.poles)

    def _index(self, i: int, j: int) -> int:
        return i + j * self.dims[0]

    def _cells(self, axis: int) -> int:
        return self.dims[axis] - 1 + int(self.descriptor.periodic[axis])

    def quads(self) -> list[Element]:
        """Interior quads, wrapping periodic axes back to index 0."""
        n1, n2 = self.dims
        elements: list[Element] = []
        for j in range(self._cells(1)):
            j1 = (j + 1) % n2
            for i in range(self._cells(0)):
                i1 = (i + 1) % n1
                elements.append(
                    (self._index(i, j), self._index(i1, j), self._index(i1, j1), self._index(i, j1))
                )
        return elements

    def pole_fan(self, pole: Pole, pole_index: int) -> list[Element]:
        """Triangles joining a pole to the ring of samples next to it."""
        n1, n2 = self.dims
        elements: list[Element] = []

        if pole.axis == 0:
            i = n1 - 1 if pole.at_end else 0
            for j in range(self._cells(1)):
                j1 = (j + 1) % n2
                if pole.at_end:
                    elements.append((pole_index, self._index(i, j1), self._index(i, j)))
                else:
                    elements.append((pole_index, self._index(i, j), self._index(i, j1)))
        else:
            j = n2 - 1 if pole.at_end else 0
            for i in range(self._cells(0)):
                i1 = (i + 1) % n1
                if pole.at_end:
                    elements.append((pole_index, self._index(i, j), self._index(i1, j)))
                else:
                    elements.append((pole_index, self._index(i1, j), self._index(i, j)))

        return elements

    def build(self) -> tuple[Element, ...]:
        """Interior quads followed by the pole fans in descriptor order."""
        elements = self.quads()
        for k, pole in enumerate(self.descriptor.poles):
            elements.extend(self.pole_fan(pole, self.grid_size + k))

        logger.debug(
            "Connectivity built: dims=%s periodic=%s poles=%d elements=%d",
            self.dims,
            self.descriptor.periodic,
            len(self.descriptor.poles),
            len(elements),
        )
        return tuple(elements)

    def expected_counts(self) -> tuple[int, int]:
        """Number of (quads, triangles) the grid produces."""
        quads = self._cells(0) * self._cells(1)
        triangles = sum(self._cells(1 - pole.axis) for pole in self.descriptor.poles)
        return quads, triangles


def build_connectivity(
    dims: tuple[int, ...], descriptor: TopologyDescriptor
) -> tuple[Element, ...]:
    """Build connectivity for a sample grid. See TopologyBuilder."""
    return TopologyBuilder(dims, descriptor).build()
