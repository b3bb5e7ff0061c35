"""Regular sampling of parametric primitives.

Samples a primitive on a regular grid over its normalized parameter domain,
first parametric axis fastest. Periodic axes are sampled on [0, 1) so the
wrap-around sample is not duplicated; other axes span [0, 1]. Where a
collapsed pole replaces an end of an axis, that end is left out of the
grid and the pole is emitted once after the grid points instead.
"""

from collections.abc import Iterator
from itertools import product

from clipmesh.domain import Point, Pole, TopologyDescriptor


def axis_parameters(
    n: int,
    periodic: bool,
    exclude_start: bool = False,
    exclude_end: bool = False,
) -> list[float]:
    """Regularly spaced parameter values along one axis.

    Args:
        n: Number of samples
        periodic: Sample [0, 1) instead of [0, 1]
        exclude_start: Leave out parameter 0 (a collapsed pole sits there)
        exclude_end: Leave out parameter 1

    Returns:
        ``n`` increasing values in [0, 1]

    Examples:
        >>> axis_parameters(4, periodic=True)
        [0.0, 0.25, 0.5, 0.75]
        >>> axis_parameters(3, periodic=False, exclude_start=True, exclude_end=True)
        [0.25, 0.5, 0.75]
    """
    if periodic:
        return [k / n for k in range(n)]

    lo = int(exclude_start)
    slots = n - 1 + lo + int(exclude_end)
    if slots == 0:
        return [0.0]
    return [(k + lo) / slots for k in range(n)]


class RegularSampler:
    """Samples primitives on a regular parametric grid.

    The sampler is deterministic and restartable: every call to ``sample``
    returns a fresh generator yielding the same points.
    """

    def __init__(self, sizes: tuple[int, ...]) -> None:
        """Initialize the sampler.

        Args:
            sizes: Samples per parametric axis
        """
        self.sizes = tuple(sizes)

    def parameters(self, descriptor: TopologyDescriptor) -> list[list[float]]:
        """Per-axis parameter values for a primitive with the given topology."""
        return [
            axis_parameters(
                n,
                descriptor.periodic[axis],
                exclude_start=descriptor.excludes_start(axis),
                exclude_end=descriptor.excludes_end(axis),
            )
            for axis, n in enumerate(self.sizes)
        ]

    def sample(self, geometry, descriptor: TopologyDescriptor) -> Iterator[Point]:
        """Yield grid points followed by pole points.

        Args:
            geometry: Parametric primitive used as a point oracle
            descriptor: Topology of the primitive

        Yields:
            ``prod(sizes)`` grid points, then one point per pole
        """
        params = self.parameters(descriptor)
        for combo in product(*reversed(params)):
            yield geometry(*reversed(combo))

        for pole in descriptor.poles:
            yield pole_point(geometry, pole, len(self.sizes))


def pole_point(geometry, pole: Pole, paramdim: int) -> Point:
    """Position of a pole vertex.

    Collapsed poles are evaluated through the parametrization at the
    collapsed end of their axis; cap poles ask the primitive for its cap
    center.
    """
    if not pole.collapsed:
        return geometry.cap_center(pole.at_end)

    params = [0.0] * paramdim
    params[pole.axis] = 1.0 if pole.at_end else 0.0
    return geometry(*params)


def sample(geometry, sizes: tuple[int, ...], descriptor: TopologyDescriptor) -> Iterator[Point]:
    """Sample a primitive on a regular grid. See RegularSampler.sample."""
    return RegularSampler(sizes).sample(geometry, descriptor)
