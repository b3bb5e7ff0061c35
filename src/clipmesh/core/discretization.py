"""Regular discretization of parametric primitives into meshes.

Each primitive type registers the topology descriptor describing how its
sample grid closes up (periodic seams, poles, caps). Discretization then
runs the same pipeline for every primitive:

    sizes -> topology lookup -> RegularSampler -> TopologyBuilder -> assemble

Solid primitives (three parametric dimensions) are discretized through
their closed boundary surface.
"""

import logging
from collections.abc import Callable

from clipmesh.config import DiscretizationConfig
from clipmesh.core.assembly import assemble
from clipmesh.core.sampling import RegularSampler
from clipmesh.core.topology import TopologyBuilder
from clipmesh.domain import (
    Box,
    ConeSurface,
    CylinderSurface,
    Disk,
    FrustumSurface,
    Mesh,
    Pole,
    Primitive,
    Sphere,
    TopologyDescriptor,
)
from clipmesh.exceptions import GeometryPreconditionError

logger = logging.getLogger(__name__)

TopologyFactory = Callable[[Primitive], TopologyDescriptor]

_TOPOLOGY_REGISTRY: dict[type, TopologyFactory] = {}


def register_topology(cls: type) -> Callable[[TopologyFactory], TopologyFactory]:
    """Register the topology factory for a primitive type.

    Example:
        @register_topology(Sphere)
        def _sphere(sphere):
            return TopologyDescriptor((False, True), (Pole(0, False), Pole(0, True)))
    """

    def decorator(factory: TopologyFactory) -> TopologyFactory:
        _TOPOLOGY_REGISTRY[cls] = factory
        return factory

    return decorator


def topology_of(geometry: Primitive) -> TopologyDescriptor:
    """Look up the topology descriptor of a primitive.

    Subclasses inherit the registration of their closest registered base.
    Unregistered primitives are treated as plain grids with their own
    periodicity flags.
    """
    for cls in type(geometry).__mro__:
        factory = _TOPOLOGY_REGISTRY.get(cls)
        if factory is not None:
            return factory(geometry)
    return TopologyDescriptor(periodic=geometry.is_periodic())


@register_topology(Box)
def _box_topology(box: Box) -> TopologyDescriptor:
    return TopologyDescriptor(periodic=(False, False))


@register_topology(Disk)
def _disk_topology(disk: Disk) -> TopologyDescriptor:
    # center collapses the radius axis at 0
    return TopologyDescriptor(periodic=(False, True), poles=(Pole(0, at_end=False),))


@register_topology(Sphere)
def _sphere_topology(sphere: Sphere) -> TopologyDescriptor:
    # north pole at polar angle 0, south pole at 1
    return TopologyDescriptor(
        periodic=(False, True),
        poles=(Pole(0, at_end=False), Pole(0, at_end=True)),
    )


@register_topology(CylinderSurface)
def _cylinder_topology(surface: CylinderSurface) -> TopologyDescriptor:
    return TopologyDescriptor(
        periodic=(True, False),
        poles=(Pole(1, at_end=False, collapsed=False), Pole(1, at_end=True, collapsed=False)),
    )


@register_topology(ConeSurface)
def _cone_topology(surface: ConeSurface) -> TopologyDescriptor:
    # apex collapses the height axis at 0, the base disk caps it at 1
    return TopologyDescriptor(
        periodic=(True, False),
        poles=(Pole(1, at_end=False), Pole(1, at_end=True, collapsed=False)),
    )


@register_topology(FrustumSurface)
def _frustum_topology(surface: FrustumSurface) -> TopologyDescriptor:
    if not surface.capped:
        return TopologyDescriptor(periodic=(True, False))
    return TopologyDescriptor(
        periodic=(True, False),
        poles=(Pole(1, at_end=False, collapsed=False), Pole(1, at_end=True, collapsed=False)),
    )


def fit_dims(sizes: tuple[int, ...], paramdim: int) -> tuple[int, ...]:
    """Fit sizes to a parametric dimension, repeating the last size as needed.

    Examples:
        >>> fit_dims((10,), 2)
        (10, 10)
        >>> fit_dims((4, 5, 6), 2)
        (4, 5)
    """
    if not sizes:
        raise ValueError("At least one size is required")
    return tuple(sizes[i] if i < len(sizes) else sizes[-1] for i in range(paramdim))


class RegularDiscretization:
    """Discretize primitives with regularly spaced samples per parametric axis.

    Example:
        method = RegularDiscretization(10, 20)
        mesh = method.discretize(Sphere(Point(0, 0, 0), 1.0))
    """

    def __init__(self, *sizes: int, config: DiscretizationConfig | None = None) -> None:
        """Initialize the method.

        Args:
            sizes: Samples per parametric axis; the last size is repeated for
                missing axes. Defaults to ``config.default_samples``.
            config: Discretization defaults
        """
        self.config = config or DiscretizationConfig()
        self.sizes = tuple(sizes) if sizes else (self.config.default_samples,)

    def discretize(self, geometry: Primitive) -> Mesh:
        """Discretize a primitive into a mesh.

        Raises:
            GeometryPreconditionError: If the geometry cannot be discretized
            InvalidResolutionError: If a size is below the minimum
        """
        if not isinstance(geometry, Primitive):
            raise GeometryPreconditionError(
                f"Cannot discretize {type(geometry).__name__}: not a parametric primitive"
            )

        if geometry.paramdim == 3:
            boundary = getattr(geometry, "boundary", None)
            if boundary is None:
                raise GeometryPreconditionError(
                    f"Cannot discretize solid {type(geometry).__name__} without a boundary"
                )
            logger.debug("Discretizing boundary of solid %s", type(geometry).__name__)
            return self.discretize(boundary())

        if geometry.paramdim != 2:
            raise GeometryPreconditionError(
                f"Cannot discretize {type(geometry).__name__} with paramdim {geometry.paramdim}"
            )

        dims = fit_dims(self.sizes, geometry.paramdim)
        descriptor = topology_of(geometry)

        # Resolution is validated before any point is sampled
        builder = TopologyBuilder(dims, descriptor)
        points = tuple(RegularSampler(dims).sample(geometry, descriptor))
        elements = builder.build()

        mesh = assemble(points, elements)
        logger.debug(
            "Discretized %s: dims=%s vertices=%d elements=%d",
            type(geometry).__name__,
            dims,
            mesh.n_vertices,
            mesh.n_elements,
        )
        return mesh


def discretize(
    geometry: Primitive, *sizes: int, config: DiscretizationConfig | None = None
) -> Mesh:
    """Discretize a primitive with regular sampling. See RegularDiscretization."""
    return RegularDiscretization(*sizes, config=config).discretize(geometry)
