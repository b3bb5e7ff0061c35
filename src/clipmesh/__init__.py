"""clipmesh - Convex polygon clipping and parametric primitive meshing.

clipmesh is a small computational-geometry kernel. It clips polygons (with
holes) against convex regions using the Sutherland-Hodgman algorithm, and
discretizes parametric primitives such as spheres, cylinders, cones and
frustums into meshes with consistent outward orientation, closing poles
with triangle fans and periodic seams with wrap-around quads.

Example:
    >>> from clipmesh import Point, Sphere, discretize
    >>> mesh = discretize(Sphere(Point(0.0, 0.0, 0.0), 1.0), 8, 16)
    >>> mesh.n_vertices
    130
"""

from clipmesh.core import clip, discretize
from clipmesh.domain import (
    Box,
    Cone,
    ConeSurface,
    Cylinder,
    CylinderSurface,
    Disk,
    Frustum,
    FrustumSurface,
    Mesh,
    Point,
    Polygon,
    Ring,
    Sphere,
)

__version__ = "0.1.0"

__all__ = [
    "Box",
    "Cone",
    "ConeSurface",
    "Cylinder",
    "CylinderSurface",
    "Disk",
    "Frustum",
    "FrustumSurface",
    "Mesh",
    "Point",
    "Polygon",
    "Ring",
    "Sphere",
    "__version__",
    "clip",
    "discretize",
]
