"""Domain models for clipmesh.

This module contains the value types the kernel operates on: planar
polygons for clipping, parametric primitives for discretization, and the
resulting meshes. All models are designed to be:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (batch clipping)
- Independent of any particular file format

Key classes:
- Point: A 2-D or 3-D point
- Line / Segment: Oriented lines defining a half-plane
- Ring / Polygon: Closed boundaries and areas with holes
- IntersectionResult: Tagged result of a line intersection
- Pole / TopologyDescriptor: Connectivity class of a primitive
- Mesh: Points plus connectivity
- Box, Disk, Sphere, CylinderSurface, ConeSurface, FrustumSurface,
  Cylinder, Cone, Frustum: Parametric primitives
"""

from clipmesh.domain.geometry import (
    Line,
    Point,
    Polygon,
    Ring,
    Segment,
    Side,
    WindingDirection,
)
from clipmesh.domain.intersection import IntersectionResult, IntersectionType
from clipmesh.domain.mesh import Element, Mesh, Pole, TopologyDescriptor
from clipmesh.domain.primitives import (
    Box,
    Cone,
    ConeSurface,
    Cylinder,
    CylinderSurface,
    Disk,
    Frustum,
    FrustumSurface,
    Primitive,
    Sphere,
)

__all__: list[str] = [
    # Enums
    "IntersectionType",
    "Side",
    "WindingDirection",
    # Planar types
    "IntersectionResult",
    "Line",
    "Point",
    "Polygon",
    "Ring",
    "Segment",
    # Mesh types
    "Element",
    "Mesh",
    "Pole",
    "TopologyDescriptor",
    # Primitives
    "Box",
    "Cone",
    "ConeSurface",
    "Cylinder",
    "CylinderSurface",
    "Disk",
    "Frustum",
    "FrustumSurface",
    "Primitive",
    "Sphere",
]
