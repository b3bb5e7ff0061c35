"""Core algorithms for clipmesh.

This module contains the core algorithms for:

- Geometric predicates (side classification, line intersection, convexity)
- Polygon clipping against convex regions (Sutherland-Hodgman)
- Regular sampling of parametric primitives
- Connectivity generation for sample grids with poles and seams
- Mesh assembly and discretization
- Parallel batch clipping

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- sideof: Classify a point against an oriented line
- intersect: Intersect two lines or segments
- clip / clip_ring / clip_polygon: Clip against a convex region
- build_connectivity: Quads and pole triangles for a sample grid
- assemble: Validate and combine points and connectivity
- discretize: Mesh a parametric primitive

Key classes:
- SutherlandHodgmanClipper: Ring and polygon clipper
- RegularSampler: Regular parametric grid sampler
- TopologyBuilder: Connectivity generator
- RegularDiscretization: Discretization pipeline
- BatchClipper: Parallel clipping of many polygons
"""

from clipmesh.core.assembly import assemble
from clipmesh.core.clipping import (
    SutherlandHodgmanClipper,
    clip,
    clip_polygon,
    clip_ring,
)
from clipmesh.core.discretization import (
    RegularDiscretization,
    discretize,
    fit_dims,
    register_topology,
    topology_of,
)
from clipmesh.core.geometry import (
    intersect,
    is_convex,
    same_point,
    sideof,
    signed_area,
    to_ccw,
)
from clipmesh.core.processor import BatchClipper, clip_polygon_task
from clipmesh.core.sampling import RegularSampler, axis_parameters, sample
from clipmesh.core.topology import TopologyBuilder, build_connectivity

__all__ = [
    # Clipping
    "BatchClipper",
    "SutherlandHodgmanClipper",
    "clip",
    "clip_polygon",
    "clip_polygon_task",
    "clip_ring",
    # Discretization
    "RegularDiscretization",
    "RegularSampler",
    "TopologyBuilder",
    "assemble",
    "axis_parameters",
    "build_connectivity",
    "discretize",
    "fit_dims",
    "register_topology",
    "sample",
    "topology_of",
    # Geometry functions
    "intersect",
    "is_convex",
    "same_point",
    "sideof",
    "signed_area",
    "to_ccw",
]
