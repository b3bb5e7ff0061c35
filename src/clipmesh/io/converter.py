"""Conversion between JSON-style data and domain models.

Polygons are written as nested coordinate lists: a polygon is a list of
rings, a ring is a list of ``[x, y]`` pairs. Primitives are objects with a
``type`` key plus their defining parameters, for example::

    {"type": "sphere", "center": [0, 0, 0], "radius": 1.0}
    {"type": "cone_surface", "base": {"center": [0, 0, 0], "radius": 1.0},
     "apex": [0, 0, 2]}
"""

from collections.abc import Callable
from typing import Any

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
    Primitive,
    Ring,
    Sphere,
)


def ring_from_coords(coords: list[list[float]]) -> Ring:
    """Build a ring from a list of coordinate pairs."""
    return Ring(tuple(Point.from_tuple(c) for c in coords))


def ring_to_coords(ring: Ring) -> list[list[float]]:
    return [list(p.to_tuple()) for p in ring.points]


def polygon_from_coords(rings: list[list[list[float]]]) -> Polygon:
    """Build a polygon from a list of rings (outer ring first)."""
    return Polygon(tuple(ring_from_coords(r) for r in rings))


def polygon_to_coords(polygon: Polygon) -> list[list[list[float]]]:
    return [ring_to_coords(r) for r in polygon.rings]


def _point(data: list[float]) -> Point:
    return Point.from_tuple(data)


def _disk(data: dict[str, Any]) -> Disk:
    normal = data.get("normal", [0.0, 0.0, 1.0])
    return Disk(
        center=_point(data["center"]),
        radius=float(data["radius"]),
        normal=(float(normal[0]), float(normal[1]), float(normal[2])),
    )


_PRIMITIVE_BUILDERS: dict[str, Callable[[dict[str, Any]], Primitive]] = {
    "box": lambda d: Box(_point(d["min"]), _point(d["max"])),
    "disk": _disk,
    "sphere": lambda d: Sphere(_point(d["center"]), float(d["radius"])),
    "cylinder_surface": lambda d: CylinderSurface(
        _point(d["bottom"]), _point(d["top"]), float(d["radius"])
    ),
    "cone_surface": lambda d: ConeSurface(_disk(d["base"]), _point(d["apex"])),
    "frustum_surface": lambda d: FrustumSurface(
        _disk(d["bottom"]), _disk(d["top"]), capped=bool(d.get("capped", False))
    ),
    "cylinder": lambda d: Cylinder(_point(d["bottom"]), _point(d["top"]), float(d["radius"])),
    "cone": lambda d: Cone(_disk(d["base"]), _point(d["apex"])),
    "frustum": lambda d: Frustum(_disk(d["bottom"]), _disk(d["top"])),
}


def primitive_types() -> list[str]:
    """Names accepted in the ``type`` field of a primitive."""
    return sorted(_PRIMITIVE_BUILDERS)


def primitive_from_dict(data: dict[str, Any]) -> Primitive:
    """Build a primitive from its JSON description.

    Raises:
        ValueError: If the type is unknown or a required key is missing
        GeometryPreconditionError: If the parameters are degenerate
    """
    kind = data.get("type")
    builder = _PRIMITIVE_BUILDERS.get(str(kind))
    if builder is None:
        raise ValueError(f"Unknown primitive type {kind!r}; expected one of {primitive_types()}")
    try:
        return builder(data)
    except KeyError as e:
        raise ValueError(f"Primitive {kind!r} is missing key {e}") from e


def clip_region_from_data(data: Any) -> Ring | Primitive:
    """Build a clip region from a coordinate list or a primitive description."""
    if isinstance(data, dict):
        return primitive_from_dict(data)
    return ring_from_coords(data)


def mesh_to_obj(mesh: Mesh) -> str:
    """Render a mesh in Wavefront OBJ format (1-based face indices)."""
    lines = ["# clipmesh"]
    for p in mesh.points:
        x, y, z = p.x, p.y, p.z if p.z is not None else 0.0
        lines.append(f"v {x!r} {y!r} {z!r}")
    for element in mesh.elements:
        lines.append("f " + " ".join(str(i + 1) for i in element))
    return "\n".join(lines) + "\n"
