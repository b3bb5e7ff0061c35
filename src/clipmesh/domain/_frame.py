"""Small 3-D vector helpers for placing primitives in space."""

import math

from clipmesh.domain.geometry import Point

Vec3 = tuple[float, float, float]


def sub(a: Point, b: Point) -> Vec3:
    return (a.x - b.x, a.y - b.y, (a.z or 0.0) - (b.z or 0.0))


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def norm(a: Vec3) -> float:
    return math.sqrt(dot(a, a))


def normalize(a: Vec3) -> Vec3:
    length = norm(a)
    if length < 1e-15:
        raise ValueError("Cannot normalize a zero-length vector")
    return (a[0] / length, a[1] / length, a[2] / length)


def frame_from_axis(axis: Vec3) -> tuple[Vec3, Vec3, Vec3]:
    """Orthonormal frame (u, v, w) with ``w`` along ``axis``.

    The frame is the image of the standard basis under the minimal rotation
    taking +z onto ``axis`` (Rodrigues' formula), so an axis of +z yields
    the standard basis.
    """
    w = normalize(axis)
    c = w[2]

    # Antiparallel to +z: rotate by pi about x
    if c < -1.0 + 1e-12:
        return (1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, -1.0)

    s = 1.0 + c
    u = (c + w[1] * w[1] / s, -w[0] * w[1] / s, -w[0])
    v = (-w[0] * w[1] / s, c + w[0] * w[0] / s, -w[1])
    return u, v, w


def place(origin: Point, frame: tuple[Vec3, Vec3, Vec3], local: Vec3) -> Point:
    """Map local frame coordinates to a world point relative to ``origin``."""
    u, v, w = frame
    x = origin.x + local[0] * u[0] + local[1] * v[0] + local[2] * w[0]
    y = origin.y + local[0] * u[1] + local[1] * v[1] + local[2] * w[1]
    z = (origin.z or 0.0) + local[0] * u[2] + local[1] * v[2] + local[2] * w[2]
    return Point(x, y, z)
