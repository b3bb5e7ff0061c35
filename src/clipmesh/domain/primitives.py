"""Parametric primitives used as point-sampling oracles.

Every primitive maps normalized parameters in [0, 1]^paramdim to a point.
Evaluation outside that domain raises DomainError. Construction validates
the defining parameters and raises GeometryPreconditionError for degenerate
input.

Parametrizations:
- Box: (u, v) along x and y
- Disk: (radius fraction, angle)
- Sphere: (polar angle from the north pole, azimuth)
- CylinderSurface / ConeSurface / FrustumSurface: (angle around the axis, height)
- Cylinder / Frustum: (angle, radius fraction, height)
- Cone: (angle, opening angle fraction, height from the apex)
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from clipmesh.domain import _frame
from clipmesh.domain.geometry import Point, Ring
from clipmesh.exceptions import DomainError, GeometryPreconditionError

_TWO_PI = 2.0 * math.pi


class Primitive(ABC):
    """Base class for parametric primitives."""

    paramdim: ClassVar[int]
    periodic: ClassVar[tuple[bool, ...]]

    def is_periodic(self) -> tuple[bool, ...]:
        """Per-axis periodicity of the parametrization."""
        return self.periodic

    def __call__(self, *params: float) -> Point:
        if len(params) != self.paramdim:
            raise ValueError(
                f"{type(self).__name__} takes {self.paramdim} parameters, got {len(params)}"
            )
        if any(t < 0.0 or t > 1.0 for t in params):
            raise DomainError(type(self).__name__, tuple(params))
        return self._evaluate(*params)

    @abstractmethod
    def _evaluate(self, *params: float) -> Point:
        """Evaluate at parameters already known to lie in the domain."""


def _require_3d(name: str, point: Point) -> None:
    if point.dim != 3:
        raise GeometryPreconditionError(f"{name} must be a 3-D point, got {point}")


def _require_positive(name: str, value: float) -> None:
    if not value > 0.0:
        raise GeometryPreconditionError(f"{name} must be positive, got {value}")


def _axis_between(name: str, start: Point, end: Point) -> tuple[_frame.Vec3, float]:
    axis = _frame.sub(end, start)
    length = _frame.norm(axis)
    if length < 1e-12:
        raise GeometryPreconditionError(f"{name} endpoints must be distinct")
    return axis, length


@dataclass(frozen=True)
class Box(Primitive):
    """Axis-aligned rectangle between two 2-D corners."""

    min_corner: Point
    max_corner: Point

    paramdim: ClassVar[int] = 2
    periodic: ClassVar[tuple[bool, ...]] = (False, False)

    def __post_init__(self) -> None:
        if self.min_corner.dim != 2 or self.max_corner.dim != 2:
            raise GeometryPreconditionError("Box corners must be 2-D points")
        if not (self.min_corner.x < self.max_corner.x and self.min_corner.y < self.max_corner.y):
            raise GeometryPreconditionError(
                f"Box corners {self.min_corner} and {self.max_corner} do not span an area"
            )

    def _evaluate(self, u: float, v: float) -> Point:
        lo, hi = self.min_corner, self.max_corner
        return Point(lo.x + u * (hi.x - lo.x), lo.y + v * (hi.y - lo.y))

    def boundary(self) -> Ring:
        """Counter-clockwise boundary ring."""
        lo, hi = self.min_corner, self.max_corner
        return Ring((Point(lo.x, lo.y), Point(hi.x, lo.y), Point(hi.x, hi.y), Point(lo.x, hi.y)))


@dataclass(frozen=True)
class Disk(Primitive):
    """Flat disk; planar when ``center`` is 2-D, else lying in the plane normal to ``normal``."""

    center: Point
    radius: float
    normal: tuple[float, float, float] = (0.0, 0.0, 1.0)

    paramdim: ClassVar[int] = 2
    periodic: ClassVar[tuple[bool, ...]] = (False, True)

    def __post_init__(self) -> None:
        _require_positive("Disk radius", self.radius)
        if _frame.norm(self.normal) < 1e-12:
            raise GeometryPreconditionError("Disk normal must be non-zero")

    def frame(self) -> tuple[_frame.Vec3, _frame.Vec3, _frame.Vec3]:
        return _frame.frame_from_axis(self.normal)

    def _evaluate(self, rho: float, phi: float) -> Point:
        r = rho * self.radius
        x = r * math.cos(_TWO_PI * phi)
        y = r * math.sin(_TWO_PI * phi)
        if self.center.dim == 2:
            return Point(self.center.x + x, self.center.y + y)
        return _frame.place(self.center, self.frame(), (x, y, 0.0))


@dataclass(frozen=True)
class Sphere(Primitive):
    """Sphere surface; poles lie along +z (north) and -z (south)."""

    center: Point
    radius: float

    paramdim: ClassVar[int] = 2
    periodic: ClassVar[tuple[bool, ...]] = (False, True)

    def __post_init__(self) -> None:
        _require_3d("Sphere center", self.center)
        _require_positive("Sphere radius", self.radius)

    def _evaluate(self, theta: float, phi: float) -> Point:
        t = math.pi * theta
        p = _TWO_PI * phi
        r = self.radius
        return Point(
            self.center.x + r * math.sin(t) * math.cos(p),
            self.center.y + r * math.sin(t) * math.sin(p),
            (self.center.z or 0.0) + r * math.cos(t),
        )


@dataclass(frozen=True)
class CylinderSurface(Primitive):
    """Lateral cylinder surface between two axis points, closed by flat caps."""

    bottom: Point
    top: Point
    radius: float

    paramdim: ClassVar[int] = 2
    periodic: ClassVar[tuple[bool, ...]] = (True, False)

    def __post_init__(self) -> None:
        _require_3d("Cylinder bottom", self.bottom)
        _require_3d("Cylinder top", self.top)
        _require_positive("Cylinder radius", self.radius)
        _axis_between("Cylinder axis", self.bottom, self.top)

    def height(self) -> float:
        return _frame.norm(_frame.sub(self.top, self.bottom))

    def cap_center(self, at_end: bool) -> Point:
        return self.top if at_end else self.bottom

    def _evaluate(self, phi: float, z: float) -> Point:
        axis, length = _axis_between("Cylinder axis", self.bottom, self.top)
        a = _TWO_PI * phi
        local = (self.radius * math.cos(a), self.radius * math.sin(a), z * length)
        return _frame.place(self.bottom, _frame.frame_from_axis(axis), local)


@dataclass(frozen=True)
class ConeSurface(Primitive):
    """Lateral cone surface from ``apex`` to the rim of ``base``, closed by the base disk."""

    base: Disk
    apex: Point

    paramdim: ClassVar[int] = 2
    periodic: ClassVar[tuple[bool, ...]] = (True, False)

    def __post_init__(self) -> None:
        _require_3d("Cone apex", self.apex)
        _require_3d("Cone base center", self.base.center)
        _axis_between("Cone axis", self.apex, self.base.center)

    def height(self) -> float:
        return _frame.norm(_frame.sub(self.base.center, self.apex))

    def halfangle(self) -> float:
        return math.atan2(self.base.radius, self.height())

    def cap_center(self, at_end: bool) -> Point:
        return self.base.center if at_end else self.apex

    def _evaluate(self, phi: float, z: float) -> Point:
        axis, length = _axis_between("Cone axis", self.apex, self.base.center)
        a = _TWO_PI * phi
        r = z * self.base.radius
        local = (r * math.cos(a), r * math.sin(a), z * length)
        return _frame.place(self.apex, _frame.frame_from_axis(axis), local)


def _check_frustum_disks(bottom: Disk, top: Disk) -> tuple[_frame.Vec3, float]:
    _require_3d("Frustum bottom center", bottom.center)
    _require_3d("Frustum top center", top.center)
    bn = _frame.normalize(bottom.normal)
    tn = _frame.normalize(top.normal)
    if abs(_frame.dot(bn, tn) - 1.0) > 1e-9:
        raise GeometryPreconditionError("Bottom and top planes must be parallel")
    return _axis_between("Frustum axis", bottom.center, top.center)


@dataclass(frozen=True)
class FrustumSurface(Primitive):
    """Lateral surface of a truncated cone; open unless ``capped``."""

    bottom: Disk
    top: Disk
    capped: bool = False

    paramdim: ClassVar[int] = 2
    periodic: ClassVar[tuple[bool, ...]] = (True, False)

    def __post_init__(self) -> None:
        _check_frustum_disks(self.bottom, self.top)

    def cap_center(self, at_end: bool) -> Point:
        return self.top.center if at_end else self.bottom.center

    def _evaluate(self, phi: float, z: float) -> Point:
        axis, length = _axis_between("Frustum axis", self.bottom.center, self.top.center)
        a = _TWO_PI * phi
        r = self.bottom.radius * (1.0 - z) + self.top.radius * z
        local = (r * math.cos(a), r * math.sin(a), z * length)
        return _frame.place(self.bottom.center, _frame.frame_from_axis(axis), local)


@dataclass(frozen=True)
class Cylinder(Primitive):
    """Solid cylinder."""

    bottom: Point
    top: Point
    radius: float

    paramdim: ClassVar[int] = 3
    periodic: ClassVar[tuple[bool, ...]] = (True, False, False)

    def __post_init__(self) -> None:
        # Same checks as the bounding surface
        self.boundary()

    def boundary(self) -> CylinderSurface:
        return CylinderSurface(self.bottom, self.top, self.radius)

    def _evaluate(self, phi: float, r: float, z: float) -> Point:
        axis, length = _axis_between("Cylinder axis", self.bottom, self.top)
        a = _TWO_PI * phi
        rr = r * self.radius
        local = (rr * math.cos(a), rr * math.sin(a), z * length)
        return _frame.place(self.bottom, _frame.frame_from_axis(axis), local)


@dataclass(frozen=True)
class Cone(Primitive):
    """Solid cone with a ``base`` disk and an ``apex``."""

    base: Disk
    apex: Point

    paramdim: ClassVar[int] = 3
    periodic: ClassVar[tuple[bool, ...]] = (True, False, False)

    def __post_init__(self) -> None:
        self.boundary()

    def boundary(self) -> ConeSurface:
        return ConeSurface(self.base, self.apex)

    def _evaluate(self, phi: float, psi: float, z: float) -> Point:
        axis, length = _axis_between("Cone axis", self.apex, self.base.center)
        a = _TWO_PI * phi
        opening = self.boundary().halfangle() * psi
        r = z * length * math.tan(opening)
        local = (r * math.cos(a), r * math.sin(a), z * length)
        return _frame.place(self.apex, _frame.frame_from_axis(axis), local)


@dataclass(frozen=True)
class Frustum(Primitive):
    """Solid truncated cone between two parallel disks."""

    bottom: Disk
    top: Disk

    paramdim: ClassVar[int] = 3
    periodic: ClassVar[tuple[bool, ...]] = (True, False, False)

    def __post_init__(self) -> None:
        _check_frustum_disks(self.bottom, self.top)

    def boundary(self) -> FrustumSurface:
        return FrustumSurface(self.bottom, self.top, capped=True)

    def _evaluate(self, phi: float, r: float, z: float) -> Point:
        axis, length = _axis_between("Frustum axis", self.bottom.center, self.top.center)
        a = _TWO_PI * phi
        rr = r * (self.bottom.radius * (1.0 - z) + self.top.radius * z)
        local = (rr * math.cos(a), rr * math.sin(a), z * length)
        return _frame.place(self.bottom.center, _frame.frame_from_axis(axis), local)
