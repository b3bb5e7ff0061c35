"""Geometric predicates for polygon clipping.

This module provides the planar primitives the clipper is built on:
- Side classification of a point against an oriented line
- Line / segment intersection, including the collinear case
- Signed area and convexity of rings
- Tolerant point comparison

All functions are pure, stateless, and designed for use in parallel processing.
"""

import math

from clipmesh.domain import (
    IntersectionResult,
    Line,
    Point,
    Ring,
    Side,
    WindingDirection,
)


def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


def sideof(point: Point, line: Line, tolerance: float = 0.0) -> Side:
    """Classify a point against an oriented line.

    Uses the sign of the 2-D cross product of (end - start) and
    (point - start). Points whose distance to the line does not exceed
    ``tolerance`` are classified as ON.

    Args:
        point: The point to classify
        line: Oriented line; its left side is the inside half-plane
        tolerance: Absolute distance treated as lying on the line

    Returns:
        LEFT, RIGHT or ON

    Examples:
        >>> line = Line(Point(0.0, 0.0), Point(1.0, 0.0))
        >>> sideof(Point(0.5, 1.0), line)
        <Side.LEFT: 1>
        >>> sideof(Point(0.5, -1.0), line)
        <Side.RIGHT: 2>
    """
    dx, dy = line.direction()
    cross = _cross(dx, dy, point.x - line.start.x, point.y - line.start.y)

    length = math.hypot(dx, dy)
    if length == 0.0:
        return Side.ON

    distance = cross / length
    if distance > tolerance:
        return Side.LEFT
    if distance < -tolerance:
        return Side.RIGHT
    return Side.ON


def intersect(
    a: Line,
    b: Line,
    tolerance: float = 0.0,
    parallel_epsilon: float = 1e-12,
) -> IntersectionResult:
    """Intersect two lines or segments.

    Solves ``a.start + t * da = b.start + u * db``. Parameters of bounded
    arguments (Segment) must lie in [0, 1], extended by ``tolerance``
    measured as a distance along the argument; a tolerated overshoot is
    clamped back onto the segment.

    When the arguments are parallel and collinear with a shared stretch,
    the result is OVERLAPPING with ``a.start`` as its point. That point is
    a representative boundary vertex only; it is not the overlap geometry.

    Args:
        a: First line or segment
        b: Second line or segment
        tolerance: Absolute distance tolerance
        parallel_epsilon: Relative determinant threshold for parallel lines

    Returns:
        CROSSING, OVERLAPPING or NONE result

    Examples:
        >>> s1 = Segment(Point(0.0, 0.0), Point(2.0, 2.0))
        >>> s2 = Segment(Point(0.0, 2.0), Point(2.0, 0.0))
        >>> intersect(s1, s2).point
        Point(x=1.0, y=1.0, z=None)
    """
    dax, day = a.direction()
    dbx, dby = b.direction()
    wx = b.start.x - a.start.x
    wy = b.start.y - a.start.y

    len_a = math.hypot(dax, day)
    len_b = math.hypot(dbx, dby)
    if len_a == 0.0 or len_b == 0.0:
        return IntersectionResult.none()

    denom = _cross(dax, day, dbx, dby)

    if abs(denom) <= parallel_epsilon * len_a * len_b:
        # Parallel: only collinear arguments can share points
        if abs(_cross(dax, day, wx, wy)) / len_a > tolerance:
            return IntersectionResult.none()

        if not b.bounded:
            b_lo, b_hi = -math.inf, math.inf
        else:
            t0 = (wx * dax + wy * day) / (len_a * len_a)
            t1 = t0 + (dbx * dax + dby * day) / (len_a * len_a)
            b_lo, b_hi = min(t0, t1), max(t0, t1)
        a_lo, a_hi = (0.0, 1.0) if a.bounded else (-math.inf, math.inf)

        if max(a_lo, b_lo) <= min(a_hi, b_hi) + tolerance / len_a:
            return IntersectionResult.overlapping(a.start)
        return IntersectionResult.none()

    t = _cross(wx, wy, dbx, dby) / denom
    u = _cross(wx, wy, dax, day) / denom

    if a.bounded:
        slack = tolerance / len_a
        if t < -slack or t > 1.0 + slack:
            return IntersectionResult.none()
        t = min(max(t, 0.0), 1.0)
    if b.bounded:
        slack = tolerance / len_b
        if u < -slack or u > 1.0 + slack:
            return IntersectionResult.none()

    return IntersectionResult.crossing(a.point_at(t))


def signed_area(points: list[Point] | tuple[Point, ...]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area, positive for counter-clockwise winding. Returns 0.0 for
        degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    return Ring(tuple(points)).signed_area()


def to_ccw(ring: Ring) -> Ring:
    """Return ``ring`` with counter-clockwise winding."""
    if ring.orientation() == WindingDirection.COUNTER_CLOCKWISE:
        return ring
    return ring.reverse()


def is_convex(ring: Ring, tolerance: float = 0.0) -> bool:
    """Check whether a ring bounds a convex region.

    Every vertex must lie inside or on every directed edge of the
    counter-clockwise normalized ring. Collinear vertices are allowed.

    Args:
        ring: Ring to test, in either winding
        tolerance: Absolute distance treated as lying on an edge

    Returns:
        True for convex rings, False otherwise (including degenerate rings)
    """
    if ring.is_degenerate() or ring.signed_area() == 0.0:
        return False

    ccw = to_ccw(ring)
    for edge in ccw.edges():
        for point in ccw.points:
            if sideof(point, edge, tolerance) == Side.RIGHT:
                return False
    return True


def same_point(p: Point, q: Point, tolerance: float = 0.0) -> bool:
    """Compare two points exactly, or within ``tolerance`` when it is positive."""
    if tolerance <= 0.0:
        return p == q
    dz = (p.z or 0.0) - (q.z or 0.0)
    return math.sqrt((p.x - q.x) ** 2 + (p.y - q.y) ** 2 + dz * dz) <= tolerance
