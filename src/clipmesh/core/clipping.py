"""Sutherland-Hodgman clipping of polygons against a convex region.

The clipper walks the directed edges of the counter-clockwise normalized
clip ring. For each edge it filters the current vertex list through the
half-plane left of the edge, inserting the boundary crossing wherever the
subject leaves or re-enters. Points on the edge count as inside.

Vertices live in a per-call arena (a flat point list); the working ring is a
list of arena indices and crossing points are appended to the arena as they
are created.

Preconditions (documented, not verified at runtime):
- Subject rings are simple
- A convex clip cannot turn a hole into an outer ring, nor merge or split
  rings, so rings are clipped independently

References:
    Sutherland, I.E. & Hodgman, G.W. 1974. Reentrant Polygon Clipping.
    Communications of the ACM 17(1).
"""

import logging

from clipmesh.config import GeometryConfig
from clipmesh.core.geometry import intersect, is_convex, same_point, sideof, to_ccw
from clipmesh.domain import (
    IntersectionType,
    Line,
    Point,
    Polygon,
    Ring,
    Segment,
    Side,
)
from clipmesh.exceptions import GeometryPreconditionError, IntersectionError

logger = logging.getLogger(__name__)


class SutherlandHodgmanClipper:
    """Clips rings and polygons against a convex ring.

    The clipper holds only its configuration and is safe to share between
    threads and to reuse across calls.

    Example:
        clipper = SutherlandHodgmanClipper()
        result = clipper.clip_polygon(polygon, Box(Point(0, 0), Point(4, 4)))
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the clipper.

        Args:
            config: Tolerances; defaults to GeometryConfig()
        """
        self.config = config or GeometryConfig()

    def prepare_clip_ring(self, clip_geometry: object) -> Ring:
        """Resolve a clip geometry to a validated counter-clockwise ring.

        Accepts a Ring, a Polygon without holes, or any object whose
        ``boundary()`` returns a Ring (such as a 2-D Box).

        Raises:
            GeometryPreconditionError: If the boundary is degenerate,
                has holes, or is not convex
        """
        if isinstance(clip_geometry, Ring):
            ring = clip_geometry
        elif isinstance(clip_geometry, Polygon):
            if clip_geometry.has_holes():
                raise GeometryPreconditionError("Clip polygon must not have holes")
            ring = clip_geometry.outer
        elif hasattr(clip_geometry, "boundary"):
            ring = clip_geometry.boundary()
            if not isinstance(ring, Ring):
                raise GeometryPreconditionError(
                    f"Boundary of {type(clip_geometry).__name__} is not a ring"
                )
        else:
            raise GeometryPreconditionError(
                f"Cannot clip against {type(clip_geometry).__name__}"
            )

        ring = self._dedupe(ring)
        if ring is None or ring.signed_area() == 0.0:
            raise GeometryPreconditionError("Clip boundary is degenerate")
        if self.config.check_convexity and not is_convex(ring, self.config.tolerance):
            raise GeometryPreconditionError("Clip boundary must be convex")

        return to_ccw(ring)

    def clip_ring(self, subject: Ring, clip_ring: Ring) -> Ring | None:
        """Clip one ring against a convex ring.

        Args:
            subject: Ring to clip, in any winding (winding is preserved)
            clip_ring: Convex clip boundary, in any winding

        Returns:
            The clipped ring, or None when fewer than 3 distinct points remain

        Raises:
            GeometryPreconditionError: If the clip ring is degenerate or
                not convex
            IntersectionError: If an edge crossing the clip boundary has no
                intersection with it (inconsistent geometry)
        """
        return self._clip_against(subject, self.prepare_clip_ring(clip_ring))

    def _clip_against(self, subject: Ring, clip_ring: Ring) -> Ring | None:
        """Clip ``subject`` against a ring already returned by prepare_clip_ring."""
        tol = self.config.tolerance

        arena: list[Point] = list(subject.points)
        working = list(range(len(arena)))

        for edge in clip_ring.edges():
            if not working:
                break

            boundary = Line(edge.start, edge.end)
            inside = [sideof(arena[k], boundary, tol) != Side.RIGHT for k in working]

            emitted: list[int] = []
            n = len(working)
            for j in range(n):
                k1 = working[j]
                k2 = working[(j + 1) % n]
                in1 = inside[j]
                in2 = inside[(j + 1) % n]

                if in1 and in2:
                    emitted.append(k1)
                elif in1:
                    emitted.append(k1)
                    emitted.append(self._crossing(arena, k1, k2, boundary))
                elif in2:
                    emitted.append(self._crossing(arena, k1, k2, boundary))

            working = emitted

        if not working:
            return None

        return self._dedupe(Ring(tuple(arena[k] for k in working)))

    def clip_polygon(self, polygon: Polygon, clip_region: object) -> Polygon | None:
        """Clip every ring of a polygon against a convex region.

        Rings that vanish are dropped; the remaining rings keep their order.

        Args:
            polygon: Polygon to clip (outer ring followed by holes)
            clip_region: Ring, hole-free Polygon or primitive with a ring boundary

        Returns:
            Clipped polygon, or None if no ring survives
        """
        return self.clip_polygon_against_ring(polygon, self.prepare_clip_ring(clip_region))

    def clip_polygon_against_ring(self, polygon: Polygon, clip_ring: Ring) -> Polygon | None:
        """Clip every ring of a polygon against an already validated clip ring."""
        rings: list[Ring] = []
        for idx, ring in enumerate(polygon.rings):
            clipped = self._clip_against(ring, clip_ring)
            if clipped is None:
                logger.debug("Ring clipped away: ring=%d vertices=%d", idx, len(ring))
                continue
            rings.append(clipped)

        if not rings:
            return None
        return Polygon(tuple(rings))

    def clip(self, geometry: Ring | Polygon, clip_geometry: object) -> Ring | Polygon | None:
        """Clip a ring or polygon against a convex clip geometry."""
        if isinstance(geometry, Polygon):
            return self.clip_polygon(geometry, clip_geometry)
        if isinstance(geometry, Ring):
            return self._clip_against(geometry, self.prepare_clip_ring(clip_geometry))
        raise TypeError(f"Cannot clip {type(geometry).__name__}")

    def _crossing(self, arena: list[Point], k1: int, k2: int, boundary: Line) -> int:
        """Append the crossing of arena edge (k1, k2) with ``boundary``; return its index.

        The endpoints were classified with a tolerance, so the supporting
        line's crossing may fall just outside the edge; it is clamped back
        onto the edge.
        """
        edge = Segment(arena[k1], arena[k2])
        result = intersect(
            Line(edge.start, edge.end),
            boundary,
            tolerance=self.config.tolerance,
            parallel_epsilon=self.config.parallel_epsilon,
        )
        if result.type is IntersectionType.NONE or result.point is None:
            raise IntersectionError(
                f"Edge {arena[k1]} -> {arena[k2]} crosses the clip boundary "
                f"{boundary.start} -> {boundary.end} without intersecting it"
            )
        arena.append(_clamp_to_segment(result.point, edge))
        return len(arena) - 1

    def _dedupe(self, ring: Ring) -> Ring | None:
        """Drop consecutive repeated points (cyclically); None if fewer than 3 remain."""
        tol = self.config.dedup_tolerance
        points: list[Point] = []
        for p in ring.points:
            if not points or not same_point(points[-1], p, tol):
                points.append(p)
        while len(points) > 1 and same_point(points[-1], points[0], tol):
            points.pop()

        if len(points) < 3:
            return None
        result = Ring(tuple(points))
        if result.is_degenerate():
            return None
        return result


def _clamp_to_segment(point: Point, segment: Segment) -> Point:
    dx, dy = segment.direction()
    t = ((point.x - segment.start.x) * dx + (point.y - segment.start.y) * dy) / (dx * dx + dy * dy)
    if 0.0 <= t <= 1.0:
        return point
    return segment.point_at(min(max(t, 0.0), 1.0))


def clip_ring(subject: Ring, clip_ring: Ring, config: GeometryConfig | None = None) -> Ring | None:
    """Clip one ring against a convex ring. See SutherlandHodgmanClipper.clip_ring."""
    return SutherlandHodgmanClipper(config).clip_ring(subject, clip_ring)


def clip_polygon(
    polygon: Polygon, clip_region: object, config: GeometryConfig | None = None
) -> Polygon | None:
    """Clip a polygon against a convex region. See SutherlandHodgmanClipper.clip_polygon."""
    return SutherlandHodgmanClipper(config).clip_polygon(polygon, clip_region)


def clip(
    geometry: Ring | Polygon, clip_geometry: object, config: GeometryConfig | None = None
) -> Ring | Polygon | None:
    """Clip a ring or polygon against a convex clip geometry."""
    return SutherlandHodgmanClipper(config).clip(geometry, clip_geometry)
