"""Tests for domain models to verify they work correctly."""

import math

import pytest

from clipmesh.domain import (
    Box,
    Cone,
    ConeSurface,
    CylinderSurface,
    Disk,
    FrustumSurface,
    IntersectionResult,
    IntersectionType,
    Line,
    Mesh,
    Point,
    Pole,
    Polygon,
    Ring,
    Segment,
    Sphere,
    TopologyDescriptor,
    WindingDirection,
)
from clipmesh.exceptions import DomainError, GeometryPreconditionError


def _square(x0: float, y0: float, x1: float, y1: float) -> Ring:
    return Ring((Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)))


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic 2-D point creation."""
        p = Point(1.0, 2.0)
        assert p.x == 1.0
        assert p.y == 2.0
        assert p.z is None
        assert p.dim == 2

    def test_point_3d(self) -> None:
        """Test 3-D point creation."""
        p = Point(1.0, 2.0, 3.0)
        assert p.dim == 3
        assert p.to_tuple() == (1.0, 2.0, 3.0)

    def test_from_tuple(self) -> None:
        """Test building points from coordinate sequences."""
        assert Point.from_tuple([1, 2]) == Point(1.0, 2.0)
        assert Point.from_tuple((1, 2, 3)) == Point(1.0, 2.0, 3.0)
        with pytest.raises(ValueError):
            Point.from_tuple([1.0])

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(1.5, -2.0, 0.25)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

        planar = Point(1.0, 2.0)
        assert "z" not in planar.to_dict()
        assert Point.from_dict(planar.to_dict()) == planar

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_points_hashable(self) -> None:
        """Test that equal points collapse in a set."""
        assert len({Point(0.0, 0.0), Point(0.0, 0.0), Point(1.0, 0.0)}) == 2


class TestLine:
    """Tests for Line and Segment."""

    def test_direction_and_point_at(self) -> None:
        """Test direction vector and parametric evaluation."""
        line = Line(Point(1.0, 1.0), Point(3.0, 5.0))
        assert line.direction() == (2.0, 4.0)
        assert line.point_at(0.5) == Point(2.0, 3.0)

    def test_point_at_3d(self) -> None:
        """Test that 3-D endpoints interpolate z."""
        seg = Segment(Point(0.0, 0.0, 0.0), Point(2.0, 0.0, 4.0))
        assert seg.point_at(0.25) == Point(0.5, 0.0, 1.0)

    def test_boundedness(self) -> None:
        """Test that only segments are bounded."""
        assert not Line.bounded
        assert Segment.bounded
        assert isinstance(Segment(Point(0, 0), Point(1, 0)), Line)


class TestRing:
    """Tests for Ring class."""

    def test_signed_area_counterclockwise(self) -> None:
        """Test signed area for counter-clockwise square."""
        ring = _square(0, 0, 10, 10)
        assert ring.signed_area() == pytest.approx(100.0)
        assert ring.orientation() == WindingDirection.COUNTER_CLOCKWISE

    def test_signed_area_clockwise(self) -> None:
        """Test signed area for clockwise square."""
        ring = _square(0, 0, 10, 10).reverse()
        assert ring.signed_area() == pytest.approx(-100.0)
        assert ring.orientation() == WindingDirection.CLOCKWISE

    def test_edges_close_the_ring(self) -> None:
        """Test that the last edge returns to the first point."""
        ring = _square(0, 0, 1, 1)
        edges = ring.edges()
        assert len(edges) == 4
        assert all(isinstance(e, Segment) for e in edges)
        assert edges[-1].start == Point(0.0, 1.0)
        assert edges[-1].end == Point(0.0, 0.0)

    def test_is_degenerate(self) -> None:
        """Test detection of rings with fewer than three distinct points."""
        a, b = Point(0.0, 0.0), Point(1.0, 0.0)
        assert Ring((a, b)).is_degenerate()
        assert Ring((a, b, a)).is_degenerate()
        assert not Ring((a, b, Point(0.0, 1.0))).is_degenerate()

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        ring = Ring((Point(1.0, 2.0), Point(5.0, -1.0), Point(3.0, 7.0)))
        assert ring.bounding_box() == (1.0, -1.0, 5.0, 7.0)

    def test_len_and_iter(self) -> None:
        """Test container protocol."""
        ring = _square(0, 0, 1, 1)
        assert len(ring) == 4
        assert list(ring) == list(ring.vertices)

    def test_serialization(self) -> None:
        """Test ring serialization and deserialization."""
        ring = _square(0, 0, 2, 3)
        assert Ring.from_dict(ring.to_dict()) == ring


class TestPolygon:
    """Tests for Polygon class."""

    def test_requires_outer_ring(self) -> None:
        """Test that an empty polygon is rejected."""
        with pytest.raises(ValueError):
            Polygon(())

    def test_area_with_hole(self) -> None:
        """Test that holes are subtracted from the outer area."""
        polygon = Polygon((_square(0, 0, 10, 10), _square(4, 4, 6, 6).reverse()))
        assert polygon.has_holes()
        assert polygon.holes == (_square(4, 4, 6, 6).reverse(),)
        assert polygon.area() == pytest.approx(96.0)

    def test_boundary_is_outer_ring(self) -> None:
        """Test that the boundary of a polygon is its outer ring."""
        outer = _square(0, 0, 1, 1)
        assert Polygon((outer,)).boundary() == outer

    def test_serialization(self) -> None:
        """Test polygon serialization and deserialization."""
        polygon = Polygon((_square(0, 0, 10, 10), _square(4, 4, 6, 6).reverse()))
        assert Polygon.from_dict(polygon.to_dict()) == polygon


class TestIntersectionResult:
    """Tests for IntersectionResult."""

    def test_constructors(self) -> None:
        """Test the tagged constructors."""
        p = Point(1.0, 1.0)
        assert IntersectionResult.crossing(p).type is IntersectionType.CROSSING
        assert IntersectionResult.overlapping(p).point == p
        assert IntersectionResult.none().point is None

    def test_truthiness(self) -> None:
        """Test that only NONE results are falsy."""
        assert IntersectionResult.crossing(Point(0.0, 0.0))
        assert IntersectionResult.overlapping(Point(0.0, 0.0))
        assert not IntersectionResult.none()


class TestTopologyDescriptor:
    """Tests for TopologyDescriptor and Pole."""

    def test_excluded_ends(self) -> None:
        """Test that only collapsed poles exclude their parameter end."""
        descriptor = TopologyDescriptor(
            periodic=(True, False),
            poles=(Pole(1, at_end=False), Pole(1, at_end=True, collapsed=False)),
        )
        assert descriptor.paramdim == 2
        assert descriptor.excludes_start(1)
        assert not descriptor.excludes_end(1)
        assert not descriptor.excludes_start(0)

    def test_pole_on_periodic_axis_rejected(self) -> None:
        """Test that poles cannot sit on a periodic axis."""
        with pytest.raises(ValueError, match="periodic"):
            TopologyDescriptor(periodic=(True, False), poles=(Pole(0, at_end=False),))

    def test_pole_axis_out_of_range(self) -> None:
        """Test that pole axes must exist."""
        with pytest.raises(ValueError):
            TopologyDescriptor(periodic=(False, False), poles=(Pole(2, at_end=False),))


class TestMesh:
    """Tests for Mesh class."""

    def test_counts(self) -> None:
        """Test element counts by kind."""
        points = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(2, 0)]
        mesh = Mesh(points=points, elements=[(0, 1, 2, 3), (1, 4, 2)])
        assert mesh.n_vertices == 5
        assert mesh.n_elements == 2
        assert mesh.n_quads == 1
        assert mesh.n_triangles == 1
        assert mesh.quads() == [(0, 1, 2, 3)]
        assert mesh.triangles() == [(1, 4, 2)]

    def test_element_points(self) -> None:
        """Test resolving element indices to points."""
        points = [Point(0, 0), Point(1, 0), Point(0, 1)]
        mesh = Mesh(points=points, elements=[(2, 0, 1)])
        assert mesh.element_points(0) == (Point(0, 1), Point(0, 0), Point(1, 0))

    def test_serialization(self) -> None:
        """Test mesh serialization and deserialization."""
        mesh = Mesh(
            points=[Point(0.0, 0.0, 0.0), Point(1.0, 0.0, 0.0), Point(0.0, 1.0, 0.0)],
            elements=[(0, 1, 2)],
        )
        data = mesh.to_dict()
        assert data["points"][1] == [1.0, 0.0, 0.0]
        assert data["elements"] == [[0, 1, 2]]
        assert Mesh.from_dict(data) == mesh


class TestPrimitives:
    """Tests for parametric primitives."""

    def test_box_corners(self) -> None:
        """Test that the box parametrization spans its corners."""
        box = Box(Point(1.0, 2.0), Point(3.0, 6.0))
        assert box(0.0, 0.0) == Point(1.0, 2.0)
        assert box(1.0, 1.0) == Point(3.0, 6.0)
        assert box(0.5, 0.25) == Point(2.0, 3.0)

    def test_box_boundary_is_ccw(self) -> None:
        """Test that the box boundary winds counter-clockwise."""
        ring = Box(Point(0.0, 0.0), Point(2.0, 1.0)).boundary()
        assert ring.signed_area() == pytest.approx(2.0)

    def test_box_preconditions(self) -> None:
        """Test that boxes need 2-D corners spanning an area."""
        with pytest.raises(GeometryPreconditionError):
            Box(Point(1.0, 1.0), Point(0.0, 2.0))
        with pytest.raises(GeometryPreconditionError):
            Box(Point(0.0, 0.0, 0.0), Point(1.0, 1.0, 1.0))

    def test_domain_error(self) -> None:
        """Test evaluation outside [0, 1] raises DomainError."""
        sphere = Sphere(Point(0.0, 0.0, 0.0), 1.0)
        with pytest.raises(DomainError) as exc_info:
            sphere(1.5, 0.0)
        assert exc_info.value.primitive == "Sphere"
        assert exc_info.value.params == (1.5, 0.0)

        with pytest.raises(DomainError):
            sphere(0.5, -0.1)

    def test_parameter_count(self) -> None:
        """Test that the number of parameters must match paramdim."""
        with pytest.raises(ValueError):
            Sphere(Point(0.0, 0.0, 0.0), 1.0)(0.5)

    def test_sphere_poles_and_equator(self) -> None:
        """Test characteristic sphere points."""
        sphere = Sphere(Point(1.0, 2.0, 3.0), 2.0)
        north = sphere(0.0, 0.3)
        assert (north.x, north.y, north.z) == pytest.approx((1.0, 2.0, 5.0))
        equator = sphere(0.5, 0.25)
        assert (equator.x, equator.y, equator.z) == pytest.approx((1.0, 4.0, 3.0))

    def test_sphere_preconditions(self) -> None:
        """Test sphere construction checks."""
        with pytest.raises(GeometryPreconditionError):
            Sphere(Point(0.0, 0.0), 1.0)
        with pytest.raises(GeometryPreconditionError):
            Sphere(Point(0.0, 0.0, 0.0), 0.0)

    def test_planar_disk(self) -> None:
        """Test a 2-D disk evaluates to 2-D points."""
        disk = Disk(Point(0.0, 0.0), 2.0)
        p = disk(1.0, 0.25)
        assert p.dim == 2
        assert (p.x, p.y) == pytest.approx((0.0, 2.0))
        assert disk(0.0, 0.7) == Point(0.0, 0.0)

    def test_cylinder_surface_along_tilted_axis(self) -> None:
        """Test that every sample lies at the radius from the axis."""
        cylinder = CylinderSurface(Point(0.0, 0.0, 0.0), Point(1.0, 1.0, 1.0), 0.5)
        axis = (1 / math.sqrt(3),) * 3
        for phi in (0.0, 0.3, 0.7):
            p = cylinder(phi, 0.5)
            along = p.x * axis[0] + p.y * axis[1] + p.z * axis[2]
            radial_sq = p.x**2 + p.y**2 + p.z**2 - along**2
            assert along == pytest.approx(math.sqrt(3) / 2)
            assert radial_sq == pytest.approx(0.25)

    def test_cylinder_surface_same_endpoints(self) -> None:
        """Test that a zero-length cylinder axis is rejected."""
        with pytest.raises(GeometryPreconditionError):
            CylinderSurface(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 0.0), 1.0)

    def test_cone_surface(self) -> None:
        """Test cone apex, rim and half angle."""
        cone = ConeSurface(Disk(Point(0.0, 0.0, 0.0), 1.0), Point(0.0, 0.0, 2.0))
        apex = cone(0.4, 0.0)
        assert (apex.x, apex.y, apex.z) == pytest.approx((0.0, 0.0, 2.0))
        rim = cone(0.0, 1.0)
        assert (rim.x, rim.y, rim.z) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)
        assert cone.halfangle() == pytest.approx(math.atan2(1.0, 2.0))

    def test_solid_cone_reaches_base_rim(self) -> None:
        """Test that the full opening angle at full height hits the base rim."""
        cone = Cone(Disk(Point(0.0, 0.0, 0.0), 1.0), Point(0.0, 0.0, 2.0))
        rim = cone(0.0, 1.0, 1.0)
        assert math.hypot(rim.x, rim.y) == pytest.approx(1.0)
        assert rim.z == pytest.approx(0.0, abs=1e-12)

    def test_frustum_surface(self) -> None:
        """Test that the frustum radius interpolates between its disks."""
        frustum = FrustumSurface(
            Disk(Point(0.0, 0.0, 0.0), 2.0), Disk(Point(0.0, 0.0, 4.0), 1.0)
        )
        mid = frustum(0.0, 0.5)
        assert (mid.x, mid.y, mid.z) == pytest.approx((1.5, 0.0, 2.0))

    def test_frustum_requires_parallel_planes(self) -> None:
        """Test that tilted frustum disks are rejected."""
        with pytest.raises(GeometryPreconditionError, match="parallel"):
            FrustumSurface(
                Disk(Point(0.0, 0.0, 0.0), 2.0),
                Disk(Point(0.0, 0.0, 4.0), 1.0, normal=(0.0, 1.0, 1.0)),
            )

    def test_periodicity_flags(self) -> None:
        """Test per-axis periodicity of the primitives."""
        assert Sphere(Point(0.0, 0.0, 0.0), 1.0).is_periodic() == (False, True)
        assert Box(Point(0.0, 0.0), Point(1.0, 1.0)).is_periodic() == (False, False)
        cylinder = CylinderSurface(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 1.0), 1.0)
        assert cylinder.is_periodic() == (True, False)
