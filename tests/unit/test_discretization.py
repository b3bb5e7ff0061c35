"""Unit tests for sampling and regular discretization."""

import math

import pytest

from clipmesh.config import DiscretizationConfig
from clipmesh.core.discretization import (
    RegularDiscretization,
    discretize,
    fit_dims,
    register_topology,
    topology_of,
)
from clipmesh.core.sampling import RegularSampler, axis_parameters, pole_point
from clipmesh.domain import (
    Box,
    Cone,
    ConeSurface,
    Cylinder,
    CylinderSurface,
    Disk,
    Frustum,
    FrustumSurface,
    Point,
    Pole,
    Polygon,
    Ring,
    Sphere,
    TopologyDescriptor,
)
from clipmesh.exceptions import GeometryPreconditionError, InvalidResolutionError

ORIGIN = Point(0.0, 0.0, 0.0)


class TestAxisParameters:
    """Tests for per-axis parameter generation."""

    def test_periodic(self):
        """Test that periodic axes leave out the wrap-around sample."""
        assert axis_parameters(4, periodic=True) == [0.0, 0.25, 0.5, 0.75]

    def test_closed_interval(self):
        """Test that non-periodic axes include both ends."""
        assert axis_parameters(3, periodic=False) == [0.0, 0.5, 1.0]

    def test_excluded_start(self):
        """Test that a collapsed start is left out."""
        assert axis_parameters(2, periodic=False, exclude_start=True) == [0.5, 1.0]

    def test_excluded_both_ends(self):
        """Test interior samples between two collapsed poles."""
        assert axis_parameters(3, periodic=False, exclude_start=True, exclude_end=True) == [
            0.25,
            0.5,
            0.75,
        ]


class TestRegularSampler:
    """Tests for RegularSampler."""

    def test_first_axis_fastest(self):
        """Test grid order over a box."""
        box = Box(Point(0.0, 0.0), Point(1.0, 1.0))
        points = list(RegularSampler((2, 2)).sample(box, topology_of(box)))
        assert points == [Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0)]

    def test_restartable(self):
        """Test that every call yields the same points."""
        sphere = Sphere(ORIGIN, 1.0)
        sampler = RegularSampler((3, 4))
        descriptor = topology_of(sphere)
        assert list(sampler.sample(sphere, descriptor)) == list(sampler.sample(sphere, descriptor))

    def test_poles_follow_grid(self):
        """Test that pole points come after the grid in descriptor order."""
        sphere = Sphere(ORIGIN, 2.0)
        points = list(RegularSampler((3, 4)).sample(sphere, topology_of(sphere)))
        assert len(points) == 3 * 4 + 2
        north, south = points[-2], points[-1]
        assert (north.x, north.y, north.z) == pytest.approx((0.0, 0.0, 2.0))
        assert (south.x, south.y, south.z) == pytest.approx((0.0, 0.0, -2.0), abs=1e-12)

    def test_grid_excludes_collapsed_poles(self):
        """Test that no grid point coincides with a sphere pole."""
        sphere = Sphere(ORIGIN, 1.0)
        points = list(RegularSampler((3, 4)).sample(sphere, topology_of(sphere)))
        for p in points[:-2]:
            assert abs(p.z) < 1.0 - 1e-6

    def test_cap_pole_uses_cap_center(self):
        """Test that non-collapsed poles sit at the cap centers."""
        cylinder = CylinderSurface(ORIGIN, Point(0.0, 0.0, 3.0), 1.0)
        assert pole_point(cylinder, Pole(1, at_end=False, collapsed=False), 2) == ORIGIN
        assert pole_point(cylinder, Pole(1, at_end=True, collapsed=False), 2) == Point(
            0.0, 0.0, 3.0
        )


class TestTopologyRegistry:
    """Tests for the per-type topology registry."""

    def test_registered_descriptors(self):
        """Test descriptors of the built-in primitives."""
        assert topology_of(Box(Point(0.0, 0.0), Point(1.0, 1.0))).poles == ()
        assert len(topology_of(Sphere(ORIGIN, 1.0)).poles) == 2
        assert len(topology_of(Disk(Point(0.0, 0.0), 1.0)).poles) == 1
        cone = topology_of(ConeSurface(Disk(ORIGIN, 1.0), Point(0.0, 0.0, 1.0)))
        assert cone.excludes_start(1) and not cone.excludes_end(1)

    def test_frustum_caps_optional(self):
        """Test that only capped frustums get cap poles."""
        bottom, top = Disk(ORIGIN, 2.0), Disk(Point(0.0, 0.0, 1.0), 1.0)
        assert topology_of(FrustumSurface(bottom, top)).poles == ()
        assert len(topology_of(FrustumSurface(bottom, top, capped=True)).poles) == 2

    def test_subclass_inherits_registration(self):
        """Test that subclasses resolve to their base registration."""

        class UnitSphere(Sphere):
            pass

        descriptor = topology_of(UnitSphere(ORIGIN, 1.0))
        assert descriptor == topology_of(Sphere(ORIGIN, 1.0))

    def test_register_custom_topology(self):
        """Test registering a descriptor for a new primitive type."""

        class Tube(CylinderSurface):
            pass

        @register_topology(Tube)
        def _tube(surface):
            return TopologyDescriptor(periodic=(True, False))

        mesh = discretize(Tube(ORIGIN, Point(0.0, 0.0, 1.0), 1.0), 4, 3)
        assert mesh.n_vertices == 12
        assert mesh.n_triangles == 0


class TestFitDims:
    """Tests for size fitting."""

    def test_repeat_last(self):
        """Test that the last size fills missing axes."""
        assert fit_dims((10,), 2) == (10, 10)
        assert fit_dims((4, 5), 3) == (4, 5, 5)

    def test_truncate(self):
        """Test that extra sizes are ignored."""
        assert fit_dims((4, 5, 6), 2) == (4, 5)

    def test_empty(self):
        """Test that at least one size is required."""
        with pytest.raises(ValueError):
            fit_dims((), 2)


class TestDiscretize:
    """Tests for the discretization pipeline."""

    def test_box_counts(self):
        """Test the box count law."""
        mesh = discretize(Box(Point(0.0, 0.0), Point(2.0, 1.0)), 4, 3)
        assert mesh.n_vertices == 12
        assert mesh.n_quads == 6
        assert mesh.n_triangles == 0

    def test_sphere_counts(self):
        """Test the sphere count law."""
        mesh = discretize(Sphere(ORIGIN, 1.0), 8, 16)
        assert mesh.n_vertices == 8 * 16 + 2
        assert mesh.n_quads == 7 * 16
        assert mesh.n_triangles == 2 * 16

    def test_sphere_points_on_surface(self):
        """Test that every vertex lies on the sphere."""
        mesh = discretize(Sphere(Point(1.0, 2.0, 3.0), 2.0), 5, 6)
        for p in mesh.points:
            assert math.dist((p.x, p.y, p.z), (1.0, 2.0, 3.0)) == pytest.approx(2.0)

    def test_disk_counts(self):
        """Test the disk count law."""
        mesh = discretize(Disk(Point(0.0, 0.0), 1.0), 3, 8)
        assert mesh.n_vertices == 3 * 8 + 1
        assert mesh.n_quads == 2 * 8
        assert mesh.n_triangles == 8

    def test_cylinder_surface_counts(self):
        """Test the capped cylinder count law."""
        mesh = discretize(CylinderSurface(ORIGIN, Point(0.0, 0.0, 2.0), 1.0), 6, 3)
        assert mesh.n_vertices == 6 * 3 + 2
        assert mesh.n_quads == 6 * 2
        assert mesh.n_triangles == 2 * 6

    def test_cone_surface_counts(self):
        """Test the cone count law: apex fan plus base cap."""
        mesh = discretize(ConeSurface(Disk(ORIGIN, 1.0), Point(0.0, 0.0, 2.0)), 6, 3)
        assert mesh.n_vertices == 6 * 3 + 2
        assert mesh.n_quads == 6 * 2
        assert mesh.n_triangles == 2 * 6

    def test_open_frustum_counts(self):
        """Test that an open frustum has no triangles."""
        frustum = FrustumSurface(Disk(ORIGIN, 2.0), Disk(Point(0.0, 0.0, 1.0), 1.0))
        mesh = discretize(frustum, 6, 3)
        assert mesh.n_vertices == 18
        assert mesh.n_quads == 12
        assert mesh.n_triangles == 0

    def test_solids_mesh_their_boundary(self):
        """Test that solids are discretized through their boundary."""
        cylinder = Cylinder(ORIGIN, Point(0.0, 0.0, 2.0), 1.0)
        assert discretize(cylinder, 6, 3) == discretize(cylinder.boundary(), 6, 3)

        cone = Cone(Disk(ORIGIN, 1.0), Point(0.0, 0.0, 2.0))
        assert discretize(cone, 6, 3) == discretize(cone.boundary(), 6, 3)

        frustum = Frustum(Disk(ORIGIN, 2.0), Disk(Point(0.0, 0.0, 1.0), 1.0))
        assert discretize(frustum, 6, 3).n_triangles == 12

    def test_single_size_repeated(self):
        """Test that one size applies to every axis."""
        assert discretize(Box(Point(0.0, 0.0), Point(1.0, 1.0)), 5).n_vertices == 25

    def test_default_samples(self):
        """Test that the configured default is used without sizes."""
        method = RegularDiscretization(config=DiscretizationConfig(default_samples=4))
        mesh = method.discretize(Box(Point(0.0, 0.0), Point(1.0, 1.0)))
        assert mesh.n_vertices == 16

    def test_resolution_too_low(self):
        """Test that one sample per axis is rejected before sampling."""
        with pytest.raises(InvalidResolutionError) as exc_info:
            discretize(Sphere(ORIGIN, 1.0), 1, 4)
        assert exc_info.value.axis == 0

    def test_non_primitive_rejected(self):
        """Test that only parametric primitives can be discretized."""
        polygon = Polygon((Ring((Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))),))
        with pytest.raises(GeometryPreconditionError):
            discretize(polygon, 3)  # type: ignore[arg-type]

    def test_deterministic(self):
        """Test that discretizing twice gives identical meshes."""
        sphere = Sphere(ORIGIN, 1.0)
        assert discretize(sphere, 6, 9) == discretize(sphere, 6, 9)
