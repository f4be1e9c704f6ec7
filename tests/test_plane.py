"""Unit tests for plane intersection.

Tests cover:
- Ray hitting the front side
- Back-side culling
- Rays parallel to the plane
- Kernel-side intersection
"""

import math

import pytest
import taichi as ti


def _floor(offset=0.0):
    from whitted.core.vector import Vector
    from whitted.geometry.plane import Plane
    from whitted.materials.surfaces import CHECKERBOARD

    return Plane(normal_vector=Vector(0.0, 1.0, 0.0), offset=offset, surface=CHECKERBOARD)


def _ray(start, direction):
    from whitted.core.ray import Ray
    from whitted.core.vector import Vector

    return Ray(Vector(*start), Vector(*direction))


class TestPlaneIntersection:
    """Tests for Plane.intersect."""

    def test_hit_from_above(self):
        """Ray from y=2 straight down hits the floor at distance 2."""
        plane = _floor()
        hit = plane.intersect(_ray((0.0, 2.0, 0.0), (0.0, -1.0, 0.0)))
        assert hit is not None
        assert hit.distance == pytest.approx(2.0)
        assert hit.primitive is plane

    def test_oblique_hit(self):
        from whitted.core.vector import Vector, normalize

        direction = normalize(Vector(1.0, -1.0, 0.0))
        hit = _floor().intersect(_ray((0.0, 1.0, 0.0), (direction.x, direction.y, direction.z)))
        assert hit is not None
        assert hit.distance == pytest.approx(math.sqrt(2.0))

    def test_offset_moves_plane(self):
        """dot(n, p) + offset == 0 places the plane at y = -offset."""
        hit = _floor(offset=1.0).intersect(_ray((0.0, 2.0, 0.0), (0.0, -1.0, 0.0)))
        assert hit is not None
        assert hit.distance == pytest.approx(3.0)

    def test_back_side_is_culled(self):
        """Rays travelling along the normal never hit."""
        hit = _floor().intersect(_ray((0.0, -2.0, 0.0), (0.0, 1.0, 0.0)))
        assert hit is None

    def test_plane_behind_ray_gives_negative_distance(self):
        """Distances are not filtered for sign."""
        hit = _floor().intersect(_ray((0.0, -2.0, 0.0), (0.0, -1.0, 0.0)))
        assert hit is not None
        assert hit.distance == pytest.approx(-2.0)

    def test_parallel_ray_gives_infinite_distance(self):
        """A parallel ray is not culled and divides by a signed zero."""
        hit = _floor().intersect(_ray((0.0, 2.0, 0.0), (1.0, 0.0, 0.0)))
        assert hit is not None
        assert hit.distance == -math.inf

    def test_parallel_ray_in_plane_gives_nan(self):
        hit = _floor().intersect(_ray((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)))
        assert hit is not None
        assert math.isnan(hit.distance)

    def test_normal_is_position_independent(self):
        from whitted.core.vector import Vector

        plane = _floor()
        assert plane.normal(Vector(5.0, 0.0, -3.0)) == Vector(0.0, 1.0, 0.0)
        assert plane.normal(Vector(-1.0, 0.0, 9.0)) == Vector(0.0, 1.0, 0.0)


class TestPlaneKernel:
    """Tests for the kernel-side hit_plane."""

    def test_hit_plane(self):
        from whitted.core.ray import vec3
        from whitted.geometry.plane import hit_plane

        hits = ti.field(dtype=ti.i32, shape=2)
        dists = ti.field(dtype=ti.f64, shape=2)

        @ti.kernel
        def test_kernel():
            normal = vec3(0.0, 1.0, 0.0)
            hit0, dist0 = hit_plane(vec3(0.0, 2.0, 0.0), vec3(0.0, -1.0, 0.0), normal, 0.0)
            hit1, dist1 = hit_plane(vec3(0.0, -2.0, 0.0), vec3(0.0, 1.0, 0.0), normal, 0.0)
            hits[0] = hit0
            dists[0] = dist0
            hits[1] = hit1
            dists[1] = dist1

        test_kernel()
        assert hits[0] == 1
        assert dists[0] == pytest.approx(2.0)
        assert hits[1] == 0
