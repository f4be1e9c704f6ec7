"""Sphere primitive with the benchmark's ray-sphere intersection.

The intersection uses the projected-center formulation rather than a full
quadratic solve:

    eo   = center - start
    v    = dot(eo, dir)
    disc = radius^2 - (dot(eo, eo) - v^2)
    dist = v - sqrt(disc)

Two properties of this formulation are part of the rendered output and are
kept as-is:
- ``v < 0`` rejects the sphere outright, so a ray starting inside the sphere
  and pointing away from the center never hits it.
- A distance of exactly 0 counts as a miss, so a ray leaving the surface
  does not immediately hit it again.

Example:
    >>> from whitted.core.vector import Vector
    >>> from whitted.geometry.sphere import Sphere
    >>> from whitted.materials.surfaces import SHINY
    >>> sphere = Sphere(center=Vector(0.0, 1.0, -0.25), radius=1.0, surface=SHINY)
"""

import math
from dataclasses import dataclass
from typing import ClassVar

import taichi as ti
import taichi.math as tm

from whitted.core.ray import Intersection, Ray, normalize, vec3
from whitted.core.vector import Vector, dot, subtract
from whitted.core.vector import normalize as normalize_vector
from whitted.geometry.primitive import PrimitiveKind
from whitted.materials.surfaces import Surface


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center and radius.

    Attributes:
        center: Center point.
        radius: Radius. Only its square enters the intersection math.
        surface: Shared surface description.
    """

    center: Vector
    radius: float
    surface: Surface

    kind: ClassVar[PrimitiveKind] = PrimitiveKind.SPHERE

    @property
    def radius2(self) -> float:
        """Squared radius."""
        return self.radius * self.radius

    def normal(self, pos: Vector) -> Vector:
        """Outward unit normal at a point on the surface."""
        return normalize_vector(subtract(pos, self.center))

    def intersect(self, ray: Ray) -> Intersection | None:
        """Intersect a ray with the sphere.

        Args:
            ray: The ray to test.

        Returns:
            The hit record, or None when the sphere is behind the ray start,
            the ray misses, or the hit distance is exactly zero.
        """
        eo = subtract(self.center, ray.start)
        v = dot(eo, ray.direction)
        dist = 0.0
        if v >= 0:
            disc = self.radius2 - (dot(eo, eo) - v * v)
            if disc >= 0:
                dist = v - math.sqrt(disc)
        if dist == 0:
            return None
        return Intersection(primitive=self, ray=ray, distance=dist)


@ti.func
def hit_sphere(ray_origin: vec3, ray_direction: vec3, center: vec3, radius2: ti.f64):
    """Kernel-side counterpart of Sphere.intersect.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction of the ray.
        center: Sphere center.
        radius2: Squared sphere radius.

    Returns:
        A tuple (hit, dist) where hit is 1 for a hit and 0 otherwise.
    """
    eo = center - ray_origin
    v = tm.dot(eo, ray_direction)
    dist = 0.0
    if v >= 0.0:
        disc = radius2 - (tm.dot(eo, eo) - v * v)
        if disc >= 0.0:
            dist = v - ti.sqrt(disc)
    hit = 0
    if dist != 0.0:
        hit = 1
    return hit, dist


@ti.func
def sphere_normal(center: vec3, pos: vec3) -> vec3:
    """Outward unit normal of a sphere at pos."""
    return normalize(pos - center)
