"""One-sided infinite plane primitive.

A plane is the set of points p with dot(normal, p) + offset == 0. Rays
travelling along the normal (denom > 0) are culled, so the plane is visible
from its front side only.

Division follows IEEE-754: a ray exactly parallel to the plane (denom == 0)
is not culled and yields an infinite or NaN distance.
"""

from dataclasses import dataclass
from typing import ClassVar

import taichi as ti
import taichi.math as tm

from whitted.core.ray import Intersection, Ray, vec3
from whitted.core.vector import Vector, divide, dot
from whitted.geometry.primitive import PrimitiveKind
from whitted.materials.surfaces import Surface


@dataclass(frozen=True)
class Plane:
    """A plane given by a unit normal and a signed offset.

    Attributes:
        normal_vector: Unit normal of the visible side.
        offset: Signed distance term in dot(normal, p) + offset == 0.
        surface: Shared surface description.
    """

    normal_vector: Vector
    offset: float
    surface: Surface

    kind: ClassVar[PrimitiveKind] = PrimitiveKind.PLANE

    def normal(self, pos: Vector) -> Vector:
        """The plane normal; independent of the position."""
        return self.normal_vector

    def intersect(self, ray: Ray) -> Intersection | None:
        """Intersect a ray with the front side of the plane."""
        denom = dot(self.normal_vector, ray.direction)
        if denom > 0:
            return None
        dist = divide(dot(self.normal_vector, ray.start) + self.offset, -denom)
        return Intersection(primitive=self, ray=ray, distance=dist)


@ti.func
def hit_plane(ray_origin: vec3, ray_direction: vec3, normal: vec3, offset: ti.f64):
    """Kernel-side counterpart of Plane.intersect.

    Returns:
        A tuple (hit, dist) where hit is 1 for a hit and 0 otherwise.
    """
    denom = tm.dot(normal, ray_direction)
    hit = 1
    dist = 0.0
    if denom > 0.0:
        hit = 0
    else:
        dist = (tm.dot(normal, ray_origin) + offset) / -denom
    return hit, dist
