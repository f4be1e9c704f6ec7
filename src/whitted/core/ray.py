"""Ray and intersection records plus the Taichi-side vector helpers.

The Python dataclasses are used by the reference tracer. The ``@ti.func``
helpers mirror the same vector rules inside kernels, using float64 vectors
so both engines work at the same precision.

Example:
    >>> from whitted.core.ray import Ray, ray_at
    >>> from whitted.core.vector import Vector
    >>> ray = Ray(start=Vector(0.0, 2.0, 0.0), direction=Vector(0.0, -1.0, 0.0))
    >>> ray_at(ray, 2.0)
    Vector(x=0.0, y=0.0, z=0.0)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

import taichi as ti
import taichi.math as tm

from whitted.core.vector import Vector, add, scale

if TYPE_CHECKING:
    from whitted.geometry.primitive import Primitive

# float64 3-vector used by every kernel-side function
vec3 = ti.types.vector(3, ti.f64)


@dataclass(frozen=True)
class Ray:
    """A ray with a start point and a direction.

    Attributes:
        start: The origin of the ray.
        direction: The direction of travel. Expected to be unit length where
            shading relies on dot products, but not enforced.
    """

    start: Vector
    direction: Vector


@dataclass(frozen=True)
class Intersection:
    """A ray/primitive hit, valid only for the query that produced it.

    Attributes:
        primitive: The primitive that was hit.
        ray: The ray that was traced.
        distance: Parameter along the ray at the hit point.
    """

    primitive: "Primitive"
    ray: Ray
    distance: float


def ray_at(ray: Ray, distance: float) -> Vector:
    """Compute the point ray.start + distance * ray.direction."""
    return add(scale(distance, ray.direction), ray.start)


# =============================================================================
# Kernel-side vector helpers
# =============================================================================


@ti.func
def normalize(v: vec3) -> vec3:
    """Scale a vector to unit length inside a kernel.

    Same rule as the Python version: a zero-length vector is scaled by
    +infinity instead of being left untouched.

    Args:
        v: The input vector.

    Returns:
        v scaled by 1 / |v|.
    """
    mag = ti.sqrt(tm.dot(v, v))
    div = tm.inf
    if mag != 0.0:
        div = 1.0 / mag
    return div * v


@ti.func
def reflect(direction: vec3, normal: vec3) -> vec3:
    """Mirror a direction about a surface normal: d - 2 * dot(n, d) * n."""
    return direction - 2.0 * (tm.dot(normal, direction) * normal)
