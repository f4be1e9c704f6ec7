"""Geometry module for the closed set of primitives.

Components:
    primitive: PrimitiveKind tag and the Primitive union
    sphere: Sphere with the projected-center intersection
    plane: One-sided plane

Each primitive exists twice: a frozen dataclass used by the reference tracer
and a Taichi function (hit_sphere, hit_plane) used by the parallel kernel.
Both return the same distances for the same inputs.
"""

from .plane import Plane, hit_plane
from .primitive import Primitive, PrimitiveKind
from .sphere import Sphere, hit_sphere, sphere_normal

__all__ = [
    "Primitive",
    "PrimitiveKind",
    "Sphere",
    "Plane",
    "hit_sphere",
    "hit_plane",
    "sphere_normal",
]
