"""Kernel-side scene tables and nearest-hit search.

Primitives and lights are stored in Taichi fields (structure of arrays) so
kernels can scan them. Each primitive row holds a kind tag (PrimitiveKind)
and shares its vector and scalar columns between kinds:

    kind     vector column     scalar column   surface column
    SPHERE   center            radius^2        SurfaceType
    PLANE    normal            offset          SurfaceType

Rows keep the scene's primitive order, so the kernel breaks exact distance
ties the same way as the reference tracer.

Fields are allocated at import time; initialize Taichi first
(core.runtime.init_taichi).

Example:
    >>> from whitted.core.runtime import init_taichi
    >>> init_taichi("cpu")
    >>> from whitted.scene.intersection import upload_scene, get_primitive_count
    >>> from whitted.scene.default import create_default_scene
    >>> upload_scene(create_default_scene())
    >>> get_primitive_count()
    3
"""

import taichi as ti
import taichi.math as tm

from whitted.core.color import Color
from whitted.core.ray import vec3
from whitted.core.vector import Vector
from whitted.geometry.plane import Plane, hit_plane
from whitted.geometry.primitive import PrimitiveKind
from whitted.geometry.sphere import Sphere, hit_sphere, sphere_normal
from whitted.materials.surfaces import Surface
from whitted.scene.scene import Scene

# Maximum number of primitives and lights supported in the scene
MAX_PRIMITIVES = 256
MAX_LIGHTS = 64

# Primitive storage: Structure of Arrays layout
primitive_kinds = ti.field(dtype=ti.i32, shape=MAX_PRIMITIVES)
primitive_vectors = ti.Vector.field(3, dtype=ti.f64, shape=MAX_PRIMITIVES)
primitive_scalars = ti.field(dtype=ti.f64, shape=MAX_PRIMITIVES)
primitive_surfaces = ti.field(dtype=ti.i32, shape=MAX_PRIMITIVES)
num_primitives = ti.field(dtype=ti.i32, shape=())

# Light storage
light_positions = ti.Vector.field(3, dtype=ti.f64, shape=MAX_LIGHTS)
light_colors = ti.Vector.field(3, dtype=ti.f64, shape=MAX_LIGHTS)
num_lights = ti.field(dtype=ti.i32, shape=())


def clear_scene() -> None:
    """Remove all primitives and lights.

    Resets the counts to zero. Row data is overwritten by later additions.
    """
    num_primitives[None] = 0
    num_lights[None] = 0


def _surface_index(surface: Surface) -> int:
    if surface.surface_type is None:
        raise ValueError(
            f"Surface {surface.name!r} has no kernel evaluator; "
            "render it with the reference tracer"
        )
    return int(surface.surface_type)


def _add_primitive(kind: PrimitiveKind, vector: Vector, scalar: float, surface: Surface) -> int:
    surface_index = _surface_index(surface)
    idx = num_primitives[None]
    if idx >= MAX_PRIMITIVES:
        raise RuntimeError(f"Maximum number of primitives ({MAX_PRIMITIVES}) exceeded")
    primitive_kinds[idx] = int(kind)
    primitive_vectors[idx] = [vector.x, vector.y, vector.z]
    primitive_scalars[idx] = scalar
    primitive_surfaces[idx] = surface_index
    num_primitives[None] = idx + 1
    return idx


def add_sphere(sphere: Sphere) -> int:
    """Append a sphere to the primitive table.

    Args:
        sphere: The sphere to add.

    Returns:
        The row index of the added sphere.

    Raises:
        RuntimeError: If the maximum number of primitives is exceeded.
        ValueError: If the sphere's surface has no kernel evaluator.
    """
    return _add_primitive(PrimitiveKind.SPHERE, sphere.center, sphere.radius2, sphere.surface)


def add_plane(plane: Plane) -> int:
    """Append a plane to the primitive table.

    Args:
        plane: The plane to add.

    Returns:
        The row index of the added plane.

    Raises:
        RuntimeError: If the maximum number of primitives is exceeded.
        ValueError: If the plane's surface has no kernel evaluator.
    """
    return _add_primitive(PrimitiveKind.PLANE, plane.normal_vector, plane.offset, plane.surface)


def add_light(pos: Vector, color: Color) -> int:
    """Append a point light.

    Returns:
        The index of the added light.

    Raises:
        RuntimeError: If the maximum number of lights is exceeded.
    """
    idx = num_lights[None]
    if idx >= MAX_LIGHTS:
        raise RuntimeError(f"Maximum number of lights ({MAX_LIGHTS}) exceeded")
    light_positions[idx] = [pos.x, pos.y, pos.z]
    light_colors[idx] = [color.r, color.g, color.b]
    num_lights[None] = idx + 1
    return idx


def upload_scene(scene: Scene) -> None:
    """Replace the tables with the primitives and lights of a scene.

    Args:
        scene: The scene to upload. Its camera is uploaded separately
            (core.integrator.setup_camera).

    Raises:
        RuntimeError: If the scene exceeds the table capacities.
        ValueError: If a primitive's surface has no kernel evaluator.
    """
    if len(scene.primitives) > MAX_PRIMITIVES:
        raise RuntimeError(f"Maximum number of primitives ({MAX_PRIMITIVES}) exceeded")
    if len(scene.lights) > MAX_LIGHTS:
        raise RuntimeError(f"Maximum number of lights ({MAX_LIGHTS}) exceeded")
    for primitive in scene.primitives:
        _surface_index(primitive.surface)

    clear_scene()
    for primitive in scene.primitives:
        if isinstance(primitive, Sphere):
            add_sphere(primitive)
        else:
            add_plane(primitive)
    for light in scene.lights:
        add_light(light.pos, light.color)


def get_primitive_count() -> int:
    """Get the number of primitives in the table."""
    return int(num_primitives[None])


def get_light_count() -> int:
    """Get the number of lights in the table."""
    return int(num_lights[None])


@ti.func
def intersect_primitive(index: ti.i32, ray_origin: vec3, ray_direction: vec3):
    """Intersect a ray with one primitive row, dispatching on its kind.

    Returns:
        A tuple (hit, dist) where hit is 1 for a hit and 0 otherwise.
    """
    hit = 0
    dist = 0.0
    kind = primitive_kinds[index]
    if kind == int(PrimitiveKind.SPHERE):
        hit, dist = hit_sphere(
            ray_origin, ray_direction, primitive_vectors[index], primitive_scalars[index]
        )
    elif kind == int(PrimitiveKind.PLANE):
        hit, dist = hit_plane(
            ray_origin, ray_direction, primitive_vectors[index], primitive_scalars[index]
        )
    return hit, dist


@ti.func
def primitive_normal(index: ti.i32, pos: vec3) -> vec3:
    """Surface normal of primitive row index at pos."""
    normal = primitive_vectors[index]
    if primitive_kinds[index] == int(PrimitiveKind.SPHERE):
        normal = sphere_normal(primitive_vectors[index], pos)
    return normal


@ti.func
def intersect_scene(ray_origin: vec3, ray_direction: vec3):
    """Find the closest primitive hit by a ray.

    Scans rows in order and keeps a hit only when strictly closer than the
    best so far.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The direction of the ray.

    Returns:
        A tuple (index, dist): the row of the closest primitive, or -1 on a
        miss, and its hit distance (+inf on a miss).
    """
    closest = tm.inf
    closest_index = -1
    for i in range(num_primitives[None]):
        hit, dist = intersect_primitive(i, ray_origin, ray_direction)
        if hit == 1 and dist < closest:
            closest = dist
            closest_index = i
    return closest_index, closest
