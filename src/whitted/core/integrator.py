"""Parallel Whitted integrator on Taichi.

The kernel traces one primary ray per pixel in a parallel for over the image.
Every pixel writes only its own entry of the color buffer, and the scene
tables are read-only during the launch, so no synchronization is needed.

Taichi functions cannot recurse, so the reflection recurrence of the
reference tracer (core.tracer) is evaluated as a bounded loop that carries
the product of reflectances seen so far:

    color  = sum_d  R_d * natural_d   +   R_max * grey   (if depth max is hit)
    R_0    = 1,     R_{d+1} = R_d * reflect_d

Results agree with the recursive evaluation up to floating point rounding.

Example:
    >>> from whitted.core.runtime import init_taichi
    >>> init_taichi("cpu")
    >>> from whitted.core.integrator import render_parallel
    >>> from whitted.preview.sink import ImageBuffer
    >>> from whitted.scene.default import create_default_scene
    >>> buffer = ImageBuffer(256, 256)
    >>> render_parallel(create_default_scene(), buffer, 256, 256)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from whitted.camera.pinhole import PinholeCamera
from whitted.core.color import Color, to_drawing_color
from whitted.core.ray import normalize, reflect, vec3
from whitted.core.tracer import MAX_DEPTH
from whitted.materials.surfaces import (
    surface_diffuse,
    surface_reflect,
    surface_roughness,
    surface_specular,
)
from whitted.preview.sink import PixelSink
from whitted.scene.intersection import (
    intersect_scene,
    light_colors,
    light_positions,
    num_lights,
    primitive_normal,
    primitive_surfaces,
    upload_scene,
)
from whitted.scene.scene import Scene

# =============================================================================
# Camera State
# =============================================================================

_camera_pos = ti.Vector.field(3, dtype=ti.f64, shape=())
_camera_forward = ti.Vector.field(3, dtype=ti.f64, shape=())
_camera_right = ti.Vector.field(3, dtype=ti.f64, shape=())
_camera_up = ti.Vector.field(3, dtype=ti.f64, shape=())


def setup_camera(camera: PinholeCamera) -> None:
    """Upload a camera basis for the kernel.

    Args:
        camera: The camera to render from.
    """
    _camera_pos[None] = [camera.pos.x, camera.pos.y, camera.pos.z]
    _camera_forward[None] = [camera.forward.x, camera.forward.y, camera.forward.z]
    _camera_right[None] = [camera.right.x, camera.right.y, camera.right.z]
    _camera_up[None] = [camera.up.x, camera.up.y, camera.up.z]


# =============================================================================
# Render Target (Image Buffer)
# =============================================================================

# Maximum supported image dimensions (preallocated to avoid kernel recompilation)
MAX_IMAGE_WIDTH = 1024
MAX_IMAGE_HEIGHT = 1024

_image_width = ti.field(dtype=ti.i32, shape=())
_image_height = ti.field(dtype=ti.i32, shape=())

# Linear (unclamped) color per pixel, indexed [x, y]
_color_buffer = ti.Vector.field(3, dtype=ti.f64, shape=(MAX_IMAGE_WIDTH, MAX_IMAGE_HEIGHT))

_render_target_initialized = ti.field(dtype=ti.i32, shape=())


def setup_render_target(width: int, height: int) -> None:
    """Set the active image size and clear the color buffer.

    Args:
        width: Image width in pixels (max MAX_IMAGE_WIDTH).
        height: Image height in pixels (max MAX_IMAGE_HEIGHT).

    Raises:
        ValueError: If a dimension is not positive or exceeds the maximum.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    if width > MAX_IMAGE_WIDTH or height > MAX_IMAGE_HEIGHT:
        raise ValueError(
            f"Image dimensions ({width}x{height}) exceed maximum supported "
            f"({MAX_IMAGE_WIDTH}x{MAX_IMAGE_HEIGHT})"
        )

    _image_width[None] = width
    _image_height[None] = height
    _render_target_initialized[None] = 1
    clear_render_target()


def clear_render_target() -> None:
    """Clear the color buffer to zero."""
    _color_buffer.fill(0.0)


def get_image_dimensions() -> tuple[int, int]:
    """Get the current render target dimensions as (width, height)."""
    return int(_image_width[None]), int(_image_height[None])


def _check_render_target_initialized() -> None:
    """Check if render target is initialized and raise if not."""
    if _render_target_initialized[None] == 0:
        raise RuntimeError("Render target not set up. Call setup_render_target() first.")


def get_image_numpy() -> npt.NDArray[np.float64]:
    """Get the linear color buffer of the active region.

    Returns:
        Array of shape (height, width, 3), row 0 at the top.

    Raises:
        RuntimeError: If the render target has not been set up.
    """
    _check_render_target_initialized()
    width, height = get_image_dimensions()
    image = _color_buffer.to_numpy()[:width, :height]
    return np.transpose(image, (1, 0, 2))


# =============================================================================
# Shading
# =============================================================================


@ti.func
def get_point(x: ti.i32, y: ti.i32, width: ti.i32, height: ti.i32) -> vec3:
    """Unit view direction through pixel (x, y); see camera.pinhole.get_point."""
    fx = ti.cast(x, ti.f64)
    fy = ti.cast(y, ti.f64)
    w = ti.cast(width, ti.f64)
    h = ti.cast(height, ti.f64)
    offset_x = (fx - (w / 2.0)) / 2.0 / w
    offset_y = -(fy - (h / 2.0)) / 2.0 / h
    return normalize(
        _camera_forward[None] + (offset_x * _camera_right[None] + offset_y * _camera_up[None])
    )


@ti.func
def natural_color(surface: ti.i32, pos: vec3, normal: vec3, reflect_dir: vec3) -> vec3:
    """Direct illumination at pos from every unoccluded light.

    Args:
        surface: SurfaceType of the shaded primitive.
        pos: The shading point.
        normal: Surface normal at pos.
        reflect_dir: Mirror direction, used for the specular term.

    Returns:
        Sum of diffuse and specular contributions.
    """
    col = vec3(0.0, 0.0, 0.0)
    roughness = surface_roughness(surface)
    for i in range(num_lights[None]):
        light_color = light_colors[i]
        ldis = light_positions[i] - pos
        livec = normalize(ldis)
        blocker, near = intersect_scene(pos, livec)
        if blocker < 0 or near > ti.sqrt(tm.dot(ldis, ldis)):
            illum = tm.dot(livec, normal)
            lcolor = vec3(0.0, 0.0, 0.0)
            if illum > 0.0:
                lcolor = illum * light_color
            specular = tm.dot(livec, normalize(reflect_dir))
            scolor = vec3(0.0, 0.0, 0.0)
            if specular > 0.0:
                scolor = (specular**roughness) * light_color
            col = col + (
                surface_diffuse(surface, pos) * lcolor + surface_specular(surface, pos) * scolor
            )
    return col


@ti.func
def trace_ray(ray_origin: vec3, ray_direction: vec3, max_depth: ti.i32) -> vec3:
    """Color seen along a primary ray, following up to max_depth reflections.

    Args:
        ray_origin: The camera position.
        ray_direction: The primary ray direction.
        max_depth: Depth at which the grey fallback replaces reflection.

    Returns:
        The unclamped color.
    """
    color = vec3(0.0, 0.0, 0.0)
    throughput = 1.0
    origin = ray_origin
    direction = ray_direction

    # Active flag for path continuation (Taichi doesn't support break in ti.func loops)
    active = 1

    for depth in range(max_depth + 1):
        if active == 1:
            index, dist = intersect_scene(origin, direction)
            if index < 0:
                # Miss: background is black
                active = 0
            else:
                pos = dist * direction + origin
                normal = primitive_normal(index, pos)
                reflect_dir = reflect(direction, normal)
                surface = primitive_surfaces[index]
                color += throughput * natural_color(surface, pos, normal, reflect_dir)
                if depth >= max_depth:
                    color += throughput * vec3(0.5, 0.5, 0.5)
                    active = 0
                else:
                    throughput *= surface_reflect(surface, pos)
                    origin = pos
                    direction = reflect_dir
    return color


@ti.kernel
def _render_kernel(width: ti.i32, height: ti.i32, max_depth: ti.i32):
    for x, y in ti.ndrange(width, height):
        direction = get_point(x, y, width, height)
        _color_buffer[x, y] = trace_ray(_camera_pos[None], direction, max_depth)


def render_image(max_depth: int = MAX_DEPTH) -> None:
    """Render the uploaded scene into the color buffer.

    Args:
        max_depth: Number of reflection bounces.

    Raises:
        RuntimeError: If the render target has not been set up.
    """
    _check_render_target_initialized()
    width, height = get_image_dimensions()
    _render_kernel(width, height, max_depth)


def render_parallel(
    scene: Scene,
    sink: PixelSink,
    width: int,
    height: int,
    *,
    max_depth: int = MAX_DEPTH,
) -> None:
    """Render a scene with the Taichi kernel and deliver pixels to a sink.

    Uploads the scene and camera, renders every pixel in parallel, then
    converts the color buffer with to_drawing_color and calls
    sink.set_pixel once per pixel in row-major order.

    Args:
        scene: The scene to render.
        sink: Receives every pixel exactly once.
        width: Image width in pixels.
        height: Image height in pixels.
        max_depth: Number of reflection bounces.

    Raises:
        ValueError: If the image size is invalid or a surface has no
            kernel evaluator.
        RuntimeError: If the scene exceeds the table capacities.
    """
    upload_scene(scene)
    setup_camera(scene.camera)
    setup_render_target(width, height)
    render_image(max_depth)

    image = get_image_numpy()
    for y in range(height):
        for x in range(width):
            r, g, b = image[y, x]
            sink.set_pixel(x, y, to_drawing_color(Color(float(r), float(g), float(b))))
