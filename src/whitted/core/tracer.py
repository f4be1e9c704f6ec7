"""Sequential reference ray tracer.

Evaluates the Whitted recurrence with ordinary bounded recursion:

    trace_ray(ray, depth)  -> background on a miss, else shade()
    shade(hit, depth)      -> background + natural_color()
                              + (grey if depth >= max_depth
                                 else reflection_color())
    reflection_color()     -> reflect(pos) * trace_ray(reflected ray, depth + 1)

With the default max_depth of 5 a primary ray is followed through at most
five reflection bounces; at the last level a flat grey stands in for the
light that further bounces would have gathered.

This engine is the numeric reference. core.integrator renders the same
scenes in parallel with Taichi.

Example:
    >>> from whitted.core.tracer import RayTracer
    >>> from whitted.preview.sink import ImageBuffer
    >>> from whitted.scene.default import create_default_scene
    >>> buffer = ImageBuffer(64, 64)
    >>> RayTracer().render(create_default_scene(), buffer, 64, 64)
"""

from __future__ import annotations

from whitted.camera.pinhole import get_point
from whitted.core.color import (
    BACKGROUND,
    DEFAULT_COLOR,
    GREY,
    Color,
    add_colors,
    multiply_colors,
    scale_color,
    to_drawing_color,
)
from whitted.core.ray import Intersection, Ray, ray_at
from whitted.core.vector import Vector, dot, magnitude, normalize, scale, subtract
from whitted.geometry.primitive import Primitive
from whitted.preview.sink import PixelSink
from whitted.scene.scene import Scene

# Number of reflection bounces before the grey fallback
MAX_DEPTH = 5


class RayTracer:
    """Recursive ray tracer over an immutable Scene.

    Attributes:
        max_depth: Depth at which shading stops recursing and adds grey.
    """

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        self.max_depth = max_depth

    def nearest_intersection(self, ray: Ray, scene: Scene) -> Intersection | None:
        """Find the closest hit by scanning every primitive.

        A hit replaces the current best only when strictly closer, so the
        first primitive wins an exact tie.

        Args:
            ray: The ray to trace.
            scene: The scene to search.

        Returns:
            The closest intersection, or None if nothing was hit.
        """
        closest = float("inf")
        closest_hit = None
        for primitive in scene.primitives:
            hit = primitive.intersect(ray)
            if hit is not None and hit.distance < closest:
                closest_hit = hit
                closest = hit.distance
        return closest_hit

    def test_ray(self, ray: Ray, scene: Scene) -> float | None:
        """Distance to the nearest hit along a shadow ray, or None."""
        hit = self.nearest_intersection(ray, scene)
        return None if hit is None else hit.distance

    def trace_ray(self, ray: Ray, scene: Scene, depth: int) -> Color:
        """Color seen along a ray at the given recursion depth."""
        hit = self.nearest_intersection(ray, scene)
        if hit is None:
            return BACKGROUND
        return self.shade(hit, scene, depth)

    def shade(self, hit: Intersection, scene: Scene, depth: int) -> Color:
        """Shade a hit: direct light plus reflection or the depth fallback.

        Args:
            hit: The intersection to shade.
            scene: The scene, for lights and further rays.
            depth: Current recursion depth (0 for primary rays).

        Returns:
            The unclamped color at the hit point.
        """
        direction = hit.ray.direction
        pos = ray_at(hit.ray, hit.distance)
        normal = hit.primitive.normal(pos)
        reflect_dir = subtract(direction, scale(2, scale(dot(normal, direction), normal)))
        natural = add_colors(
            BACKGROUND,
            self.natural_color(hit.primitive, pos, normal, reflect_dir, scene),
        )
        if depth >= self.max_depth:
            return add_colors(natural, GREY)
        return add_colors(
            natural,
            self.reflection_color(hit.primitive, pos, reflect_dir, scene, depth),
        )

    def reflection_color(
        self,
        primitive: Primitive,
        pos: Vector,
        reflect_dir: Vector,
        scene: Scene,
        depth: int,
    ) -> Color:
        """Reflected color weighted by the surface reflectance at pos."""
        return scale_color(
            primitive.surface.reflect(pos),
            self.trace_ray(Ray(pos, reflect_dir), scene, depth + 1),
        )

    def natural_color(
        self,
        primitive: Primitive,
        pos: Vector,
        normal: Vector,
        reflect_dir: Vector,
        scene: Scene,
    ) -> Color:
        """Direct illumination from every unoccluded light.

        Shadowing is binary: a light contributes nothing when the shadow ray
        toward it hits anything no farther than the light itself.

        Args:
            primitive: The primitive being shaded.
            pos: The shading point.
            normal: Surface normal at pos.
            reflect_dir: Mirror direction, used for the specular term.
            scene: The scene with its lights.

        Returns:
            Sum of diffuse and specular contributions over all lights.
        """
        surface = primitive.surface
        col = DEFAULT_COLOR
        for light in scene.lights:
            ldis = subtract(light.pos, pos)
            livec = normalize(ldis)
            near = self.test_ray(Ray(pos, livec), scene)
            if near is not None and near <= magnitude(ldis):
                continue
            illum = dot(livec, normal)
            lcolor = scale_color(illum, light.color) if illum > 0 else DEFAULT_COLOR
            specular = dot(livec, normalize(reflect_dir))
            scolor = (
                scale_color(specular**surface.roughness, light.color)
                if specular > 0
                else DEFAULT_COLOR
            )
            col = add_colors(
                col,
                add_colors(
                    multiply_colors(surface.diffuse(pos), lcolor),
                    multiply_colors(surface.specular(pos), scolor),
                ),
            )
        return col

    def render(self, scene: Scene, sink: PixelSink, width: int, height: int) -> None:
        """Render every pixel row by row into a sink.

        Args:
            scene: The scene to render.
            sink: Receives set_pixel(x, y, color) once per pixel.
            width: Image width in pixels.
            height: Image height in pixels.
        """
        camera = scene.camera
        for y in range(height):
            for x in range(width):
                ray = Ray(camera.pos, get_point(camera, x, y, width, height))
                sink.set_pixel(x, y, to_drawing_color(self.trace_ray(ray, scene, 0)))


def render(
    scene: Scene,
    sink: PixelSink,
    width: int,
    height: int,
    *,
    max_depth: int = MAX_DEPTH,
) -> None:
    """Render a scene with the reference tracer.

    Args:
        scene: The scene to render.
        sink: Receives every pixel exactly once.
        width: Image width in pixels.
        height: Image height in pixels.
        max_depth: Number of reflection bounces.
    """
    RayTracer(max_depth=max_depth).render(scene, sink, width, height)
