"""Core rendering module.

Components:
    vector: Immutable Vector and its algebra (scale, add, subtract, dot,
        cross, magnitude, normalize)
    color: Unclamped Color, DrawingColor and to_drawing_color
    ray: Ray and Intersection records, kernel-side vector helpers
    tracer: Sequential recursive reference tracer
    runtime: Taichi initialization (float64, IEEE arithmetic)
    integrator: Parallel Taichi renderer
"""

from .color import (
    BACKGROUND,
    BLACK,
    DEFAULT_COLOR,
    GREY,
    WHITE,
    Color,
    DrawingColor,
    add_colors,
    multiply_colors,
    scale_color,
    to_drawing_color,
)
from .ray import Intersection, Ray, ray_at
from .vector import (
    Vector,
    add,
    cross,
    divide,
    dot,
    magnitude,
    normalize,
    scale,
    subtract,
)

# Note: tracer and integrator are NOT imported here. The tracer depends on
# the camera, geometry and scene packages, which import from core. The
# integrator also allocates Taichi fields at import time, so import it
# directly after calling runtime.init_taichi():
#   from whitted.core.tracer import render
#   from whitted.core.integrator import render_parallel

__all__ = [
    "Vector",
    "scale",
    "add",
    "subtract",
    "dot",
    "cross",
    "magnitude",
    "normalize",
    "divide",
    "Color",
    "DrawingColor",
    "BLACK",
    "WHITE",
    "GREY",
    "BACKGROUND",
    "DEFAULT_COLOR",
    "scale_color",
    "add_colors",
    "multiply_colors",
    "to_drawing_color",
    "Ray",
    "Intersection",
    "ray_at",
]
