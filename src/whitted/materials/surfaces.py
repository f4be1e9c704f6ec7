"""Procedural surfaces: shiny and checkerboard.

A Surface bundles four pure functions of the shading point. Surfaces carry
no state and a single instance is shared by every primitive that uses it.

The reference tracer calls the Python closures directly. Kernels cannot call
Python closures, so each built-in surface also has a SurfaceType tag that
selects the matching branch of the ``@ti.func`` evaluators below.

Example:
    >>> from whitted.materials.surfaces import CHECKERBOARD
    >>> from whitted.core.vector import Vector
    >>> CHECKERBOARD.reflect(Vector(0.5, 0.0, 1.5))
    0.1
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

import taichi as ti

from whitted.core.color import BLACK, GREY, WHITE, Color
from whitted.core.ray import vec3
from whitted.core.vector import Vector


class SurfaceType(IntEnum):
    """Kernel-side identifiers of the built-in surfaces."""

    SHINY = 0
    CHECKERBOARD = 1


@dataclass(frozen=True)
class Surface:
    """Material response at a surface point.

    Attributes:
        name: Name used in scene files.
        diffuse: Diffuse color at a point.
        specular: Specular color at a point.
        reflect: Mirror reflectance in [0, 1] at a point.
        roughness: Specular exponent shared by the whole surface.
        surface_type: Kernel evaluator for this surface, or None for a
            Python-only surface.
    """

    name: str
    diffuse: Callable[[Vector], Color]
    specular: Callable[[Vector], Color]
    reflect: Callable[[Vector], float]
    roughness: float
    surface_type: SurfaceType | None = None


def _is_odd_tile(pos: Vector) -> bool:
    # Float floor keeps non-finite points total: nan % 2 != 0
    return (pos.z // 1.0 + pos.x // 1.0) % 2.0 != 0.0


SHINY = Surface(
    name="shiny",
    diffuse=lambda _: WHITE,
    specular=lambda _: GREY,
    reflect=lambda _: 0.7,
    roughness=250.0,
    surface_type=SurfaceType.SHINY,
)

CHECKERBOARD = Surface(
    name="checkerboard",
    diffuse=lambda pos: WHITE if _is_odd_tile(pos) else BLACK,
    specular=lambda _: WHITE,
    reflect=lambda pos: 0.1 if _is_odd_tile(pos) else 0.7,
    roughness=150.0,
    surface_type=SurfaceType.CHECKERBOARD,
)

SURFACES: dict[str, Surface] = {
    SHINY.name: SHINY,
    CHECKERBOARD.name: CHECKERBOARD,
}


def get_surface(name: str) -> Surface:
    """Look up a built-in surface by name.

    Args:
        name: Surface name, e.g. "shiny" or "checkerboard".

    Returns:
        The shared Surface instance.

    Raises:
        ValueError: If no surface has that name.
    """
    surface = SURFACES.get(name.lower())
    if surface is None:
        raise ValueError(f"Unknown surface: {name}")
    return surface


# =============================================================================
# Kernel-side surface evaluation
# =============================================================================


@ti.func
def _is_odd_tile_ti(pos: vec3) -> ti.i32:
    return (ti.floor(pos.z) + ti.floor(pos.x)) % 2.0 != 0.0


@ti.func
def surface_diffuse(surface_type: ti.i32, pos: vec3) -> vec3:
    """Diffuse color of a built-in surface at pos."""
    result = vec3(0.0, 0.0, 0.0)
    if surface_type == int(SurfaceType.SHINY):
        result = vec3(1.0, 1.0, 1.0)
    elif surface_type == int(SurfaceType.CHECKERBOARD):
        if _is_odd_tile_ti(pos):
            result = vec3(1.0, 1.0, 1.0)
    return result


@ti.func
def surface_specular(surface_type: ti.i32, pos: vec3) -> vec3:
    """Specular color of a built-in surface at pos."""
    result = vec3(0.0, 0.0, 0.0)
    if surface_type == int(SurfaceType.SHINY):
        result = vec3(0.5, 0.5, 0.5)
    elif surface_type == int(SurfaceType.CHECKERBOARD):
        result = vec3(1.0, 1.0, 1.0)
    return result


@ti.func
def surface_reflect(surface_type: ti.i32, pos: vec3) -> ti.f64:
    """Mirror reflectance of a built-in surface at pos."""
    result = 0.0
    if surface_type == int(SurfaceType.SHINY):
        result = 0.7
    elif surface_type == int(SurfaceType.CHECKERBOARD):
        result = 0.7
        if _is_odd_tile_ti(pos):
            result = 0.1
    return result


@ti.func
def surface_roughness(surface_type: ti.i32) -> ti.f64:
    """Specular exponent of a built-in surface."""
    result = 0.0
    if surface_type == int(SurfaceType.SHINY):
        result = 250.0
    elif surface_type == int(SurfaceType.CHECKERBOARD):
        result = 150.0
    return result
