"""Materials module: procedural surfaces.

Components:
    surfaces: Surface bundles (diffuse, specular, reflect, roughness),
        the built-in SHINY and CHECKERBOARD surfaces and their kernel-side
        evaluators
"""

from .surfaces import (
    CHECKERBOARD,
    SHINY,
    SURFACES,
    Surface,
    SurfaceType,
    get_surface,
)

__all__ = [
    "Surface",
    "SurfaceType",
    "SHINY",
    "CHECKERBOARD",
    "SURFACES",
    "get_surface",
]
