"""Camera module for view and ray generation.

Components:
    pinhole: Look-at camera with a fixed 1.5-scaled basis and the
        pixel-to-direction projection shared by both render engines

The kernel-side copy of the basis lives in core.integrator (setup_camera),
which uploads a PinholeCamera into Taichi fields before rendering.
"""

from .pinhole import (
    BASIS_SCALE,
    WORLD_DOWN,
    PinholeCamera,
    get_point,
    make_camera,
    recenter_x,
    recenter_y,
)

__all__ = [
    "PinholeCamera",
    "make_camera",
    "get_point",
    "recenter_x",
    "recenter_y",
    "WORLD_DOWN",
    "BASIS_SCALE",
]
