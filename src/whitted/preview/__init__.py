"""Preview module for pixel output and visualization.

Components:
    sink: PixelSink protocol and the NumPy-backed ImageBuffer
    export: PNG export via Pillow, uint8 conversion, RMSE
    display: Matplotlib-based static preview

Example:
    >>> from whitted.core.tracer import render
    >>> from whitted.preview import ImageBuffer, save_png
    >>> from whitted.scene import create_default_scene
    >>> buffer = ImageBuffer(256, 256)
    >>> render(create_default_scene(), buffer, 256, 256)
    >>> save_png(buffer, "output.png")
"""

from whitted.preview.display import show_preview
from whitted.preview.export import (
    compute_rmse,
    image_to_uint8,
    save_png,
    save_png_from_array,
)
from whitted.preview.sink import ImageBuffer, PixelSink

__all__ = [
    "PixelSink",
    "ImageBuffer",
    "show_preview",
    "save_png",
    "save_png_from_array",
    "image_to_uint8",
    "compute_rmse",
]
