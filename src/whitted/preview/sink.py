"""Pixel sinks: where rendered pixels are delivered.

Renderers only need ``set_pixel(x, y, color)``. ImageBuffer is the in-memory
sink used by the export and preview helpers.
"""

from __future__ import annotations

from typing import Protocol

import numpy as np
import numpy.typing as npt

from whitted.core.color import DrawingColor

_CHANNEL_MIN = int(np.iinfo(np.int32).min)
_CHANNEL_MAX = int(np.iinfo(np.int32).max)


class PixelSink(Protocol):
    """Anything that accepts display colors by pixel coordinate."""

    def set_pixel(self, x: int, y: int, color: DrawingColor) -> None:
        """Receive the final color of pixel (x, y)."""
        ...


class ImageBuffer:
    """A NumPy-backed pixel sink.

    Pixels are stored as int32 in an array of shape (height, width, 3), row
    0 at the top. Channels outside [0, 255] are kept as delivered, except
    that values beyond the int32 range saturate at its bounds. Clipping to
    [0, 255] happens in preview.export.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.int32)

    @property
    def width(self) -> int:
        """Get the image width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self._height

    def set_pixel(self, x: int, y: int, color: DrawingColor) -> None:
        """Store the color of pixel (x, y)."""
        self._pixels[y, x] = [
            min(max(channel, _CHANNEL_MIN), _CHANNEL_MAX)
            for channel in (color.r, color.g, color.b)
        ]

    def get_pixel(self, x: int, y: int) -> DrawingColor:
        """Read back the color stored at pixel (x, y)."""
        r, g, b = self._pixels[y, x]
        return DrawingColor(int(r), int(g), int(b))

    def to_array(self) -> npt.NDArray[np.int32]:
        """Return a copy of the pixel array, shape (height, width, 3)."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        """Return a string representation of the buffer."""
        return f"ImageBuffer(width={self.width}, height={self.height})"
