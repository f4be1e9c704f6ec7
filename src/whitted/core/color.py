"""Unclamped additive RGB color and the final display conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """A linear RGB color.

    Channels are unbounded floats: they may exceed 1.0 or go negative while
    light contributions are accumulated. Only to_drawing_color() clamps.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class DrawingColor:
    """An integer display color as written to a pixel sink."""

    r: int
    g: int
    b: int


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
GREY = Color(0.5, 0.5, 0.5)

# Miss color and the starting value of light accumulation
BACKGROUND = BLACK
DEFAULT_COLOR = BLACK


def scale_color(k: float, c: Color) -> Color:
    """Multiply every channel of c by the scalar k."""
    return Color(k * c.r, k * c.g, k * c.b)


def add_colors(a: Color, b: Color) -> Color:
    """Channel-wise a + b."""
    return Color(a.r + b.r, a.g + b.g, a.b + b.b)


def multiply_colors(a: Color, b: Color) -> Color:
    """Channel-wise a * b."""
    return Color(a.r * b.r, a.g * b.g, a.b * b.b)


def _to_channel(value: float) -> int:
    scaled = min(value, 1) * 255
    if not math.isfinite(scaled):
        return 0
    return math.floor(scaled)


def to_drawing_color(c: Color) -> DrawingColor:
    """Convert a linear color to integer display channels.

    Each channel is clamped to at most 1.0, scaled by 255 and floored. There
    is no lower clamp: a channel of -1.0 becomes -255. A channel that is not
    finite after scaling (NaN, -inf) becomes 0, matching a canvas that
    ignores an invalid fill.

    Args:
        c: The accumulated linear color.

    Returns:
        The integer color for the output sink.
    """
    return DrawingColor(_to_channel(c.r), _to_channel(c.g), _to_channel(c.b))
