"""Matplotlib-based preview display for rendered images.

Example:
    >>> from whitted.preview.display import show_preview
    >>> show_preview(buffer, title="Default scene")
"""

from __future__ import annotations

from whitted.preview.export import image_to_uint8
from whitted.preview.sink import ImageBuffer


def show_preview(
    buffer: ImageBuffer,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Display a rendered image as a Matplotlib figure.

    Args:
        buffer: The rendered image.
        title: Custom title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    # Pixel-exact display, no smoothing
    ax.imshow(image_to_uint8(buffer.to_array()), interpolation="nearest")
    ax.axis("off")

    if title is None:
        title = f"Render Preview - {buffer.width}x{buffer.height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
