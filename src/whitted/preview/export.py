"""Image export utilities for rendered images.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from whitted.preview.export import save_png
    >>> from whitted.preview.sink import ImageBuffer
    >>> buffer = ImageBuffer(256, 256)
    >>> # ... render into buffer ...
    >>> save_png(buffer, "output.png")
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.preview.sink import ImageBuffer


def image_to_uint8(image: npt.NDArray[np.integer]) -> npt.NDArray[np.uint8]:
    """Convert display channels to uint8, clipping to [0, 255].

    Display conversion does not clamp the low end, so negative channels can
    reach the output; they are clipped here rather than wrapped.

    Args:
        image: Integer image array of shape (H, W, 3).

    Returns:
        8-bit image array of shape (H, W, 3).
    """
    return np.clip(image, 0, 255).astype(np.uint8)


def save_png_from_array(image: npt.NDArray[np.integer], filepath: str) -> None:
    """Save an integer image array of shape (H, W, 3) as a PNG file."""
    pil_image = PILImage.fromarray(image_to_uint8(image))
    pil_image.save(filepath)


def save_png(buffer: ImageBuffer, filepath: str) -> None:
    """Save the contents of an ImageBuffer as a PNG file.

    Args:
        buffer: The rendered image.
        filepath: Output file path (should end in .png).
    """
    save_png_from_array(buffer.to_array(), filepath)


def compute_rmse(
    image_a: npt.NDArray[np.number],
    image_b: npt.NDArray[np.number],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(
            f"Image shapes must match: {image_a.shape} vs {image_b.shape}"
        )

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
