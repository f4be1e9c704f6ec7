"""Tests for the pixel sink, image export and preview display.

Tests cover:
- ImageBuffer storage and validation
- Conversion to 8-bit images
- PNG export
- RMSE comparison
- Matplotlib preview
"""

import os
import tempfile

import numpy as np
import pytest
from PIL import Image as PILImage


class TestImageBuffer:
    """Tests for the NumPy-backed sink."""

    def test_set_and_get_pixel(self):
        from whitted.core.color import DrawingColor
        from whitted.preview.sink import ImageBuffer

        buffer = ImageBuffer(4, 3)
        buffer.set_pixel(3, 2, DrawingColor(10, 20, 30))
        assert buffer.get_pixel(3, 2) == DrawingColor(10, 20, 30)
        assert buffer.get_pixel(0, 0) == DrawingColor(0, 0, 0)

    def test_array_layout(self):
        """Arrays are (height, width, 3) with row y at index y."""
        from whitted.core.color import DrawingColor
        from whitted.preview.sink import ImageBuffer

        buffer = ImageBuffer(4, 3)
        buffer.set_pixel(1, 2, DrawingColor(255, 0, 0))
        array = buffer.to_array()
        assert array.shape == (3, 4, 3)
        assert list(array[2, 1]) == [255, 0, 0]

    def test_to_array_returns_copy(self):
        from whitted.preview.sink import ImageBuffer

        buffer = ImageBuffer(2, 2)
        array = buffer.to_array()
        array[0, 0] = 99
        assert buffer.to_array()[0, 0, 0] == 0

    def test_keeps_out_of_range_channels(self):
        from whitted.core.color import DrawingColor
        from whitted.preview.sink import ImageBuffer

        buffer = ImageBuffer(1, 1)
        buffer.set_pixel(0, 0, DrawingColor(255, 127, -255))
        assert buffer.get_pixel(0, 0) == DrawingColor(255, 127, -255)

    def test_huge_negative_channel_saturates(self):
        """Channels beyond the int32 range are stored at its bounds."""
        from whitted.core.color import Color, to_drawing_color
        from whitted.preview.sink import ImageBuffer

        buffer = ImageBuffer(1, 1)
        buffer.set_pixel(0, 0, to_drawing_color(Color(-1e8, 0.5, -1e30)))
        pixel = buffer.get_pixel(0, 0)
        assert pixel.r == np.iinfo(np.int32).min
        assert pixel.g == 127
        assert pixel.b == np.iinfo(np.int32).min

    @pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 4)])
    def test_invalid_size_raises(self, width, height):
        from whitted.preview.sink import ImageBuffer

        with pytest.raises(ValueError, match="must be positive"):
            ImageBuffer(width, height)

    def test_properties_and_repr(self):
        from whitted.preview.sink import ImageBuffer

        buffer = ImageBuffer(5, 7)
        assert buffer.width == 5
        assert buffer.height == 7
        assert repr(buffer) == "ImageBuffer(width=5, height=7)"


class TestImageToUint8:
    """Test conversion to uint8."""

    def test_output_type(self):
        from whitted.preview.export import image_to_uint8

        image = np.zeros((4, 4, 3), dtype=np.int32)
        assert image_to_uint8(image).dtype == np.uint8

    def test_clips_instead_of_wrapping(self):
        """Negative channels clip to 0 rather than wrapping to large values."""
        from whitted.preview.export import image_to_uint8

        image = np.array([[[-255, 127, 300]]], dtype=np.int32)
        assert list(image_to_uint8(image)[0, 0]) == [0, 127, 255]


class TestSavePng:
    """Test PNG export."""

    def test_save_png_creates_file(self):
        """Test that save_png creates a valid PNG file."""
        from whitted.core.color import DrawingColor
        from whitted.preview.export import save_png
        from whitted.preview.sink import ImageBuffer

        buffer = ImageBuffer(32, 16)
        buffer.set_pixel(5, 3, DrawingColor(200, 100, 50))

        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            filepath = f.name

        try:
            save_png(buffer, filepath)

            assert os.path.exists(filepath)

            img = PILImage.open(filepath)
            assert img.size == (32, 16)  # PIL size is (width, height)
            assert img.mode == "RGB"
            assert img.getpixel((5, 3)) == (200, 100, 50)
        finally:
            if os.path.exists(filepath):
                os.remove(filepath)

    def test_save_png_from_array(self, tmp_path):
        from whitted.preview.export import save_png_from_array

        image = np.zeros((8, 12, 3), dtype=np.int32)
        image[:, :, 0] = np.arange(12) * 20
        filepath = tmp_path / "gradient.png"
        save_png_from_array(image, str(filepath))

        img = PILImage.open(filepath)
        assert img.size == (12, 8)
        assert img.getpixel((11, 0)) == (220, 0, 0)


class TestComputeRmse:
    """Tests for compute_rmse."""

    def test_identical_images(self):
        from whitted.preview.export import compute_rmse

        image = np.full((4, 4, 3), 7, dtype=np.int32)
        assert compute_rmse(image, image) == 0.0

    def test_known_difference(self):
        from whitted.preview.export import compute_rmse

        a = np.zeros((2, 2, 3), dtype=np.int32)
        b = np.full((2, 2, 3), 3, dtype=np.int32)
        assert compute_rmse(a, b) == pytest.approx(3.0)

    def test_shape_mismatch_raises(self):
        from whitted.preview.export import compute_rmse

        with pytest.raises(ValueError, match="Image shapes must match"):
            compute_rmse(np.zeros((2, 2, 3)), np.zeros((2, 3, 3)))


class TestShowPreview:
    """Tests for the Matplotlib preview."""

    def test_show_preview_draws_image(self, monkeypatch):
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from whitted.preview.display import show_preview
        from whitted.preview.sink import ImageBuffer

        shown = []
        monkeypatch.setattr(plt, "show", lambda block=True: shown.append(block))

        show_preview(ImageBuffer(8, 6), block=False)

        fig = plt.gcf()
        ax = fig.axes[0]
        assert ax.get_title() == "Render Preview - 8x6"
        assert ax.images[0].get_array().shape == (6, 8, 3)
        assert shown == [False]
        plt.close(fig)
