"""Unit tests for vector and color arithmetic.

Tests cover:
- Basic vector operations
- Normalization, including the zero vector
- IEEE division helper
- Color arithmetic and display conversion
"""

import math

import pytest


class TestVectorOps:
    """Tests for the pure vector helpers."""

    def test_add_subtract_scale(self):
        """Component-wise operations."""
        from whitted.core.vector import Vector, add, scale, subtract

        a = Vector(1.0, 2.0, 3.0)
        b = Vector(4.0, -5.0, 6.0)
        assert add(a, b) == Vector(5.0, -3.0, 9.0)
        assert subtract(a, b) == Vector(-3.0, 7.0, -3.0)
        assert scale(2.0, a) == Vector(2.0, 4.0, 6.0)

    def test_dot_and_magnitude(self):
        """Dot product and Euclidean length."""
        from whitted.core.vector import Vector, dot, magnitude

        assert dot(Vector(1.0, 2.0, 3.0), Vector(4.0, 5.0, 6.0)) == 32.0
        assert magnitude(Vector(3.0, 4.0, 0.0)) == 5.0

    def test_cross_is_orthogonal(self):
        """The cross product is perpendicular to both inputs."""
        from whitted.core.vector import Vector, cross, dot

        a = Vector(1.0, 2.0, 3.0)
        b = Vector(-2.0, 0.5, 4.0)
        c = cross(a, b)
        assert dot(c, a) == pytest.approx(0.0, abs=1e-12)
        assert dot(c, b) == pytest.approx(0.0, abs=1e-12)

    def test_cross_basis(self):
        """x cross y is z."""
        from whitted.core.vector import Vector, cross

        assert cross(Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0)) == Vector(0.0, 0.0, 1.0)


class TestNormalize:
    """Tests for normalize."""

    def test_unit_length(self):
        """Normalized vectors have unit magnitude."""
        from whitted.core.vector import Vector, magnitude, normalize

        v = normalize(Vector(3.0, -2.0, 7.5))
        assert magnitude(v) == pytest.approx(1.0, abs=1e-12)

    def test_zero_vector_does_not_raise(self):
        """A zero vector yields non-finite components instead of an error."""
        from whitted.core.vector import Vector, normalize

        v = normalize(Vector(0.0, 0.0, 0.0))
        assert math.isnan(v.x)
        assert math.isnan(v.y)
        assert math.isnan(v.z)


class TestDivide:
    """Tests for the IEEE division helper."""

    def test_ordinary_division(self):
        from whitted.core.vector import divide

        assert divide(3.0, 2.0) == 1.5

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (1.0, 0.0, math.inf),
            (1.0, -0.0, -math.inf),
            (-1.0, 0.0, -math.inf),
            (-1.0, -0.0, math.inf),
        ],
    )
    def test_division_by_signed_zero(self, numerator, denominator, expected):
        """Division by zero returns a signed infinity."""
        from whitted.core.vector import divide

        assert divide(numerator, denominator) == expected

    def test_zero_over_zero_is_nan(self):
        from whitted.core.vector import divide

        assert math.isnan(divide(0.0, 0.0))


class TestColor:
    """Tests for color arithmetic and conversion to display values."""

    def test_color_arithmetic(self):
        """Scale, add and multiply are component-wise."""
        from whitted.core.color import Color, add_colors, multiply_colors, scale_color

        a = Color(0.5, 0.25, 1.0)
        b = Color(2.0, 4.0, 0.5)
        assert scale_color(2.0, a) == Color(1.0, 0.5, 2.0)
        assert add_colors(a, b) == Color(2.5, 4.25, 1.5)
        assert multiply_colors(a, b) == Color(1.0, 1.0, 0.5)

    def test_named_colors(self):
        from whitted.core.color import BACKGROUND, BLACK, DEFAULT_COLOR, GREY, WHITE, Color

        assert WHITE == Color(1.0, 1.0, 1.0)
        assert GREY == Color(0.5, 0.5, 0.5)
        assert BLACK == Color(0.0, 0.0, 0.0)
        assert BACKGROUND == BLACK
        assert DEFAULT_COLOR == BLACK

    def test_to_drawing_color_clamps_high_only(self):
        """Channels above 1 saturate; negative channels pass through."""
        from whitted.core.color import Color, DrawingColor, to_drawing_color

        assert to_drawing_color(Color(2.0, 0.5, -1.0)) == DrawingColor(255, 127, -255)

    def test_to_drawing_color_floors(self):
        from whitted.core.color import Color, DrawingColor, to_drawing_color

        assert to_drawing_color(Color(0.999, 0.0, 1.0)) == DrawingColor(254, 0, 255)

    def test_non_finite_channels(self):
        """NaN and -inf become 0; +inf saturates."""
        from whitted.core.color import Color, DrawingColor, to_drawing_color

        result = to_drawing_color(Color(math.nan, -math.inf, math.inf))
        assert result == DrawingColor(0, 0, 255)
