"""Immutable 3D vector algebra used by the reference tracer.

All operations are pure and return new values. Arithmetic follows IEEE-754
float semantics throughout; nothing here raises for degenerate input.

Example:
    >>> from whitted.core.vector import Vector, cross, normalize
    >>> forward = normalize(Vector(-4.0, -1.5, -4.0))
    >>> right = cross(forward, Vector(0.0, -1.0, 0.0))
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A 3-component float vector.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
    """

    x: float
    y: float
    z: float


def scale(k: float, v: Vector) -> Vector:
    """Multiply every component of v by the scalar k."""
    return Vector(k * v.x, k * v.y, k * v.z)


def subtract(a: Vector, b: Vector) -> Vector:
    """Component-wise a - b."""
    return Vector(a.x - b.x, a.y - b.y, a.z - b.z)


def add(a: Vector, b: Vector) -> Vector:
    """Component-wise a + b."""
    return Vector(a.x + b.x, a.y + b.y, a.z + b.z)


def dot(a: Vector, b: Vector) -> float:
    """Compute the dot product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def magnitude(v: Vector) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Vector) -> Vector:
    """Scale a vector to unit length.

    A zero-length vector is scaled by +infinity rather than raising. Under
    IEEE-754 each zero component becomes NaN (0 * inf), so callers get a
    propagating non-finite value instead of an exception.

    Args:
        v: The input vector.

    Returns:
        The vector scaled by 1 / magnitude(v).
    """
    mag = magnitude(v)
    div = math.inf if mag == 0 else 1.0 / mag
    return scale(div, v)


def cross(a: Vector, b: Vector) -> Vector:
    """Compute the cross product a x b."""
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def divide(numerator: float, denominator: float) -> float:
    """Divide two floats with IEEE-754 semantics.

    Python raises ZeroDivisionError for float division by zero. Intersection
    math needs the IEEE result instead: a signed infinity, or NaN for 0/0.

    Args:
        numerator: The dividend.
        denominator: The divisor, possibly a signed zero.

    Returns:
        numerator / denominator as defined by IEEE-754.
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
