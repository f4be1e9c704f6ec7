"""The closed set of primitive kinds.

Every primitive provides ``intersect(ray)`` and ``normal(pos)``. The set is
closed: adding a kind means adding a PrimitiveKind member, a class, and a
branch in the kernel dispatch (scene.intersection), not subclassing.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from whitted.geometry.plane import Plane
    from whitted.geometry.sphere import Sphere


class PrimitiveKind(IntEnum):
    """Tag stored in the kernel-side primitive table."""

    SPHERE = 0
    PLANE = 1


Primitive = Union["Sphere", "Plane"]
