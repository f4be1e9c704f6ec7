"""Scene model: primitives, point lights and a camera.

A Scene is built once and only read while rendering. Primitive order
matters: on an exact distance tie the earlier primitive wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.camera.pinhole import PinholeCamera
from whitted.core.color import Color
from whitted.core.vector import Vector
from whitted.geometry.primitive import Primitive


@dataclass(frozen=True)
class Light:
    """A point light without distance falloff.

    Attributes:
        pos: Light position.
        color: Emitted color, applied at full strength at any distance.
    """

    pos: Vector
    color: Color


@dataclass(frozen=True)
class Scene:
    """An immutable scene.

    Attributes:
        primitives: Primitives in scan order.
        lights: Point lights.
        camera: The viewing camera.
    """

    primitives: tuple[Primitive, ...]
    lights: tuple[Light, ...]
    camera: PinholeCamera
