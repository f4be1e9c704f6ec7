"""Look-at pinhole camera and pixel-to-direction projection.

The camera stores a view basis built once from a position and a target:

    forward = normalize(look_at - pos)
    right   = 1.5 * normalize(cross(forward, (0, -1, 0)))
    up      = 1.5 * normalize(cross(forward, right))

The fixed world reference (0, -1, 0) and the 1.5 scale (which sets the field
of view) are constants of the renderer, not parameters.

Pixel (x, y) maps to screen offsets in roughly [-0.25, 0.25]:

    recenter_x(x) =  (x - width / 2) / 2 / width
    recenter_y(y) = -(y - height / 2) / 2 / height

Example:
    >>> from whitted.camera.pinhole import make_camera, get_point
    >>> from whitted.core.vector import Vector
    >>> camera = make_camera(Vector(3.0, 2.0, 4.0), Vector(-1.0, 0.5, 0.0))
    >>> direction = get_point(camera, 128, 128, 256, 256)  # center pixel
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.vector import Vector, add, cross, normalize, scale, subtract

# World reference used to derive the right vector
WORLD_DOWN = Vector(0.0, -1.0, 0.0)

# Scale applied to right/up; controls the field of view
BASIS_SCALE = 1.5


@dataclass(frozen=True)
class PinholeCamera:
    """A camera position with its view basis.

    Attributes:
        pos: Camera position in world space.
        forward: Unit view direction.
        right: Image-plane right vector, length 1.5.
        up: Image-plane up vector, length 1.5.
        look_at: Target the basis was built from, if known. Kept so scenes
            can be written back out in look-at form.
    """

    pos: Vector
    forward: Vector
    right: Vector
    up: Vector
    look_at: Vector | None = None


def make_camera(pos: Vector, look_at: Vector) -> PinholeCamera:
    """Build a camera at pos looking toward look_at.

    Args:
        pos: Camera position.
        look_at: Point the camera looks at.

    Returns:
        The camera with its derived forward/right/up basis.
    """
    forward = normalize(subtract(look_at, pos))
    right = scale(BASIS_SCALE, normalize(cross(forward, WORLD_DOWN)))
    up = scale(BASIS_SCALE, normalize(cross(forward, right)))
    return PinholeCamera(pos=pos, forward=forward, right=right, up=up, look_at=look_at)


def recenter_x(x: float, width: int) -> float:
    """Map a pixel column to a horizontal screen offset."""
    return (x - (width / 2.0)) / 2.0 / width


def recenter_y(y: float, height: int) -> float:
    """Map a pixel row to a vertical screen offset (rows grow downward)."""
    return -(y - (height / 2.0)) / 2.0 / height


def get_point(camera: PinholeCamera, x: int, y: int, width: int, height: int) -> Vector:
    """Unit view direction through pixel (x, y).

    Args:
        camera: The camera whose basis is used.
        x: Pixel column, 0 at the left.
        y: Pixel row, 0 at the top.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        normalize(forward + recenter_x(x) * right + recenter_y(y) * up)
    """
    return normalize(
        add(
            camera.forward,
            add(
                scale(recenter_x(x, width), camera.right),
                scale(recenter_y(y, height), camera.up),
            ),
        )
    )
