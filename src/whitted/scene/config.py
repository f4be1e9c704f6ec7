"""Scene serialization to and from JSON-friendly dictionaries.

Format:
    {
        "primitives": [
            {"type": "plane", "normal": [0, 1, 0], "offset": 0, "surface": "checkerboard"},
            {"type": "sphere", "center": [0, 1, -0.25], "radius": 1, "surface": "shiny"}
        ],
        "lights": [{"pos": [-2, 2.5, 0], "color": [0.49, 0.07, 0.07]}],
        "camera": {"pos": [3, 2, 4], "look_at": [-1, 0.5, 0]}
    }

A camera without "look_at" may instead give its basis explicitly with
"forward", "right" and "up". Surfaces are referenced by name, so only the
built-in surfaces can be serialized.

Example:
    >>> from whitted.scene.config import load_scene, save_scene
    >>> from whitted.scene.default import create_default_scene
    >>> save_scene(create_default_scene(), "default.json")
    >>> scene = load_scene("default.json")
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from whitted.camera.pinhole import PinholeCamera, make_camera
from whitted.core.color import Color
from whitted.core.vector import Vector
from whitted.geometry.plane import Plane
from whitted.geometry.primitive import Primitive
from whitted.geometry.sphere import Sphere
from whitted.materials.surfaces import SURFACES, get_surface
from whitted.scene.scene import Light, Scene


def _triple(value: Any, what: str) -> tuple[float, float, float]:
    """Validate and convert a 3-element numeric list."""
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"{what} must be a list of 3 numbers, got {value!r}")
    result = (float(value[0]), float(value[1]), float(value[2]))
    if not all(math.isfinite(component) for component in result):
        raise ValueError(f"{what} must be finite, got {value!r}")
    return result


def _vector(value: Any, what: str) -> Vector:
    return Vector(*_triple(value, what))


def _color(value: Any, what: str) -> Color:
    return Color(*_triple(value, what))


def _number(value: Any, what: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{what} must be finite, got {value!r}")
    return number


def _surface_name(primitive: Primitive) -> str:
    name = primitive.surface.name
    if SURFACES.get(name) is not primitive.surface:
        raise ValueError(f"Surface {name!r} is not a built-in surface and cannot be serialized")
    return name


def scene_to_dict(scene: Scene) -> dict[str, Any]:
    """Export a scene to a dictionary (for JSON serialization).

    Args:
        scene: The scene to export.

    Returns:
        A dictionary in the format described in the module docstring.

    Raises:
        ValueError: If a primitive uses a surface that is not built in.
    """
    primitives: list[dict[str, Any]] = []
    for primitive in scene.primitives:
        if isinstance(primitive, Sphere):
            primitives.append(
                {
                    "type": "sphere",
                    "center": [primitive.center.x, primitive.center.y, primitive.center.z],
                    "radius": primitive.radius,
                    "surface": _surface_name(primitive),
                }
            )
        else:
            n = primitive.normal_vector
            primitives.append(
                {
                    "type": "plane",
                    "normal": [n.x, n.y, n.z],
                    "offset": primitive.offset,
                    "surface": _surface_name(primitive),
                }
            )

    lights = [
        {
            "pos": [light.pos.x, light.pos.y, light.pos.z],
            "color": [light.color.r, light.color.g, light.color.b],
        }
        for light in scene.lights
    ]

    camera = scene.camera
    camera_config: dict[str, Any] = {"pos": [camera.pos.x, camera.pos.y, camera.pos.z]}
    if camera.look_at is not None:
        camera_config["look_at"] = [camera.look_at.x, camera.look_at.y, camera.look_at.z]
    else:
        for key in ("forward", "right", "up"):
            v = getattr(camera, key)
            camera_config[key] = [v.x, v.y, v.z]

    return {"primitives": primitives, "lights": lights, "camera": camera_config}


def _camera_from_dict(data: dict[str, Any]) -> PinholeCamera:
    pos = _vector(data.get("pos"), "camera.pos")
    if "look_at" in data:
        return make_camera(pos, _vector(data["look_at"], "camera.look_at"))
    if all(key in data for key in ("forward", "right", "up")):
        return PinholeCamera(
            pos=pos,
            forward=_vector(data["forward"], "camera.forward"),
            right=_vector(data["right"], "camera.right"),
            up=_vector(data["up"], "camera.up"),
        )
    raise ValueError("camera needs either 'look_at' or 'forward', 'right' and 'up'")


def scene_from_dict(data: dict[str, Any]) -> Scene:
    """Build a scene from a dictionary.

    Args:
        data: Dictionary with 'primitives', 'lights' and 'camera' keys.

    Returns:
        The constructed Scene.

    Raises:
        ValueError: If the data names an unknown primitive type or surface,
            contains non-finite numbers or a negative radius, or lacks a
            camera.
    """
    if "camera" not in data:
        raise ValueError("Scene is missing a camera")

    primitives: list[Primitive] = []
    for index, config in enumerate(data.get("primitives", [])):
        kind = str(config.get("type", "")).lower()
        surface = get_surface(config.get("surface", "shiny"))
        if kind == "sphere":
            radius = _number(config.get("radius", 1.0), f"primitives[{index}].radius")
            if radius < 0:
                raise ValueError(f"primitives[{index}].radius must be non-negative, got {radius}")
            center = _vector(config.get("center", [0.0, 0.0, 0.0]), f"primitives[{index}].center")
            primitives.append(Sphere(center, radius, surface))
        elif kind == "plane":
            normal = _vector(config.get("normal", [0.0, 1.0, 0.0]), f"primitives[{index}].normal")
            offset = _number(config.get("offset", 0.0), f"primitives[{index}].offset")
            primitives.append(Plane(normal, offset, surface))
        else:
            raise ValueError(f"Unknown primitive type: {kind}")

    lights = tuple(
        Light(
            pos=_vector(config.get("pos"), f"lights[{index}].pos"),
            color=_color(config.get("color"), f"lights[{index}].color"),
        )
        for index, config in enumerate(data.get("lights", []))
    )

    return Scene(
        primitives=tuple(primitives),
        lights=lights,
        camera=_camera_from_dict(data["camera"]),
    )


def save_scene(scene: Scene, filepath: str | Path) -> None:
    """Write a scene to a JSON file."""
    Path(filepath).write_text(json.dumps(scene_to_dict(scene), indent=2))


def load_scene(filepath: str | Path) -> Scene:
    """Read a scene from a JSON file.

    Raises:
        ValueError: If the file content is not a valid scene.
    """
    return scene_from_dict(json.loads(Path(filepath).read_text()))
