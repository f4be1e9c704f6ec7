"""Scene module for scene description and kernel-side scene tables.

Components:
    scene: Immutable Scene and Light
    default: The default benchmark scene
    config: Dictionary/JSON serialization with input validation
    intersection: Taichi primitive and light tables with nearest-hit search
"""

from .config import load_scene, save_scene, scene_from_dict, scene_to_dict
from .default import DEFAULT_SIZE, create_default_scene
from .scene import Light, Scene

# Note: intersection is NOT imported here because it allocates Taichi fields
# at import time. Import it directly after core.runtime.init_taichi().

__all__ = [
    "Scene",
    "Light",
    "create_default_scene",
    "DEFAULT_SIZE",
    "scene_to_dict",
    "scene_from_dict",
    "load_scene",
    "save_scene",
]
