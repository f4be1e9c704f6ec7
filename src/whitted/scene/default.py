"""The default benchmark scene.

A checkerboard floor, two shiny spheres and four colored point lights,
viewed from above and to the side:

    Floor:   plane y = 0 (normal +y, offset 0), checkerboard
    Spheres: (0, 1, -0.25) r=1 and (-1, 0.5, 1.5) r=0.5, both shiny
    Lights:  red, blue and green lights at height 2.5, a pale blue-grey light
             at height 3.5
    Camera:  at (3, 2, 4) looking at (-1, 0.5, 0)
"""

from whitted.camera.pinhole import make_camera
from whitted.core.color import Color
from whitted.core.vector import Vector
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.materials.surfaces import CHECKERBOARD, SHINY
from whitted.scene.scene import Light, Scene

# Default output size used by the render driver
DEFAULT_SIZE = 256


def create_default_scene() -> Scene:
    """Create the default scene.

    Returns:
        A new Scene instance. Surfaces are the shared SHINY and
        CHECKERBOARD instances.
    """
    return Scene(
        primitives=(
            Plane(Vector(0.0, 1.0, 0.0), 0.0, CHECKERBOARD),
            Sphere(Vector(0.0, 1.0, -0.25), 1.0, SHINY),
            Sphere(Vector(-1.0, 0.5, 1.5), 0.5, SHINY),
        ),
        lights=(
            Light(Vector(-2.0, 2.5, 0.0), Color(0.49, 0.07, 0.07)),
            Light(Vector(1.5, 2.5, 1.5), Color(0.07, 0.07, 0.49)),
            Light(Vector(1.5, 2.5, -1.5), Color(0.07, 0.49, 0.071)),
            Light(Vector(0.0, 3.5, 0.0), Color(0.21, 0.21, 0.35)),
        ),
        camera=make_camera(Vector(3.0, 2.0, 4.0), Vector(-1.0, 0.5, 0.0)),
    )
