"""Whitted-style recursive ray tracer.

This package renders scenes of spheres, one-sided planes and point lights
with direct illumination, binary shadows and recursive mirror reflection.
Two engines share one scene model:
- A sequential reference tracer written with plain Python floats
- A Taichi kernel that traces every pixel in parallel

Subpackages:
    core: Vector/color algebra, rays, the reference tracer and the Taichi integrator
    geometry: Sphere and plane primitives with their intersection routines
    materials: Procedural surfaces (shiny, checkerboard)
    scene: Scene model, default scene, JSON configuration and kernel-side tables
    camera: Look-at camera basis and pixel-to-direction projection
    preview: Pixel sinks, PNG export and Matplotlib preview
"""

__version__ = "0.1.0"
