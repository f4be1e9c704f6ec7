"""Taichi runtime initialization.

Kernels must agree numerically with the reference tracer, so Taichi runs with
float64 as the default float type and fast-math disabled (no reassociation
or fused multiply-add).

Call init_taichi() before importing modules that allocate Taichi fields
(scene.intersection, core.integrator).
"""

import taichi as ti

# Supported backend names for init_taichi
ARCHES = {
    "cpu": ti.cpu,
    "gpu": ti.gpu,
}


def init_taichi(arch: str = "cpu") -> None:
    """Initialize Taichi for rendering.

    Args:
        arch: Backend name, "cpu" or "gpu".

    Raises:
        ValueError: If arch is not a supported backend name.
    """
    if arch not in ARCHES:
        raise ValueError(f"Unknown Taichi arch: {arch} (expected one of {sorted(ARCHES)})")
    ti.init(
        arch=ARCHES[arch],
        default_fp=ti.f64,
        fast_math=False,
    )
