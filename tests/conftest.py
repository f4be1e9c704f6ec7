"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Kernels run in float64 without fast math so their results can be
    compared with the pure-Python tracer.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64, fast_math=False)
    yield


@pytest.fixture(autouse=True)
def clear_all_scene_data():
    """Clear the kernel-side scene tables before and after each test."""
    # Import here so Taichi is initialized before fields are allocated
    from whitted.scene.intersection import clear_scene

    clear_scene()
    yield
    clear_scene()
