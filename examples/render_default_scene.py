#!/usr/bin/env python3
"""Render the default scene, timing repeated passes.

This script renders the checkerboard-and-spheres benchmark scene (or a scene
loaded from JSON) several times in a row and reports the time of each pass,
then saves the final image.

Usage:
    python examples/render_default_scene.py [options]

Options:
    --width WIDTH         Image width in pixels (default: 256)
    --height HEIGHT       Image height in pixels (default: 256)
    --passes PASSES       Number of timed render passes (default: 6)
    --backend BACKEND     "python" (reference tracer) or "taichi" (default: taichi)
    --arch ARCH           Taichi backend, "cpu" or "gpu" (default: cpu)
    --max-depth DEPTH     Reflection bounces (default: 5)
    --scene SCENE         JSON scene file (default: built-in scene)
    --output OUTPUT       Output file path (default: default_scene.png)
    --show                Show the result in a Matplotlib window
    --quiet               Suppress progress output

Example:
    python examples/render_default_scene.py --width 128 --height 128 --passes 3
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the default ray tracing scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=256,
        help="Image width in pixels (default: 256)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=256,
        help="Image height in pixels (default: 256)",
    )
    parser.add_argument(
        "--passes",
        type=int,
        default=6,
        help="Number of timed render passes (default: 6)",
    )
    parser.add_argument(
        "--backend",
        choices=("python", "taichi"),
        default="taichi",
        help="Render engine (default: taichi)",
    )
    parser.add_argument(
        "--arch",
        choices=("cpu", "gpu"),
        default="cpu",
        help="Taichi backend (default: cpu)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=5,
        help="Reflection bounces (default: 5)",
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file (default: built-in scene)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="default_scene.png",
        help="Output file path (default: default_scene.png)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_scene(
    width: int = 256,
    height: int = 256,
    passes: int = 6,
    backend: str = "taichi",
    max_depth: int = 5,
    scene_path: str | None = None,
    output_path: str = "default_scene.png",
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Render a scene for several passes and save the last image.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        passes: Number of timed render passes.
        backend: "python" or "taichi". Taichi must already be initialized
            for the taichi backend.
        max_depth: Reflection bounces.
        scene_path: JSON scene file, or None for the default scene.
        output_path: Output file path (PNG).
        show: If True, display the image after rendering.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so Taichi is initialized before fields are allocated
    from whitted.preview.export import save_png
    from whitted.preview.sink import ImageBuffer
    from whitted.scene.config import load_scene
    from whitted.scene.default import create_default_scene

    if passes <= 0:
        raise ValueError(f"passes must be positive, got {passes}")

    if backend == "taichi":
        from whitted.core.integrator import render_parallel as render_fn
    else:
        from whitted.core.tracer import render as render_fn

    scene = create_default_scene() if scene_path is None else load_scene(scene_path)

    if not quiet:
        source = "default scene" if scene_path is None else scene_path
        print(f"Rendering {source} ({width}x{height}, {backend} backend)...")

    buffer = ImageBuffer(width, height)
    start_time = time.time()
    for index in range(passes):
        pass_start = time.time()
        render_fn(scene, buffer, width, height, max_depth=max_depth)
        if not quiet:
            print(f"  Pass {index + 1}/{passes}: {time.time() - pass_start:.3f}s")

    output_file = Path(output_path)
    save_png(buffer, str(output_file))

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    if show:
        from whitted.preview.display import show_preview

        show_preview(buffer)

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        if args.backend == "taichi":
            from whitted.core.runtime import init_taichi

            init_taichi(args.arch)
            if not args.quiet:
                print(f"Using Taichi {args.arch} backend")

        render_scene(
            width=args.width,
            height=args.height,
            passes=args.passes,
            backend=args.backend,
            max_depth=args.max_depth,
            scene_path=args.scene,
            output_path=args.output,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
