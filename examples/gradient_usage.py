"""
Example: gradient authoring usage.

Demonstrates how to use gradlab for:
- Parsing colors and interpolating in OKLab / OKLCH
- Exporting CSS and SVG
- Auditing adjacent stops for WCAG contrast
- CPU reference rendering (and GPU rendering when an adapter exists)
"""

import asyncio
import logging

import numpy as np

from gradlab import (
    ContextUnavailableError,
    Gradient,
    GpuUnavailableError,
    GradientRenderer,
    audit,
    color_to_hex,
    hex_to_color,
    lerp_opponent,
    lerp_polar,
    rasterize,
    to_css_linear,
    to_opponent,
    to_polar,
    to_svg_file,
)
from gradlab.render import encode_srgb8

# Configure logging to see renderer and audit messages
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def example_1_interpolation():
    """Example 1: Opponent vs polar interpolation."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Interpolation (OKLab vs OKLCH)")
    print("=" * 70)

    blue = hex_to_color("#0000ff")
    yellow = hex_to_color("#ffff00")

    print(" t   opponent   polar")
    for t in np.linspace(0.0, 1.0, 5):
        straight = color_to_hex(lerp_opponent(blue, yellow, t))
        around = color_to_hex(to_opponent(lerp_polar(to_polar(blue), to_polar(yellow), t)))
        print(f"{t:4.2f}  {straight}    {around}")


def example_2_export():
    """Example 2: CSS and SVG export."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: CSS / SVG Export")
    print("=" * 70)

    g = Gradient.from_hex_stops(
        "sunset",
        [("dusk", 1.0, "#1e3a8a"), ("sun", 0.0, "#f59e0b"), ("glow", 0.45, "#ef4444")],
        angle=135,
    )
    print(to_css_linear(g))
    print(to_svg_file(g, 320, 180))


def example_3_audit():
    """Example 3: Contrast audit."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: WCAG Contrast Audit")
    print("=" * 70)

    g = Gradient.from_hex_stops(
        "soft",
        [("a", 0.0, "#ffffff"), ("b", 0.5, "#d3d3d3"), ("c", 1.0, "#000000")],
    )
    for threshold in (3.0, 4.5, 7.0):
        print(f"  threshold {threshold}: {audit(g, threshold=threshold)}")


def example_4_cpu_raster():
    """Example 4: CPU reference raster."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: CPU Reference Raster")
    print("=" * 70)

    g = Gradient.from_hex_stops("bw", [("a", 0.0, "#000000"), ("b", 1.0, "#ffffff")])
    pixels = encode_srgb8(rasterize(g, 8, 1))
    print("  first row (sRGB8):", [int(p[0]) for p in pixels[0]])


async def example_5_gpu():
    """Example 5: GPU rendering, with the CPU placeholder when no GPU exists."""
    print("\n" + "=" * 70)
    print("EXAMPLE 5: GPU Rendering")
    print("=" * 70)

    class Sketch2D:
        def fill_rect(self, x, y, width, height, color):
            print(f"  fill_rect({x}, {y}, {width}, {height}, {color})")

        def fill_text(self, text, x, y, color):
            print(f"  fill_text({text!r}, {x}, {y}, {color})")

    class SketchCanvas:
        """A 2D-only target: renders fail over to the placeholder."""

        width = 256
        height = 128

        def get_context(self, kind):
            return Sketch2D() if kind == "2d" else None

    renderer = GradientRenderer()
    g = Gradient.from_hex_stops("bw", [("a", 0.0, "#000000"), ("b", 1.0, "#ffffff")])
    try:
        await renderer.render(SketchCanvas(), g)
    except GpuUnavailableError as exc:
        print(f"  GPU unavailable: {exc} {exc.details}")
    except ContextUnavailableError as exc:
        print(f"  GPU found, but the target has no WebGPU context: {exc}")
    finally:
        renderer.close()


if __name__ == "__main__":
    example_1_interpolation()
    example_2_export()
    example_3_audit()
    example_4_cpu_raster()
    asyncio.run(example_5_gpu())
