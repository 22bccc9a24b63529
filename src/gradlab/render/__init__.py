"""
Rendering module.

Provides the WebGPU gradient renderer, the uniform buffer layout shared with
the WGSL shader, and the CPU reference raster/fallback.
"""

from gradlab.render.layout import (
    STOP_DTYPE,
    UNIFORM_DTYPE,
    build_uniforms,
    pack_uniforms,
    unpack_uniforms,
)
from gradlab.render.raster import draw_fallback, encode_srgb8, rasterize, rasterize_uniforms
from gradlab.render.renderer import GradientRenderer
from gradlab.render.shader import GRADIENT_WGSL

__all__ = [
    "GradientRenderer",
    "GRADIENT_WGSL",
    "STOP_DTYPE",
    "UNIFORM_DTYPE",
    "build_uniforms",
    "pack_uniforms",
    "unpack_uniforms",
    "rasterize",
    "rasterize_uniforms",
    "encode_srgb8",
    "draw_fallback",
]
