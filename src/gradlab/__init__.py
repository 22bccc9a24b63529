"""
gradlab - Perceptual Gradient Toolkit

Multi-stop color gradients in the OKLab color space, with accessibility checks
and GPU rendering.

Features:
- sRGB hex <-> OKLab <-> OKLCH conversions with two-stage gamut clamping
- Interpolation in OKLab and along the shorter hue arc in OKLCH
- CSS linear-gradient() and SVG <linearGradient> export
- WCAG contrast audit over adjacent stops
- WebGPU renderer with a fixed 144-byte uniform layout and WGSL shader
- Numba CPU reference rasterizer that mirrors the shader

Example - Serialization and audit:
    >>> from gradlab import Gradient, audit, to_css_linear
    >>>
    >>> g = Gradient.from_hex_stops(
    ...     "sunset",
    ...     [("a", 0.0, "#000000"), ("b", 1.0, "#ffffff")],
    ...     angle=90,
    ... )
    >>> to_css_linear(g)
    'linear-gradient(90deg, #000000 0.00%, #ffffff 100.00%)'
    >>> audit(g)
    []

Example - GPU rendering:
    >>> from gradlab import GradientRenderer
    >>>
    >>> renderer = GradientRenderer()
    >>> await renderer.render(canvas, g)   # canvas.get_context("wgpu")
"""

__version__ = "0.1.0"

# Contrast audit
from gradlab.audit import audit, contrast_ratio, relative_luminance

# Color space
from gradlab.color import (
    OpponentColor,
    PolarColor,
    color_to_hex,
    hex_to_color,
    lerp_opponent,
    lerp_polar,
    linear_to_srgb,
    opponent_to_linear_rgb,
    srgb_to_linear,
    to_opponent,
    to_polar,
)

# Configuration
from gradlab.config import RendererConfig
from gradlab.constants import MAX_STOPS

# Errors
from gradlab.errors import (
    ContextUnavailableError,
    GpuUnavailableError,
    GradlabError,
    InvalidFormatError,
)

# Gradient model and serializers
from gradlab.gradient import Gradient, Stop, to_css_linear, to_svg_definition, to_svg_file

# Protocols
from gradlab.protocols import RasterContext, RenderTarget

# Rendering
from gradlab.render import GradientRenderer, pack_uniforms, rasterize, unpack_uniforms

__all__ = [
    # Version
    "__version__",
    # Color values
    "OpponentColor",
    "PolarColor",
    # Color conversions
    "hex_to_color",
    "color_to_hex",
    "to_polar",
    "to_opponent",
    "lerp_opponent",
    "lerp_polar",
    "srgb_to_linear",
    "linear_to_srgb",
    "opponent_to_linear_rgb",
    # Gradient model
    "Gradient",
    "Stop",
    "to_css_linear",
    "to_svg_definition",
    "to_svg_file",
    # Contrast
    "audit",
    "contrast_ratio",
    "relative_luminance",
    # Rendering
    "GradientRenderer",
    "RendererConfig",
    "MAX_STOPS",
    "pack_uniforms",
    "unpack_uniforms",
    "rasterize",
    # Protocols
    "RenderTarget",
    "RasterContext",
    # Errors
    "GradlabError",
    "InvalidFormatError",
    "GpuUnavailableError",
    "ContextUnavailableError",
]
