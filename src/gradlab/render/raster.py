"""
CPU reference raster and the no-GPU fallback.

``rasterize`` reproduces the shader from the packed uniform buffer, so it
sees exactly the float32 values the GPU sees. ``draw_fallback`` is the
placeholder painted when no GPU device can be acquired.
"""

from __future__ import annotations

import logging

import numpy as np

from gradlab.config import RendererConfig
from gradlab.constants import (
    SRGB_ALPHA,
    SRGB_GAMMA,
    SRGB_LINEAR_FACTOR,
    SRGB_LINEAR_THRESHOLD,
)
from gradlab.gradient.model import Gradient
from gradlab.protocols import RenderTarget
from gradlab.render.kernels import rasterize_linear_numba
from gradlab.render.layout import build_uniforms

logger = logging.getLogger(__name__)


def rasterize_uniforms(uniforms: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Rasterize a packed uniform record.

    Args:
        uniforms: Record of dtype UNIFORM_DTYPE (see build_uniforms/unpack_uniforms)
        width: Output width in pixels
        height: Output height in pixels

    Returns:
        float32 array [height, width, 3] in linear RGB
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Raster size must be positive, got {width}x{height}")

    stops = uniforms["stops"]
    positions = np.asarray(stops["position"], dtype=np.float64)
    colors = np.stack([stops["r"], stops["g"], stops["b"]], axis=1).astype(np.float64)

    out = np.empty((height, width, 3), dtype=np.float64)
    rasterize_linear_numba(
        float(uniforms["angle_rad"]),
        int(uniforms["num_stops"]),
        positions,
        colors,
        out,
    )
    return out.astype(np.float32)


def rasterize(gradient: Gradient, width: int, height: int) -> np.ndarray:
    """
    CPU reference rendering of a linear gradient.

    Uses the same stop selection, truncation and clamping as the GPU path.
    Zero stops give solid black, one stop a flat fill.

    Example:
        >>> g = Gradient.from_hex_stops("g", [("a", 0.0, "#000000"), ("b", 1.0, "#ffffff")])
        >>> rasterize(g, 4, 1)[0, :, 0].round(3)
        array([0.125, 0.375, 0.625, 0.875], dtype=float32)

    Returns:
        float32 array [height, width, 3] in linear RGB
    """
    return rasterize_uniforms(build_uniforms(gradient), width, height)


def encode_srgb8(linear: np.ndarray) -> np.ndarray:
    """
    Encode linear RGB to 8-bit sRGB with the same clamp/round policy as color_to_hex.

    Args:
        linear: Array [..., 3] of linear RGB

    Returns:
        uint8 array of the same shape
    """
    x = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    encoded = np.where(
        x <= SRGB_LINEAR_THRESHOLD,
        SRGB_LINEAR_FACTOR * x,
        (1.0 + SRGB_ALPHA) * np.power(x, 1.0 / SRGB_GAMMA) - SRGB_ALPHA,
    )
    encoded = np.clip(encoded, 0.0, 1.0)
    return np.clip(np.floor(encoded * 255.0 + 0.5), 0, 255).astype(np.uint8)


def draw_fallback(target: RenderTarget, config: RendererConfig | None = None) -> bool:
    """
    Paint the flat placeholder onto the target's 2D context.

    Best effort: a target without a usable 2D context is logged and left
    untouched.

    Args:
        target: Render target
        config: Fallback colors and label (defaults to RendererConfig())

    Returns:
        True if the placeholder was drawn
    """
    config = config or RendererConfig()

    get_context = getattr(target, "get_context", None)
    ctx = get_context("2d") if callable(get_context) else None
    fill_rect = getattr(ctx, "fill_rect", None)
    if not callable(fill_rect):
        logger.error("[draw_fallback] Target has no 2D context; placeholder not drawn")
        return False

    width = getattr(target, "width", 0)
    height = getattr(target, "height", 0)
    fill_rect(0, 0, width, height, config.fallback_fill)

    fill_text = getattr(ctx, "fill_text", None)
    if config.fallback_label and callable(fill_text):
        fill_text(config.fallback_label, width / 2, height / 2, config.fallback_text_color)

    logger.warning("[draw_fallback] GPU unavailable, drew %dx%d placeholder", width, height)
    return True
