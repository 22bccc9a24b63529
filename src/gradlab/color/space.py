"""
ColorSpace: sRGB hex <-> linear RGB <-> OKLab <-> OKLCH.

Pure, total functions over small immutable color values. The only failure
mode is a malformed hex string (InvalidFormatError).

Chain (forward):
    hex -> sRGB [0,1] -> linear RGB -> XYZ (D65) -> cone response
        -> per-channel cube root -> OKLab (l, a, b)

Chain (inverse):
    OKLab -> cone response -> per-channel cube -> XYZ -> linear RGB
        -> clamp [0,1] -> sRGB transfer -> clamp [0,1] -> round to 8 bit

Example:
    >>> from gradlab.color import hex_to_color, color_to_hex, to_polar
    >>> red = hex_to_color("#ff0000")
    >>> color_to_hex(red)
    '#ff0000'
    >>> round(to_polar(red).h)
    8
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from gradlab.color.kernels import (
    linear_rgb_to_opponent_scalar,
    opponent_to_linear_rgb_numba,
    opponent_to_linear_rgb_scalar,
)
from gradlab.constants import (
    SRGB_ALPHA,
    SRGB_GAMMA,
    SRGB_LINEAR_FACTOR,
    SRGB_LINEAR_THRESHOLD,
    SRGB_THRESHOLD,
)
from gradlab.errors import InvalidFormatError
from gradlab.utils import clamp, lerp

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


@dataclass(frozen=True, slots=True)
class OpponentColor:
    """
    Color in the opponent (OKLab) form.

    Attributes:
        l: Lightness, nominally 0-1 (may overshoot for out-of-gamut inputs)
        a: Green-red axis, unbounded
        b: Blue-yellow axis, unbounded
    """

    l: float
    a: float
    b: float


@dataclass(frozen=True, slots=True)
class PolarColor:
    """
    Color in the polar (OKLCH) form.

    Attributes:
        l: Lightness, same meaning as OpponentColor.l
        c: Chroma, >= 0
        h: Hue in degrees, [0, 360); pinned to 0 when c == 0
    """

    l: float
    c: float
    h: float


# =============================================================================
# Transfer Functions
# =============================================================================


def srgb_to_linear(value: float) -> float:
    """sRGB-encoded channel [0,1] -> linear light."""
    if value <= SRGB_THRESHOLD:
        return value / SRGB_LINEAR_FACTOR
    return ((value + SRGB_ALPHA) / (1.0 + SRGB_ALPHA)) ** SRGB_GAMMA


def linear_to_srgb(value: float) -> float:
    """Linear-light channel [0,1] -> sRGB-encoded."""
    if value <= SRGB_LINEAR_THRESHOLD:
        return SRGB_LINEAR_FACTOR * value
    return (1.0 + SRGB_ALPHA) * value ** (1.0 / SRGB_GAMMA) - SRGB_ALPHA


def _to_byte(value: float) -> int:
    # Half-up rounding; built-in round() would round half to even
    return int(math.floor(value * 255.0 + 0.5))


# =============================================================================
# Hex <-> Opponent
# =============================================================================


def hex_to_color(hex_string: str) -> OpponentColor:
    """
    Parse a 6-digit sRGB hex string into an opponent color.

    Args:
        hex_string: "#rrggbb" or "rrggbb", case-insensitive, no alpha

    Returns:
        OpponentColor for the given sRGB color

    Raises:
        InvalidFormatError: If the string is not exactly six hex digits
            (optionally preceded by '#')
    """
    if not isinstance(hex_string, str):
        raise InvalidFormatError(
            f"Hex color must be a string, got {type(hex_string).__name__}"
        )

    match = _HEX_PATTERN.fullmatch(hex_string)
    if match is None:
        raise InvalidFormatError(
            f"Invalid hex color {hex_string!r}: expected 6 hex digits like '#1a2b3c'"
        )

    value = int(match.group(1), 16)
    r = srgb_to_linear(((value >> 16) & 0xFF) / 255.0)
    g = srgb_to_linear(((value >> 8) & 0xFF) / 255.0)
    b = srgb_to_linear((value & 0xFF) / 255.0)

    l, a, b_axis = linear_rgb_to_opponent_scalar(r, g, b)
    return OpponentColor(float(l), float(a), float(b_axis))


def opponent_to_linear_rgb(
    color: OpponentColor, clamp_channels: bool = True
) -> tuple[float, float, float]:
    """
    Run the inverse chain down to linear RGB.

    This is the single shared primitive behind color_to_hex, the contrast
    audit and the GPU uniform packer.

    Args:
        color: Opponent color
        clamp_channels: Clamp each channel into [0, 1] (default True)

    Returns:
        (r, g, b) linear-light components
    """
    r, g, b = opponent_to_linear_rgb_scalar(color.l, color.a, color.b)
    if clamp_channels:
        return clamp(r, 0.0, 1.0), clamp(g, 0.0, 1.0), clamp(b, 0.0, 1.0)
    return float(r), float(g), float(b)


def opponent_to_linear_rgb_array(colors: Sequence[OpponentColor]) -> np.ndarray:
    """
    Batched, clamped form of opponent_to_linear_rgb.

    Args:
        colors: Opponent colors

    Returns:
        float64 array [N, 3] of linear RGB in [0, 1]
    """
    lab = np.array([(c.l, c.a, c.b) for c in colors], dtype=np.float64).reshape(-1, 3)
    out = np.empty_like(lab)
    if len(lab):
        opponent_to_linear_rgb_numba(lab, True, out)
    return out


def color_to_hex(color: OpponentColor) -> str:
    """
    Encode an opponent color as a lowercase "#rrggbb" string.

    Never fails. Out-of-gamut colors are clamped in two stages, and both
    are needed:

    1. Linear RGB is clamped to [0, 1] before the transfer function, since
       the power law is undefined for negative inputs and overshoots above 1.
    2. The encoded sRGB value is clamped to [0, 1] again before rounding,
       since the transfer function's offset can push values fractionally
       outside the range.

    Args:
        color: Opponent color

    Returns:
        Hex string like "#1a2b3c"
    """
    channels = opponent_to_linear_rgb(color, clamp_channels=True)
    encoded = (clamp(linear_to_srgb(c), 0.0, 1.0) for c in channels)
    return "#" + "".join(f"{min(max(_to_byte(c), 0), 255):02x}" for c in encoded)


# =============================================================================
# Opponent <-> Polar
# =============================================================================


def to_polar(color: OpponentColor) -> PolarColor:
    """
    Convert OKLab to OKLCH.

    Hue is undefined for achromatic colors; it is pinned to 0 when c == 0
    rather than taken from atan2(0, 0), which can be 0 or 180 depending on
    the signs of zero.
    """
    c = math.hypot(color.a, color.b)
    if c == 0.0:
        return PolarColor(color.l, 0.0, 0.0)

    h = math.degrees(math.atan2(color.b, color.a))
    if h < 0.0:
        h += 360.0
    if h >= 360.0:
        h -= 360.0
    return PolarColor(color.l, c, h)


def to_opponent(color: PolarColor) -> OpponentColor:
    """Convert OKLCH to OKLab."""
    rad = math.radians(color.h)
    return OpponentColor(color.l, color.c * math.cos(rad), color.c * math.sin(rad))


# =============================================================================
# Interpolation
# =============================================================================


def lerp_opponent(c1: OpponentColor, c2: OpponentColor, t: float) -> OpponentColor:
    """
    Componentwise interpolation in OKLab.

    ``t`` is clamped to [0, 1]; the endpoints are returned exactly at
    t=0 and t=1.
    """
    t = clamp(t, 0.0, 1.0)
    return OpponentColor(lerp(c1.l, c2.l, t), lerp(c1.a, c2.a, t), lerp(c1.b, c2.b, t))


def lerp_polar(c1: PolarColor, c2: PolarColor, t: float) -> PolarColor:
    """
    Interpolation in OKLCH along the shorter hue arc.

    Lightness and chroma interpolate linearly. The hue delta is wrapped into
    (-180, 180] so that e.g. 350 -> 10 passes through 0, not 180.

    Args:
        c1: Start color
        c2: End color
        t: Interpolation factor, clamped to [0, 1]

    Returns:
        Interpolated PolarColor with h in [0, 360)
    """
    t = clamp(t, 0.0, 1.0)

    delta = (c2.h - c1.h) % 360.0
    if delta > 180.0:
        delta -= 360.0

    h = (c1.h + delta * t) % 360.0
    if h >= 360.0:
        h -= 360.0

    return PolarColor(lerp(c1.l, c2.l, t), lerp(c1.c, c2.c, t), h)
