"""
Color space module.

Provides OKLab/OKLCH conversions, hex encoding with gamut clamping,
and interpolation in both forms.
"""

from gradlab.color.space import (
    OpponentColor,
    PolarColor,
    color_to_hex,
    hex_to_color,
    lerp_opponent,
    lerp_polar,
    linear_to_srgb,
    opponent_to_linear_rgb,
    opponent_to_linear_rgb_array,
    srgb_to_linear,
    to_opponent,
    to_polar,
)

__all__ = [
    "OpponentColor",
    "PolarColor",
    "hex_to_color",
    "color_to_hex",
    "to_polar",
    "to_opponent",
    "lerp_opponent",
    "lerp_polar",
    "srgb_to_linear",
    "linear_to_srgb",
    "opponent_to_linear_rgb",
    "opponent_to_linear_rgb_array",
]
