"""
Numba-optimized CPU reference rasterizer.

Mirrors ``fs_main`` in the WGSL source line for line so that CPU and GPU
output can be compared pixel by pixel.
"""

import numpy as np
from numba import njit, prange

from gradlab.constants import SEGMENT_EPSILON


@njit(cache=True, nogil=True)
def shade_linear_gradient(
    t: float,
    num_stops: int,
    positions: np.ndarray,
    colors: np.ndarray,
) -> tuple[float, float, float]:
    """
    Color at gradient coordinate ``t`` (already clamped to [0, 1]).

    Zero stops give black, one stop gives that stop's color. Otherwise a
    linear scan picks the first segment whose end lies beyond ``t``,
    falling back to the last segment.
    """
    if num_stops == 0:
        return 0.0, 0.0, 0.0
    if num_stops == 1:
        return colors[0, 0], colors[0, 1], colors[0, 2]

    seg = num_stops - 2
    for i in range(num_stops - 1):
        if t < positions[i + 1]:
            seg = i
            break

    p0 = positions[seg]
    width = positions[seg + 1] - p0
    local_t = 0.0
    if width > SEGMENT_EPSILON:
        local_t = min(max((t - p0) / width, 0.0), 1.0)

    r = colors[seg, 0] + (colors[seg + 1, 0] - colors[seg, 0]) * local_t
    g = colors[seg, 1] + (colors[seg + 1, 1] - colors[seg, 1]) * local_t
    b = colors[seg, 2] + (colors[seg + 1, 2] - colors[seg, 2]) * local_t
    return r, g, b


@njit(parallel=True, cache=True, nogil=True)
def rasterize_linear_numba(
    angle_rad: float,
    num_stops: int,
    positions: np.ndarray,
    colors: np.ndarray,
    out: np.ndarray,
) -> None:
    """
    Rasterize a linear gradient in linear RGB.

    Pixel centers map to uv = ((x + 0.5) / W, (y + 0.5) / H) with y down,
    which is what the fullscreen triangle interpolates to. ``t`` is the
    projection of uv - 0.5 onto (cos, sin) of the angle, re-centered at 0.5.

    Args:
        angle_rad: Gradient angle in radians
        num_stops: Number of valid entries in positions/colors
        positions: Stop positions [MAX_STOPS], ascending
        colors: Linear RGB stop colors [MAX_STOPS, 3]
        out: Output buffer [H, W, 3]
    """
    height = out.shape[0]
    width = out.shape[1]
    dx = np.cos(angle_rad)
    dy = np.sin(angle_rad)

    for y in prange(height):
        v = (y + 0.5) / height - 0.5
        for x in range(width):
            u = (x + 0.5) / width - 0.5
            t = min(max(u * dx + v * dy + 0.5, 0.0), 1.0)
            r, g, b = shade_linear_gradient(t, num_stops, positions, colors)
            out[y, x, 0] = r
            out[y, x, 1] = g
            out[y, x, 2] = b
