"""
Numba-compiled kernels for the OKLab conversion chain.

Both directions of the chain live here once. The scalar kernels back the
public ColorSpace functions; the batched kernel converts whole stop lists for
the contrast audit and the uniform packer.

fastmath stays off: the hex round trip must hold to one 8-bit step.
"""

import numpy as np
from numba import njit, prange

from gradlab.constants import (
    M_LMS_TO_OKLAB,
    M_LMS_TO_XYZ,
    M_OKLAB_TO_LMS,
    M_RGB_TO_XYZ,
    M_XYZ_TO_LMS,
    M_XYZ_TO_RGB,
)

# ============================================================================
# Scalar Kernels
# ============================================================================


@njit(cache=True, nogil=True)
def mat3_mul(m: np.ndarray, x: float, y: float, z: float) -> tuple[float, float, float]:
    """Multiply a row-major 3x3 matrix by the column vector (x, y, z)."""
    return (
        m[0, 0] * x + m[0, 1] * y + m[0, 2] * z,
        m[1, 0] * x + m[1, 1] * y + m[1, 2] * z,
        m[2, 0] * x + m[2, 1] * y + m[2, 2] * z,
    )


@njit(cache=True, nogil=True)
def linear_rgb_to_opponent_scalar(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Forward chain: linear RGB -> XYZ -> cone response -> cube root -> OKLab.

    Args:
        r, g, b: Linear-light RGB components

    Returns:
        (l, a, b) opponent coordinates
    """
    x, y, z = mat3_mul(M_RGB_TO_XYZ, r, g, b)
    lc, mc, sc = mat3_mul(M_XYZ_TO_LMS, x, y, z)
    # cbrt keeps the sign of slightly negative cone responses
    return mat3_mul(M_LMS_TO_OKLAB, np.cbrt(lc), np.cbrt(mc), np.cbrt(sc))


@njit(cache=True, nogil=True)
def opponent_to_linear_rgb_scalar(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Inverse chain: OKLab -> cone response -> cube -> XYZ -> linear RGB.

    The result is NOT clamped; out-of-gamut inputs yield components outside
    [0, 1]. Callers pick their own clamp policy.

    Args:
        l, a, b: Opponent coordinates

    Returns:
        (r, g, b) linear-light RGB
    """
    lm, mm, sm = mat3_mul(M_OKLAB_TO_LMS, l, a, b)
    x, y, z = mat3_mul(M_LMS_TO_XYZ, lm * lm * lm, mm * mm * mm, sm * sm * sm)
    return mat3_mul(M_XYZ_TO_RGB, x, y, z)


# ============================================================================
# Batched Kernels
# ============================================================================


@njit(parallel=True, cache=True, nogil=True)
def opponent_to_linear_rgb_numba(colors: np.ndarray, clamp: bool, out: np.ndarray) -> None:
    """
    Convert N opponent colors to linear RGB.

    Args:
        colors: Opponent colors [N, 3] as (l, a, b)
        clamp: Clamp each linear channel into [0, 1]
        out: Output buffer [N, 3]
    """
    n = colors.shape[0]

    for i in prange(n):
        r, g, b = opponent_to_linear_rgb_scalar(colors[i, 0], colors[i, 1], colors[i, 2])

        if clamp:
            r = min(max(r, 0.0), 1.0)
            g = min(max(g, 0.0), 1.0)
            b = min(max(b, 0.0), 1.0)

        out[i, 0] = r
        out[i, 1] = g
        out[i, 2] = b
