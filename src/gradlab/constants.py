"""
Constants and default values for gradlab.

Centralizes matrices, transfer-function parameters and serializer literals.
All matrices are row-major 3x3 and are fixed constants, never derived at runtime.
"""

from __future__ import annotations

import numpy as np

# =============================================================================
# sRGB Transfer Function (IEC 61966-2-1)
# =============================================================================

SRGB_ALPHA = 0.055
SRGB_GAMMA = 2.4
SRGB_THRESHOLD = 0.04045  # Encoded-side breakpoint
SRGB_LINEAR_THRESHOLD = 0.0031308  # Linear-side breakpoint
SRGB_LINEAR_FACTOR = 12.92

# =============================================================================
# Forward Chain: linear RGB -> XYZ -> cone response -> opponent
# =============================================================================

# Linear RGB -> XYZ (D65)
M_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)

# XYZ -> cone response (Bradford)
M_XYZ_TO_LMS = np.array(
    [
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ],
    dtype=np.float64,
)

# Cube-rooted cone response -> opponent (OKLab M2)
M_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)

# =============================================================================
# Inverse Chain: opponent -> cone response -> XYZ -> linear RGB
# =============================================================================

M_OKLAB_TO_LMS = np.array(
    [
        [1.0000000, 0.3963377774, 0.2158037573],
        [1.0000000, -0.1055613458, -0.0638541728],
        [1.0000000, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)

M_LMS_TO_XYZ = np.array(
    [
        [0.9869929, -0.1470543, 0.1599627],
        [0.4323053, 0.5183603, 0.0492912],
        [-0.0085287, 0.0400428, 0.9684867],
    ],
    dtype=np.float64,
)

M_XYZ_TO_RGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ],
    dtype=np.float64,
)

# =============================================================================
# Contrast Audit
# =============================================================================

# ITU-R BT.709 luminance weights (linear light)
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)
CONTRAST_OFFSET = 0.05  # WCAG flare term
DEFAULT_CONTRAST_THRESHOLD = 4.5  # WCAG AA for normal text

# =============================================================================
# Serialization
# =============================================================================

CSS_FALLBACK = "background: gray;"
SVG_EMPTY_DEFINITION = "<defs></defs>"
DEFAULT_SVG_ELEMENT_ID = "gradient-svg"
SVG_FILE_ELEMENT_ID = "gradient-fill"
DEFAULT_SVG_WIDTH = 500
DEFAULT_SVG_HEIGHT = 500
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# =============================================================================
# GPU Rendering
# =============================================================================

MAX_STOPS = 8  # Must match MAX_STOPS in the WGSL source
UNIFORM_HEADER_SIZE = 16  # angle_rad, num_stops, 8 bytes padding
UNIFORM_STOP_SIZE = 16  # position, r, g, b
UNIFORM_BUFFER_SIZE = UNIFORM_HEADER_SIZE + MAX_STOPS * UNIFORM_STOP_SIZE
SEGMENT_EPSILON = 1e-6  # Segments narrower than this use local t = 0
FULLSCREEN_TRIANGLE_VERTICES = 3

DEFAULT_POWER_PREFERENCE = "high-performance"
DEFAULT_ALPHA_MODE = "premultiplied"
DEFAULT_CLEAR_COLOR = (0.0, 0.0, 0.0, 1.0)
DEFAULT_TEXTURE_FORMAT = "bgra8unorm"  # Used when a context reports no preferred format
DEVICE_LABEL = "gradlab.device"
PIPELINE_LABEL = "gradlab.gradient"

# CPU fallback placeholder
FALLBACK_FILL = "#cccccc"
FALLBACK_TEXT_COLOR = "#333333"
FALLBACK_LABEL = "WebGPU Unavailable"

# Valid choices
VALID_GRADIENT_TYPES = {"linear", "radial", "conic"}
VALID_POWER_PREFERENCES = {"high-performance", "low-power"}
VALID_ALPHA_MODES = {"premultiplied", "opaque"}
