"""
Uniform buffer layout shared by the packer and the WGSL ``GradientUniforms`` struct.

The layout is a numpy structured dtype with explicit offsets, little-endian
fields and a fixed itemsize. The module refuses to import if the dtype ever
disagrees with the byte sizes the shader expects.

    offset  size  field
    ------  ----  -----------------------------------------
         0     4  angle_rad   f32
         4     4  num_stops   u32
         8     8  padding (aligns stops to 16 bytes)
        16   16N  stops[N]    { position f32, r f32, g f32, b f32 }

with N = MAX_STOPS. Unused trailing stop slots are zero-filled.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from gradlab.color.space import opponent_to_linear_rgb_array
from gradlab.constants import (
    MAX_STOPS,
    UNIFORM_BUFFER_SIZE,
    UNIFORM_HEADER_SIZE,
    UNIFORM_STOP_SIZE,
)
from gradlab.gradient.model import Gradient

logger = logging.getLogger(__name__)

STOP_DTYPE = np.dtype(
    {
        "names": ["position", "r", "g", "b"],
        "formats": ["<f4", "<f4", "<f4", "<f4"],
        "offsets": [0, 4, 8, 12],
        "itemsize": UNIFORM_STOP_SIZE,
    }
)

UNIFORM_DTYPE = np.dtype(
    {
        "names": ["angle_rad", "num_stops", "_pad", "stops"],
        "formats": ["<f4", "<u4", ("<u4", (2,)), (STOP_DTYPE, (MAX_STOPS,))],
        "offsets": [0, 4, 8, UNIFORM_HEADER_SIZE],
        "itemsize": UNIFORM_BUFFER_SIZE,
    }
)

if STOP_DTYPE.itemsize != UNIFORM_STOP_SIZE or UNIFORM_DTYPE.itemsize != UNIFORM_BUFFER_SIZE:
    raise ImportError(
        f"Uniform layout mismatch: stop={STOP_DTYPE.itemsize}B (want {UNIFORM_STOP_SIZE}), "
        f"buffer={UNIFORM_DTYPE.itemsize}B (want {UNIFORM_BUFFER_SIZE})"
    )


def build_uniforms(gradient: Gradient) -> np.ndarray:
    """
    Fill a zeroed uniform record from a gradient.

    Stops are sorted by position and truncated to the MAX_STOPS lowest
    positions. Positions are clamped to [0, 1]; colors are converted to
    clamped linear RGB (the shader interpolates in linear light).

    Args:
        gradient: Gradient to pack (any type; only the angle and stops are read)

    Returns:
        0-d structured array of dtype UNIFORM_DTYPE
    """
    stops = gradient.sorted_stops()
    if len(stops) > MAX_STOPS:
        logger.warning(
            "[build_uniforms] %s has %d stops; keeping the %d lowest positions",
            gradient.id,
            len(stops),
            MAX_STOPS,
        )
        stops = stops[:MAX_STOPS]

    record = np.zeros((), dtype=UNIFORM_DTYPE)
    record["angle_rad"] = math.radians(gradient.angle)
    record["num_stops"] = len(stops)

    if stops:
        rgb = opponent_to_linear_rgb_array([stop.color for stop in stops])
        n = len(stops)
        slots = record["stops"]
        slots["position"][:n] = np.clip([stop.position for stop in stops], 0.0, 1.0)
        slots["r"][:n] = rgb[:, 0]
        slots["g"][:n] = rgb[:, 1]
        slots["b"][:n] = rgb[:, 2]

    return record


def pack_uniforms(gradient: Gradient) -> bytes:
    """
    Serialize a gradient into the uniform buffer bytes consumed by the shader.

    Returns:
        Exactly UNIFORM_BUFFER_SIZE little-endian bytes
    """
    data = build_uniforms(gradient).tobytes()
    logger.debug("[pack_uniforms] %s -> %d bytes", gradient.id, len(data))
    return data


def unpack_uniforms(data: bytes | bytearray | memoryview) -> np.ndarray:
    """
    View uniform buffer bytes as a structured record.

    Raises:
        ValueError: If the byte length is not UNIFORM_BUFFER_SIZE
    """
    if len(data) != UNIFORM_BUFFER_SIZE:
        raise ValueError(
            f"Uniform buffer must be exactly {UNIFORM_BUFFER_SIZE} bytes, got {len(data)}"
        )
    return np.frombuffer(data, dtype=UNIFORM_DTYPE)[0]
