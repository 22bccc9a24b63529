"""
WCAG contrast audit over adjacent gradient stops.

Luminance is derived from linear RGB obtained through the shared inverse
color chain, clamped per channel BEFORE the BT.709 weighting.

Example:
    >>> from gradlab import Gradient, audit
    >>> g = Gradient.from_hex_stops("g", [("s1", 0.0, "#d3d3d3"), ("s2", 1.0, "#ffffff")])
    >>> audit(g)
    [('s1', 's2')]
"""

from __future__ import annotations

import logging

import numpy as np

from gradlab.color.space import OpponentColor, opponent_to_linear_rgb, opponent_to_linear_rgb_array
from gradlab.constants import CONTRAST_OFFSET, DEFAULT_CONTRAST_THRESHOLD, LUMINANCE_WEIGHTS
from gradlab.gradient.model import Gradient
from gradlab.validators import validate_positive

logger = logging.getLogger(__name__)

_WEIGHTS = np.array(LUMINANCE_WEIGHTS, dtype=np.float64)


def relative_luminance(color: OpponentColor) -> float:
    """Linear-light relative luminance of an opponent color, in [0, 1]."""
    r, g, b = opponent_to_linear_rgb(color, clamp_channels=True)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def luminance_ratio(lum1: float, lum2: float) -> float:
    """WCAG ratio (L_lighter + 0.05) / (L_darker + 0.05); always >= 1."""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + CONTRAST_OFFSET) / (darker + CONTRAST_OFFSET)


def contrast_ratio(color1: OpponentColor, color2: OpponentColor) -> float:
    """WCAG contrast ratio between two opponent colors (1.0 to 21.0)."""
    return luminance_ratio(relative_luminance(color1), relative_luminance(color2))


@validate_positive("threshold")
def audit(
    gradient: Gradient, threshold: float = DEFAULT_CONTRAST_THRESHOLD
) -> list[tuple[str, str]]:
    """
    Find adjacent stop pairs whose contrast falls below ``threshold``.

    Stops are sorted by position (stable) and each neighbouring pair is
    checked independently, so three low-contrast stops in a row yield two
    entries, not one.

    Args:
        gradient: Gradient to audit
        threshold: Minimum acceptable contrast ratio (default 4.5, WCAG AA)

    Returns:
        Failing (earlier_id, later_id) pairs in left-to-right order;
        an empty list when every pair passes or there are fewer than 2 stops

    Raises:
        ValueError: If threshold is not positive
    """
    if len(gradient.stops) < 2:
        return []

    stops = gradient.sorted_stops()
    luminance = opponent_to_linear_rgb_array([stop.color for stop in stops]) @ _WEIGHTS

    failing: list[tuple[str, str]] = []
    for i in range(len(stops) - 1):
        ratio = luminance_ratio(float(luminance[i]), float(luminance[i + 1]))
        if ratio < threshold:
            failing.append((stops[i].id, stops[i + 1].id))

    logger.debug(
        "[audit] %s: %d/%d adjacent pairs below %.2f",
        gradient.id,
        len(failing),
        len(stops) - 1,
        threshold,
    )
    return failing
