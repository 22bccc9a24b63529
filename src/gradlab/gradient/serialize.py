"""
Text serializers: CSS linear-gradient() and SVG <linearGradient>.

Output formatting is byte-exact (decimal places, attribute order, spacing);
downstream snapshot tests compare these strings verbatim. Each serializer
sorts and clamps independently of the others.
"""

from __future__ import annotations

import logging
import math

from gradlab.color.space import color_to_hex
from gradlab.constants import (
    CSS_FALLBACK,
    DEFAULT_SVG_ELEMENT_ID,
    DEFAULT_SVG_HEIGHT,
    DEFAULT_SVG_WIDTH,
    SVG_EMPTY_DEFINITION,
    SVG_FILE_ELEMENT_ID,
    SVG_NAMESPACE,
)
from gradlab.gradient.model import Gradient
from gradlab.utils import clamp, format_number
from gradlab.validators import validate_positive, validate_type

logger = logging.getLogger(__name__)


def to_css_linear(gradient: Gradient) -> str:
    """
    Serialize to a CSS ``linear-gradient(...)`` value.

    Non-linear gradients return the fallback literal ``"background: gray;"``.
    The angle is emitted as given; stop positions are clamped to 0-100%.

    Args:
        gradient: Gradient to serialize

    Returns:
        CSS string, e.g. ``"linear-gradient(90deg, #000000 0.00%, #ffffff 100.00%)"``
    """
    if gradient.type != "linear":
        logger.warning(
            "[to_css_linear] CSS serialization for %r gradients is not supported, "
            "emitting fallback",
            gradient.type,
        )
        return CSS_FALLBACK

    stops = ", ".join(
        f"{color_to_hex(stop.color)} {clamp(stop.position * 100.0, 0.0, 100.0):.2f}%"
        for stop in gradient.sorted_stops()
    )
    return f"linear-gradient({format_number(gradient.angle)}deg, {stops})"


def gradient_vector(angle: float) -> tuple[float, float, float, float]:
    """
    Project the gradient direction onto the unit square.

    A unit vector at ``angle`` degrees is centered on (0.5, 0.5) and each
    endpoint coordinate is clamped into [0, 1].

    Returns:
        (x1, y1, x2, y2) in objectBoundingBox units
    """
    rad = math.radians(angle)
    dx = math.cos(rad) * 0.5
    dy = math.sin(rad) * 0.5
    return (
        clamp(0.5 - dx, 0.0, 1.0),
        clamp(0.5 - dy, 0.0, 1.0),
        clamp(0.5 + dx, 0.0, 1.0),
        clamp(0.5 + dy, 0.0, 1.0),
    )


@validate_type(str, "element_id")
def to_svg_definition(gradient: Gradient, element_id: str = DEFAULT_SVG_ELEMENT_ID) -> str:
    """
    Serialize to an SVG ``<defs>`` block holding one ``<linearGradient>``.

    Non-linear gradients return an empty ``<defs></defs>``.

    Args:
        gradient: Gradient to serialize
        element_id: id attribute of the <linearGradient> element

    Returns:
        SVG fragment string
    """
    if gradient.type != "linear":
        logger.warning(
            "[to_svg_definition] SVG serialization for %r gradients is not supported, "
            "emitting empty definition",
            gradient.type,
        )
        return SVG_EMPTY_DEFINITION

    x1, y1, x2, y2 = gradient_vector(gradient.angle)

    stop_lines = "\n".join(
        f'    <stop offset="{clamp(stop.position, 0.0, 1.0) * 100.0:.1f}%" '
        f'stop-color="{color_to_hex(stop.color)}" />'
        for stop in gradient.sorted_stops()
    )

    return (
        "<defs>\n"
        f'  <linearGradient id="{element_id}" x1="{x1:.2f}" y1="{y1:.2f}" '
        f'x2="{x2:.2f}" y2="{y2:.2f}" gradientUnits="objectBoundingBox">\n'
        f"{stop_lines}\n"
        "  </linearGradient>\n"
        "</defs>"
    )


@validate_positive("height", param_index=2)
@validate_positive("width", param_index=1)
def to_svg_file(
    gradient: Gradient,
    width: float = DEFAULT_SVG_WIDTH,
    height: float = DEFAULT_SVG_HEIGHT,
) -> str:
    """
    Wrap the gradient definition in a standalone SVG document.

    The document holds a single rectangle covering ``width`` x ``height``
    filled with the gradient.

    Args:
        gradient: Gradient to export
        width: Document width in user units
        height: Document height in user units

    Returns:
        Complete SVG document string

    Raises:
        ValueError: If width or height is not positive
    """
    definition = to_svg_definition(gradient, SVG_FILE_ELEMENT_ID)
    w = format_number(width)
    h = format_number(height)

    return (
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="{SVG_NAMESPACE}">\n'
        f"{definition}\n"
        f'  <rect x="0" y="0" width="{w}" height="{h}" fill="url(#{SVG_FILE_ELEMENT_ID})" />\n'
        "</svg>"
    )
