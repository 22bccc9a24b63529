"""
Gradient module.

Provides the immutable Gradient/Stop value types and the CSS and SVG
serializers.
"""

from gradlab.gradient.model import Gradient, GradientType, Stop
from gradlab.gradient.serialize import (
    gradient_vector,
    to_css_linear,
    to_svg_definition,
    to_svg_file,
)

__all__ = [
    "Gradient",
    "GradientType",
    "Stop",
    "to_css_linear",
    "to_svg_definition",
    "to_svg_file",
    "gradient_vector",
]
