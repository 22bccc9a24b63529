"""
Scalar helpers shared by the color, gradient and render modules.
"""

from __future__ import annotations


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into ``[lo, hi]``."""
    return min(max(value, lo), hi)


def lerp(a: float, b: float, t: float) -> float:
    """
    Linear interpolation written as ``a*(1-t) + b*t``.

    This form returns ``a`` exactly at ``t=0`` and ``b`` exactly at ``t=1``;
    ``a + (b - a) * t`` can drift by one ulp at ``t=1``.
    """
    return a * (1.0 - t) + b * t


def format_number(value: float) -> str:
    """
    Render a number the way it was supplied: integral values without a
    trailing ``.0``, everything else with its shortest round-trip repr.

    Example:
        >>> format_number(90.0), format_number(-45), format_number(12.5)
        ('90', '-45', '12.5')
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)
