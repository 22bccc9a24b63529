"""
Validation decorators for gradlab entry points.

Provides reusable parameter checks for the serializers and the contrast audit.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

type F = Callable[..., Any]


def _lookup(args: tuple, kwargs: dict, param_name: str, param_index: int) -> tuple[bool, Any]:
    """Fetch a parameter by position or keyword; report whether it was supplied."""
    if len(args) > param_index:
        return True, args[param_index]
    if param_name in kwargs:
        return True, kwargs[param_name]
    return False, None


def validate_positive(param_name: str = "value", param_index: int = 1) -> Callable[[F], F]:
    """
    Decorator for validating positive numeric parameters.

    Args:
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with positive validation

    Example:
        >>> @validate_positive("threshold")
        ... def audit(gradient, threshold=4.5):
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            supplied, value = _lookup(args, kwargs, param_name, param_index)
            if not supplied:
                return func(*args, **kwargs)

            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(
                    f"{param_name} must be a number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )

            if not value > 0:
                suggestion = ""
                if "threshold" in param_name:
                    suggestion = " Use 4.5 for WCAG AA body text or 3.0 for large text."
                elif param_name in ("width", "height"):
                    suggestion = " SVG dimensions are in user units and must be at least 1."

                raise ValueError(f"{param_name}={value} must be positive (> 0).{suggestion}")

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_type(
    expected_type: type | tuple[type, ...],
    param_name: str = "value",
    param_index: int = 1,
) -> Callable[[F], F]:
    """
    Decorator for validating parameter types.

    Args:
        expected_type: Expected type or tuple of types
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with type validation

    Example:
        >>> @validate_type(str, "element_id")
        ... def to_svg_definition(gradient, element_id="gradient-svg"):
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            supplied, value = _lookup(args, kwargs, param_name, param_index)
            if not supplied:
                return func(*args, **kwargs)

            if not isinstance(value, expected_type):
                if isinstance(expected_type, tuple):
                    type_names = ", ".join(t.__name__ for t in expected_type)
                    raise TypeError(
                        f"{param_name} must be one of ({type_names}), got {type(value).__name__}"
                    )
                raise TypeError(
                    f"{param_name} must be {expected_type.__name__}, got {type(value).__name__}"
                )

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
