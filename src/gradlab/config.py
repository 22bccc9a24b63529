"""
Renderer configuration.

Provides the configuration structure for GPU device selection, surface
setup and the CPU placeholder drawn when the GPU path is unavailable.
"""

from dataclasses import dataclass

from gradlab.constants import (
    DEFAULT_ALPHA_MODE,
    DEFAULT_CLEAR_COLOR,
    DEFAULT_POWER_PREFERENCE,
    FALLBACK_FILL,
    FALLBACK_LABEL,
    FALLBACK_TEXT_COLOR,
    VALID_ALPHA_MODES,
    VALID_POWER_PREFERENCES,
)


@dataclass(frozen=True)
class RendererConfig:
    """
    Configuration for GradientRenderer.

    Attributes:
        power_preference: Adapter hint ("high-performance" or "low-power")
        alpha_mode: Canvas alpha mode ("premultiplied" or "opaque")
        texture_format: Presentation format; None asks the first configured
            context for its preferred format
        clear_color: RGBA clear value for the render pass, each in [0, 1]
        fallback_fill: Placeholder fill color for the CPU fallback
        fallback_text_color: Label color for the CPU fallback
        fallback_label: Label text for the CPU fallback ("" to skip)
    """

    power_preference: str = DEFAULT_POWER_PREFERENCE
    alpha_mode: str = DEFAULT_ALPHA_MODE
    texture_format: str | None = None
    clear_color: tuple[float, float, float, float] = DEFAULT_CLEAR_COLOR
    fallback_fill: str = FALLBACK_FILL
    fallback_text_color: str = FALLBACK_TEXT_COLOR
    fallback_label: str = FALLBACK_LABEL

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.power_preference not in VALID_POWER_PREFERENCES:
            raise ValueError(
                f"Invalid power_preference: {self.power_preference}. "
                f"Must be one of {sorted(VALID_POWER_PREFERENCES)}"
            )

        if self.alpha_mode not in VALID_ALPHA_MODES:
            raise ValueError(
                f"Invalid alpha_mode: {self.alpha_mode}. "
                f"Must be one of {sorted(VALID_ALPHA_MODES)}"
            )

        if len(self.clear_color) != 4:
            raise ValueError("clear_color must have 4 components (r, g, b, a)")
        if not all(0.0 <= c <= 1.0 for c in self.clear_color):
            raise ValueError("clear_color components must be between 0.0 and 1.0")
