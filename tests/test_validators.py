"""Tests for validation decorators and renderer configuration."""

import pytest

from gradlab import RendererConfig
from gradlab.validators import validate_positive, validate_type


@validate_positive("threshold")
def _positive(value, threshold=1.0):
    return threshold


@validate_type(str, "name")
def _typed(value, name="x"):
    return name


class TestValidatePositive:
    """Test the positive-number decorator."""

    def test_passes_valid(self):
        assert _positive(None, 2.5) == 2.5
        assert _positive(None, threshold=3) == 3

    def test_default_not_checked(self):
        """Omitted parameters fall through to the default."""
        assert _positive(None) == 1.0

    def test_rejects_zero(self):
        with pytest.raises(ValueError, match="threshold=0 must be positive"):
            _positive(None, 0)

    def test_suggestion(self):
        """Threshold errors carry a WCAG hint."""
        with pytest.raises(ValueError, match="WCAG AA"):
            _positive(None, -1)

    @pytest.mark.parametrize("value", ["1", None, True])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(TypeError, match="must be a number"):
            _positive(None, value)


class TestValidateType:
    """Test the type decorator."""

    def test_passes_valid(self):
        assert _typed(None, "ok") == "ok"

    def test_rejects_wrong_type(self):
        with pytest.raises(TypeError, match="name must be str, got int"):
            _typed(None, name=5)

    def test_tuple_of_types(self):
        @validate_type((int, float), "size")
        def sized(value, size=1):
            return size

        assert sized(None, 2.0) == 2.0
        with pytest.raises(TypeError, match=r"one of \(int, float\)"):
            sized(None, "2")


class TestRendererConfig:
    """Test RendererConfig validation."""

    def test_defaults(self):
        config = RendererConfig()
        assert config.power_preference == "high-performance"
        assert config.alpha_mode == "premultiplied"
        assert config.texture_format is None
        assert config.fallback_label == "WebGPU Unavailable"

    def test_invalid_power_preference(self):
        with pytest.raises(ValueError, match="power_preference"):
            RendererConfig(power_preference="turbo")

    def test_invalid_alpha_mode(self):
        with pytest.raises(ValueError, match="alpha_mode"):
            RendererConfig(alpha_mode="straight")

    @pytest.mark.parametrize("clear", [(0, 0, 0), (0, 0, 0, 2.0), (-0.1, 0, 0, 1)])
    def test_invalid_clear_color(self, clear):
        with pytest.raises(ValueError, match="clear_color"):
            RendererConfig(clear_color=clear)
