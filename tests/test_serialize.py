"""Tests for CSS and SVG serialization (byte-exact output)."""

import pytest

from gradlab import (
    Gradient,
    OpponentColor,
    Stop,
    hex_to_color,
    to_css_linear,
    to_svg_definition,
    to_svg_file,
)
from gradlab.gradient import gradient_vector


@pytest.fixture
def black():
    return hex_to_color("#000000")


@pytest.fixture
def white():
    return hex_to_color("#ffffff")


class TestCssLinear:
    """Test linear-gradient() output."""

    def test_sorts_reverse_insertion_order(self, black, white):
        """Stops inserted high-to-low come out low-to-high."""
        g = Gradient("g", angle=0, stops=[Stop("w", 1, white), Stop("b", 0, black)])
        assert to_css_linear(g) == "linear-gradient(0deg, #000000 0.00%, #ffffff 100.00%)"

    def test_clamps_positions(self, black, white):
        """-0.5 clamps to 0.00%, 1.5 to 100.00%."""
        g = Gradient("g", angle=180, stops=[Stop("a", -0.5, black), Stop("b", 1.5, white)])
        assert to_css_linear(g) == "linear-gradient(180deg, #000000 0.00%, #ffffff 100.00%)"

    def test_three_stops(self):
        """Percentages use exactly two decimals."""
        g = Gradient.from_hex_stops(
            "g",
            [("a", 0.1, "#333333"), ("b", 0.5, "#808080"), ("c", 0.9, "#cccccc")],
            angle=45,
        )
        assert to_css_linear(g) == (
            "linear-gradient(45deg, #333333 10.00%, #808080 50.00%, #cccccc 90.00%)"
        )

    def test_fractional_percent(self, black):
        """Positions round to two decimals."""
        g = Gradient("g", stops=[Stop("a", 1 / 3, black)])
        assert to_css_linear(g) == "linear-gradient(0deg, #000000 33.33%)"

    @pytest.mark.parametrize(
        "angle, text",
        [(90, "90"), (90.0, "90"), (12.5, "12.5"), (-45, "-45"), (400, "400")],
    )
    def test_angle_verbatim(self, black, angle, text):
        """The angle is emitted as given, never normalized."""
        g = Gradient("g", angle=angle, stops=[Stop("a", 0.0, black)])
        assert to_css_linear(g).startswith(f"linear-gradient({text}deg, ")

    def test_empty_stops(self):
        """No stops gives a stop-less string, not an error."""
        assert to_css_linear(Gradient("g", angle=90)) == "linear-gradient(90deg, )"

    @pytest.mark.parametrize("kind", ["radial", "conic"])
    def test_non_linear_fallback(self, black, kind):
        """Non-linear gradients get the fallback literal."""
        g = Gradient("g", type=kind, stops=[Stop("a", 0.0, black)])
        assert to_css_linear(g) == "background: gray;"

    def test_out_of_gamut_color(self):
        """Out-of-gamut colors are clamped, not rejected."""
        g = Gradient("g", stops=[Stop("a", 0.0, OpponentColor(2.0, 0.0, 0.0))])
        assert to_css_linear(g) == "linear-gradient(0deg, #ffffff 0.00%)"


class TestSvgDefinition:
    """Test the <linearGradient> definition."""

    def test_horizontal(self, black, white):
        """0 degrees runs left to right across the middle."""
        g = Gradient("g", angle=0, stops=[Stop("w", 1.0, white), Stop("b", 0.0, black)])
        assert to_svg_definition(g) == (
            "<defs>\n"
            '  <linearGradient id="gradient-svg" x1="0.00" y1="0.50" x2="1.00" y2="0.50" '
            'gradientUnits="objectBoundingBox">\n'
            '    <stop offset="0.0%" stop-color="#000000" />\n'
            '    <stop offset="100.0%" stop-color="#ffffff" />\n'
            "  </linearGradient>\n"
            "</defs>"
        )

    def test_custom_element_id(self, black):
        """The element id is used verbatim."""
        g = Gradient("g", stops=[Stop("a", 0.0, black)])
        assert 'id="hero-bg"' in to_svg_definition(g, "hero-bg")
        assert 'id="hero-bg"' in to_svg_definition(g, element_id="hero-bg")

    def test_vertical(self, black):
        """90 degrees runs top to bottom."""
        g = Gradient("g", angle=90, stops=[Stop("a", 0.0, black)])
        assert 'x1="0.50" y1="0.00" x2="0.50" y2="1.00"' in to_svg_definition(g)

    def test_diagonal(self):
        """45 degrees projects onto the unit square."""
        x1, y1, x2, y2 = gradient_vector(45)
        assert x1 == pytest.approx(0.14645, abs=1e-5)
        assert y1 == pytest.approx(0.14645, abs=1e-5)
        assert x2 == pytest.approx(0.85355, abs=1e-5)
        assert y2 == pytest.approx(0.85355, abs=1e-5)

    def test_vector_clamped_to_unit_square(self):
        """Every endpoint coordinate stays within [0, 1]."""
        for angle in range(-720, 721, 15):
            assert all(0.0 <= v <= 1.0 for v in gradient_vector(angle))

    def test_offsets_clamped_and_one_decimal(self, black, white):
        """Offsets clamp to [0, 100] and use one decimal place."""
        g = Gradient(
            "g",
            stops=[Stop("a", -1.0, black), Stop("b", 1 / 3, white), Stop("c", 7.0, black)],
        )
        svg = to_svg_definition(g)
        assert '<stop offset="0.0%" stop-color="#000000" />' in svg
        assert '<stop offset="33.3%" stop-color="#ffffff" />' in svg
        assert '<stop offset="100.0%" stop-color="#000000" />' in svg

    def test_sorting_independent_of_input_order(self, black, white):
        """Reversed input yields identical output."""
        stops = [Stop("a", 0.0, black), Stop("b", 0.5, white), Stop("c", 1.0, black)]
        forward = Gradient("g", angle=30, stops=stops)
        backward = Gradient("g", angle=30, stops=list(reversed(stops)))
        assert to_svg_definition(forward) == to_svg_definition(backward)
        assert to_css_linear(forward) == to_css_linear(backward)

    @pytest.mark.parametrize("kind", ["radial", "conic"])
    def test_non_linear_empty(self, black, kind):
        """Non-linear gradients emit an empty <defs>."""
        g = Gradient("g", type=kind, stops=[Stop("a", 0.0, black)])
        assert to_svg_definition(g) == "<defs></defs>"

    def test_element_id_must_be_string(self, black):
        """A non-string id is rejected."""
        g = Gradient("g", stops=[Stop("a", 0.0, black)])
        with pytest.raises(TypeError, match="element_id"):
            to_svg_definition(g, 42)


class TestSvgFile:
    """Test the standalone SVG document."""

    def test_default_document(self, black, white):
        """The document references the definition from a full-size rect."""
        g = Gradient("g", stops=[Stop("b", 0.0, black), Stop("w", 1.0, white)])
        svg = to_svg_file(g)
        lines = svg.split("\n")

        assert lines[0] == (
            '<svg width="500" height="500" viewBox="0 0 500 500" '
            'xmlns="http://www.w3.org/2000/svg">'
        )
        assert lines[1] == "<defs>"
        assert 'id="gradient-fill"' in lines[2]
        assert lines[-2] == (
            '  <rect x="0" y="0" width="500" height="500" fill="url(#gradient-fill)" />'
        )
        assert lines[-1] == "</svg>"

    def test_custom_size(self, black):
        """Width and height flow into the root and the rect."""
        g = Gradient("g", stops=[Stop("b", 0.0, black)])
        svg = to_svg_file(g, 800, 200)
        assert '<svg width="800" height="200" viewBox="0 0 800 200"' in svg
        assert '<rect x="0" y="0" width="800" height="200"' in svg

    def test_non_linear_still_a_document(self, black):
        """Non-linear gradients produce a document with an empty definition."""
        g = Gradient("g", type="radial", stops=[Stop("b", 0.0, black)])
        svg = to_svg_file(g, 10, 10)
        assert "<defs></defs>" in svg
        assert svg.endswith("</svg>")

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 10)])
    def test_non_positive_size_rejected(self, black, width, height):
        """Zero or negative dimensions raise ValueError."""
        g = Gradient("g", stops=[Stop("b", 0.0, black)])
        with pytest.raises(ValueError, match="must be positive"):
            to_svg_file(g, width, height)

    def test_size_keyword_validated(self, black):
        """Keyword dimensions are validated too."""
        g = Gradient("g", stops=[Stop("b", 0.0, black)])
        with pytest.raises(ValueError, match="height"):
            to_svg_file(g, height=-1)
