"""Tests for the Gradient and Stop value types."""

import dataclasses

import pytest

from gradlab import Gradient, InvalidFormatError, OpponentColor, Stop


@pytest.fixture
def gray():
    """A neutral mid-gray opponent color."""
    return OpponentColor(0.5, 0.0, 0.0)


class TestGradient:
    """Test Gradient construction and helpers."""

    def test_defaults(self):
        """A bare gradient is linear, 0 degrees, no stops."""
        g = Gradient("g")
        assert g.type == "linear"
        assert g.angle == 0.0
        assert g.stops == ()
        assert len(g) == 0

    def test_stops_frozen_to_tuple(self, gray):
        """A list of stops is stored as a tuple."""
        stops = [Stop("a", 0.0, gray), Stop("b", 1.0, gray)]
        g = Gradient("g", stops=stops)
        assert isinstance(g.stops, tuple)
        stops.append(Stop("c", 0.5, gray))
        assert len(g) == 2

    def test_immutable(self, gray):
        """Gradients and stops reject attribute assignment."""
        g = Gradient("g", stops=[Stop("a", 0.0, gray)])
        with pytest.raises(dataclasses.FrozenInstanceError):
            g.angle = 45.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            g.stops[0].position = 0.5

    def test_sorted_stops_ascending(self, gray):
        """Stops come back ascending by position."""
        g = Gradient(
            "g",
            stops=[Stop("c", 0.9, gray), Stop("a", -0.2, gray), Stop("b", 0.4, gray)],
        )
        assert [s.id for s in g.sorted_stops()] == ["a", "b", "c"]

    def test_sorted_stops_stable_on_ties(self, gray):
        """Equal positions keep insertion order."""
        g = Gradient(
            "g",
            stops=[
                Stop("x", 0.5, gray),
                Stop("first", 0.0, gray),
                Stop("y", 0.5, gray),
                Stop("z", 0.5, gray),
            ],
        )
        assert [s.id for s in g.sorted_stops()] == ["first", "x", "y", "z"]

    def test_sorted_stops_does_not_mutate(self, gray):
        """Sorting returns a new list; the gradient keeps its order."""
        g = Gradient("g", stops=[Stop("b", 1.0, gray), Stop("a", 0.0, gray)])
        g.sorted_stops()
        assert [s.id for s in g.stops] == ["b", "a"]

    def test_out_of_range_positions_are_valid(self, gray):
        """Positions outside [0, 1] are held as-is."""
        g = Gradient("g", stops=[Stop("a", -0.5, gray), Stop("b", 1.5, gray)])
        assert [s.position for s in g.stops] == [-0.5, 1.5]

    def test_stop_by_id(self, gray):
        """Lookup by id returns the stop, or None."""
        stop = Stop("b", 0.3, gray)
        g = Gradient("g", stops=[Stop("a", 0.0, gray), stop])
        assert g.stop_by_id("b") is stop
        assert g.stop_by_id("missing") is None

    def test_non_linear_types_are_structurally_valid(self, gray):
        """Radial and conic gradients construct without error."""
        for kind in ("radial", "conic"):
            g = Gradient("g", type=kind, stops=[Stop("a", 0.0, gray)])
            assert g.type == kind


class TestFromHexStops:
    """Test the hex convenience constructor."""

    def test_builds_stops(self):
        """Each triple becomes a Stop with a converted color."""
        g = Gradient.from_hex_stops(
            "g", [("a", 0.0, "#000000"), ("b", 1.0, "#ffffff")], angle=45, type="linear"
        )
        assert g.angle == 45
        assert [s.id for s in g.stops] == ["a", "b"]
        assert g.stops[0].color == OpponentColor(0.0, 0.0, 0.0)

    def test_bad_hex_raises(self):
        """A malformed color surfaces InvalidFormatError."""
        with pytest.raises(InvalidFormatError):
            Gradient.from_hex_stops("g", [("a", 0.0, "#12")])
