"""
Gradient and Stop value types.

Both are frozen: the core never edits a gradient in place. Stop order inside
a Gradient carries no meaning, and positions may sit outside [0, 1] while a
gradient is being edited. Every consumer sorts (stably) and clamps on its own.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from gradlab.color.space import OpponentColor, hex_to_color

type GradientType = Literal["linear", "radial", "conic"]


@dataclass(frozen=True, slots=True)
class Stop:
    """
    One color anchor along the gradient axis.

    Attributes:
        id: Opaque identifier, unique within its Gradient
        position: Intended domain [0, 1]; out-of-range values are clamped at use
        color: Stop color in opponent form
    """

    id: str
    position: float
    color: OpponentColor


@dataclass(frozen=True, slots=True)
class Gradient:
    """
    A multi-stop gradient.

    Attributes:
        id: Gradient identifier
        type: "linear", "radial" or "conic"; only linear renders and serializes,
            the others produce defined fallbacks
        angle: Direction in degrees (linear only), never normalized
        stops: Stops in arbitrary order

    Example:
        >>> g = Gradient.from_hex_stops("g1", [("a", 1.0, "#ffffff"), ("b", 0.0, "#000000")])
        >>> [s.id for s in g.sorted_stops()]
        ['b', 'a']
    """

    id: str
    type: GradientType = "linear"
    angle: float = 0.0
    stops: tuple[Stop, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Freeze the stop sequence."""
        if not isinstance(self.stops, tuple):
            object.__setattr__(self, "stops", tuple(self.stops))

    @classmethod
    def from_hex_stops(
        cls,
        gradient_id: str,
        stops: Iterable[tuple[str, float, str]],
        *,
        type: GradientType = "linear",
        angle: float = 0.0,
    ) -> Gradient:
        """
        Build a gradient from (stop_id, position, "#rrggbb") triples.

        Raises:
            InvalidFormatError: If any hex color is malformed
        """
        return cls(
            id=gradient_id,
            type=type,
            angle=angle,
            stops=tuple(Stop(sid, pos, hex_to_color(hx)) for sid, pos, hx in stops),
        )

    def sorted_stops(self) -> list[Stop]:
        """Stops ascending by position; ties keep their original relative order."""
        return sorted(self.stops, key=lambda stop: stop.position)

    def stop_by_id(self, stop_id: str) -> Stop | None:
        """Look up a stop by id, or None if absent."""
        for stop in self.stops:
            if stop.id == stop_id:
                return stop
        return None

    def __len__(self) -> int:
        """Return number of stops."""
        return len(self.stops)
