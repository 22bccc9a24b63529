"""
Protocol definitions for the render target contract.

Targets are owned by the caller (a UI toolkit canvas, an offscreen wgpu
canvas, a test double). gradlab only asks them for contexts.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RenderTarget(Protocol):
    """
    Off-screen drawable surface.

    ``width`` and ``height`` are fixed for the surface's lifetime.
    """

    width: int
    height: int

    def get_context(self, kind: str) -> Any:
        """
        Return a drawing context of the requested kind, or None.

        Args:
            kind: "wgpu" for a WebGPU presentation context, "2d" for a
                raster context used by the CPU fallback

        Returns:
            The context, or None if the surface does not support ``kind``
        """
        ...


@runtime_checkable
class RasterContext(Protocol):
    """
    Minimal 2D raster context used by the CPU fallback.

    Contexts may additionally offer ``fill_text(text, x, y, color)``; the
    fallback label is drawn only when it exists.
    """

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        """Fill an axis-aligned rectangle with a CSS hex color."""
        ...
