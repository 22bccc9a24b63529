"""
Exception taxonomy for gradlab.

Numeric edge cases (zero chroma, zero-width segments, empty gradients) are
never errors; only malformed input and GPU availability are.
"""

from __future__ import annotations


class GradlabError(Exception):
    """Base class for all gradlab errors."""


class InvalidFormatError(GradlabError, ValueError):
    """A color string is not a 6-digit hex triplet."""


class GpuUnavailableError(GradlabError, RuntimeError):
    """No GPU adapter or device could be acquired.

    Raised after the CPU fallback has been attempted, so the caller still
    learns that the GPU path failed.
    """

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.details = dict(details or {})


class ContextUnavailableError(GradlabError, RuntimeError):
    """A render target does not provide a WebGPU presentation context.

    Fatal for the current render call only; the cached device and pipeline
    stay valid for other targets.
    """
