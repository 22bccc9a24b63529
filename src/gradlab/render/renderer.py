"""
GradientRenderer: WebGPU rendering of linear gradients.

The renderer is an explicit handle that owns three lazily created resources:

- the GPU device (one adapter + device request per renderer)
- one configured presentation context per render target
- the compiled render pipeline (one per renderer, shared by all targets)

Each render packs the gradient into the fixed uniform layout, uploads it and
draws a single fullscreen triangle.

Example:
    >>> renderer = GradientRenderer()
    >>> await renderer.render(canvas, gradient)   # inside a coroutine
    >>> renderer.close()
"""

from __future__ import annotations

import asyncio
import logging
import weakref
from typing import Any

import wgpu

from gradlab.config import RendererConfig
from gradlab.constants import (
    DEFAULT_TEXTURE_FORMAT,
    DEVICE_LABEL,
    FULLSCREEN_TRIANGLE_VERTICES,
    PIPELINE_LABEL,
)
from gradlab.errors import ContextUnavailableError, GpuUnavailableError
from gradlab.gradient.model import Gradient
from gradlab.protocols import RenderTarget
from gradlab.render.layout import pack_uniforms
from gradlab.render.raster import draw_fallback
from gradlab.render.shader import GRADIENT_WGSL

logger = logging.getLogger(__name__)


class GradientRenderer:
    """
    Owner of the cached GPU device, per-target contexts and pipeline.

    Concurrency model: single-threaded asyncio. Renders pass through a FIFO
    lock from entry to submit, so they are submitted in call order even when
    a later call arrives just as the device becomes ready. The only
    suspension point inside the lock is device acquisition, which runs as one
    shared task: the adapter is requested once, and a caller that stops
    awaiting does not cancel it. close() during acquisition discards the
    device that acquisition eventually produces.

    Targets are held by weak reference; a context is dropped from the cache
    when its target is garbage collected.

    Failure policy:
    - No adapter/device: the CPU placeholder is drawn on the target, then
      GpuUnavailableError is raised. The failure is terminal for this handle
      (no second adapter request) until close() is called.
    - Target without a WebGPU context: ContextUnavailableError for that call
      only; the device and pipeline stay cached.
    - Submissions are never retried.

    Args:
        config: Renderer configuration (defaults to RendererConfig())
        gpu: Object exposing ``request_adapter_async``; defaults to ``wgpu.gpu``
    """

    __slots__ = (
        "config",
        "_gpu",
        "_adapter",
        "_device",
        "_init_task",
        "_init_error",
        "_contexts",  # id(target) -> (weakref to target, configured context)
        "_render_lock",
        "_generation",
        "_pipeline",
        "_texture_format",
    )

    def __init__(self, config: RendererConfig | None = None, gpu: Any = None):
        self.config = config or RendererConfig()
        self._gpu = gpu
        self._adapter: Any = None
        self._device: Any = None
        self._init_task: asyncio.Future | None = None
        self._init_error: GpuUnavailableError | None = None
        self._contexts: dict[int, tuple[weakref.ref, Any]] = {}
        self._render_lock = asyncio.Lock()
        self._generation = 0
        self._pipeline: Any = None
        self._texture_format: str | None = self.config.texture_format

        logger.info(
            "[GradientRenderer] Created (power_preference=%s, alpha_mode=%s)",
            self.config.power_preference,
            self.config.alpha_mode,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def device(self) -> Any:
        """The cached GPU device, or None before initialization."""
        return self._device

    @property
    def is_initialized(self) -> bool:
        """True once a device has been acquired."""
        return self._device is not None

    @property
    def context_count(self) -> int:
        """Number of live targets with a configured context."""
        return len(self._contexts)

    async def initialize(self) -> Any:
        """
        Acquire the GPU device, once.

        Safe to call repeatedly and concurrently; later callers await the
        first in-flight request.

        Returns:
            The GPU device

        Raises:
            GpuUnavailableError: If no adapter or device can be acquired, or
                the renderer was closed while acquisition was in flight
        """
        if self._device is not None:
            return self._device

        if self._init_error is not None:
            raise GpuUnavailableError(
                str(self._init_error), details=self._init_error.details
            ) from self._init_error

        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._acquire_device(self._generation))

        # shield: an abandoned caller must not cancel the shared acquisition
        return await asyncio.shield(self._init_task)

    async def _acquire_device(self, generation: int) -> Any:
        details: dict[str, object] = {"power_preference": self.config.power_preference}
        try:
            try:
                gpu = self._gpu if self._gpu is not None else wgpu.gpu
                adapter = await gpu.request_adapter_async(
                    power_preference=self.config.power_preference
                )
            except Exception as exc:
                raise self._fail("GPU adapter request failed", details, generation, exc) from exc
            if adapter is None:
                raise self._fail("No GPU adapter found", details, generation)

            try:
                device = await adapter.request_device_async(label=DEVICE_LABEL)
            except Exception as exc:
                raise self._fail("GPU device request failed", details, generation, exc) from exc
            if device is None:
                raise self._fail("GPU device acquisition returned None", details, generation)

            if generation != self._generation:
                _destroy(device)
                logger.info("[GradientRenderer] Closed during acquisition, discarded device")
                raise GpuUnavailableError(
                    "Renderer was closed during device acquisition",
                    details={**details, "closed": True},
                )

            self._adapter = adapter
            self._device = device
            logger.info("[GradientRenderer] Acquired GPU device")
            return device
        finally:
            # a task orphaned by close() must not clear its successor
            if generation == self._generation:
                self._init_task = None

    def _fail(
        self,
        message: str,
        details: dict[str, object],
        generation: int,
        exc: BaseException | None = None,
    ) -> GpuUnavailableError:
        if exc is not None:
            details = {
                **details,
                "exception_type": exc.__class__.__name__,
                "exception_message": str(exc),
            }
        error = GpuUnavailableError(message, details=details)
        if generation == self._generation:
            self._init_error = error
        logger.error("[GradientRenderer] %s (%s)", message, details)
        return error

    def release(self, target: RenderTarget) -> None:
        """Drop the cached context for one target."""
        if self._contexts.pop(id(target), None) is not None:
            logger.debug("[GradientRenderer] Released context for target %#x", id(target))

    def close(self) -> None:
        """
        Release every cached resource.

        The device is destroyed when it supports it. An acquisition still in
        flight is orphaned: its device is destroyed on arrival instead of
        cached. The next render starts from scratch, including a fresh
        adapter request after a failure.
        """
        _destroy(self._device)

        self._generation += 1
        self._adapter = None
        self._device = None
        self._init_task = None
        self._init_error = None
        self._contexts.clear()
        self._pipeline = None
        self._texture_format = self.config.texture_format
        logger.info("[GradientRenderer] Closed")

    # =========================================================================
    # Cached Resources
    # =========================================================================

    def _context_for(self, target: RenderTarget) -> Any:
        key = id(target)
        cached = self._contexts.get(key)
        if cached is not None and cached[0]() is target:
            return cached[1]

        get_context = getattr(target, "get_context", None)
        if not callable(get_context):
            raise ContextUnavailableError(
                f"Render target {type(target).__name__} cannot provide a WebGPU context"
            )
        try:
            context = get_context("wgpu")
        except Exception as exc:
            raise ContextUnavailableError(
                f"Failed to get WebGPU context from {type(target).__name__}: {exc}"
            ) from exc
        if context is None:
            raise ContextUnavailableError(
                f"Render target {type(target).__name__} does not support WebGPU"
            )

        if self._texture_format is None:
            get_preferred_format = getattr(context, "get_preferred_format", None)
            preferred = get_preferred_format(self._adapter) if callable(get_preferred_format) else None
            self._texture_format = preferred or DEFAULT_TEXTURE_FORMAT

        context.configure(
            device=self._device,
            format=self._texture_format,
            alpha_mode=self.config.alpha_mode,
        )
        ref = weakref.ref(target, lambda dead, key=key: self._forget_context(key, dead))
        self._contexts[key] = (ref, context)
        logger.info(
            "[GradientRenderer] Configured context for %s (format=%s)",
            type(target).__name__,
            self._texture_format,
        )
        return context

    def _forget_context(self, key: int, ref: weakref.ref) -> None:
        # the id may already belong to a newer target
        cached = self._contexts.get(key)
        if cached is not None and cached[0] is ref:
            del self._contexts[key]
            logger.debug("[GradientRenderer] Dropped context for collected target %#x", key)

    def _ensure_pipeline(self) -> Any:
        if self._pipeline is not None:
            return self._pipeline

        module = self._device.create_shader_module(label=PIPELINE_LABEL, code=GRADIENT_WGSL)
        self._pipeline = self._device.create_render_pipeline(
            label=PIPELINE_LABEL,
            layout="auto",
            vertex={"module": module, "entry_point": "vs_main", "buffers": []},
            fragment={
                "module": module,
                "entry_point": "fs_main",
                "targets": [{"format": self._texture_format}],
            },
            primitive={"topology": "triangle-list"},
        )
        logger.info("[GradientRenderer] Compiled gradient pipeline")
        return self._pipeline

    # =========================================================================
    # Rendering
    # =========================================================================

    async def render(self, target: RenderTarget, gradient: Gradient) -> None:
        """
        Draw a gradient onto a render target.

        Calls are submitted in the order they were made.

        Args:
            target: Surface providing a "wgpu" context (and "2d" for the fallback);
                must support weak references
            gradient: Gradient to draw; stops beyond MAX_STOPS are dropped

        Raises:
            GpuUnavailableError: No GPU; the placeholder has been drawn
            ContextUnavailableError: The target has no WebGPU context
        """
        async with self._render_lock:
            try:
                device = await self.initialize()
            except GpuUnavailableError:
                draw_fallback(target, self.config)
                raise

            self._submit(device, target, gradient)

    def _submit(self, device: Any, target: RenderTarget, gradient: Gradient) -> None:
        context = self._context_for(target)
        pipeline = self._ensure_pipeline()

        if gradient.type != "linear":
            logger.warning(
                "[GradientRenderer] %r gradients are not supported on the GPU, drawing as linear",
                gradient.type,
            )

        data = pack_uniforms(gradient)
        uniform_buffer = device.create_buffer(
            label=PIPELINE_LABEL,
            size=len(data),
            usage=wgpu.BufferUsage.UNIFORM | wgpu.BufferUsage.COPY_DST,
        )
        device.queue.write_buffer(uniform_buffer, 0, data)

        bind_group = device.create_bind_group(
            layout=pipeline.get_bind_group_layout(0),
            entries=[
                {
                    "binding": 0,
                    "resource": {"buffer": uniform_buffer, "offset": 0, "size": len(data)},
                }
            ],
        )

        encoder = device.create_command_encoder(label=PIPELINE_LABEL)
        view = context.get_current_texture().create_view()
        render_pass = encoder.begin_render_pass(
            color_attachments=[
                {
                    "view": view,
                    "resolve_target": None,
                    "clear_value": self.config.clear_color,
                    "load_op": "clear",
                    "store_op": "store",
                }
            ]
        )
        render_pass.set_pipeline(pipeline)
        render_pass.set_bind_group(0, bind_group)
        render_pass.draw(FULLSCREEN_TRIANGLE_VERTICES, 1, 0, 0)
        render_pass.end()
        device.queue.submit([encoder.finish()])

        logger.debug(
            "[GradientRenderer] Submitted %s (%d stops) to %s",
            gradient.id,
            len(gradient.stops),
            type(target).__name__,
        )


def _destroy(device: Any) -> None:
    destroy = getattr(device, "destroy", None)
    if callable(destroy):
        destroy()
