"""Shared fixtures: in-process stand-ins for a WebGPU adapter/device and render targets."""

import asyncio

import pytest

from gradlab import Gradient


class FakeBuffer:
    def __init__(self, size, usage, label=""):
        self.size = size
        self.usage = usage
        self.label = label


class FakeRenderPass:
    def __init__(self, log):
        self.log = log

    def set_pipeline(self, pipeline):
        self.log.append(("set_pipeline", pipeline))

    def set_bind_group(self, index, bind_group):
        self.log.append(("set_bind_group", index))

    def draw(self, vertex_count, instance_count, first_vertex, first_instance):
        self.log.append(("draw", (vertex_count, instance_count, first_vertex, first_instance)))

    def end(self):
        self.log.append(("end", None))


class FakeEncoder:
    def __init__(self, log):
        self.log = log

    def begin_render_pass(self, color_attachments):
        self.log.append(("begin_render_pass", color_attachments))
        return FakeRenderPass(self.log)

    def finish(self):
        return "command-buffer"


class FakeQueue:
    def __init__(self):
        self.writes = []
        self.submits = 0

    def write_buffer(self, buffer, offset, data):
        self.writes.append(bytes(data))

    def submit(self, command_buffers):
        self.submits += 1


class FakePipeline:
    def get_bind_group_layout(self, index):
        return ("layout", index)


class FakeDevice:
    def __init__(self):
        self.queue = FakeQueue()
        self.log = []
        self.shader_modules = []
        self.pipelines = []
        self.destroyed = False

    def create_shader_module(self, label="", code=""):
        self.shader_modules.append(code)
        return ("module", len(self.shader_modules))

    def create_render_pipeline(self, **descriptor):
        self.pipelines.append(descriptor)
        return FakePipeline()

    def create_buffer(self, label="", size=0, usage=0):
        return FakeBuffer(size, usage, label)

    def create_bind_group(self, layout, entries):
        return ("bind_group", layout, entries)

    def create_command_encoder(self, label=""):
        return FakeEncoder(self.log)

    def destroy(self):
        self.destroyed = True


class FakeAdapter:
    def __init__(self, device=None, fail=False):
        self.device = device if device is not None else FakeDevice()
        self.fail = fail

    async def request_device_async(self, label=""):
        await asyncio.sleep(0)
        if self.fail:
            raise RuntimeError("device lost")
        return self.device


class FakeGPU:
    """Counts adapter requests; ``adapter=None`` simulates a machine without a GPU."""

    def __init__(self, adapter="default", error=None):
        self.adapter = FakeAdapter() if adapter == "default" else adapter
        self.error = error
        self.requests = 0
        self.power_preferences = []

    async def request_adapter_async(self, power_preference=None):
        self.requests += 1
        self.power_preferences.append(power_preference)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.adapter


class FakeTexture:
    def create_view(self):
        return "texture-view"


class FakeGpuContext:
    def __init__(self, preferred_format="rgba8unorm-srgb"):
        self.preferred_format = preferred_format
        self.configured = []

    def get_preferred_format(self, adapter):
        return self.preferred_format

    def configure(self, **kwargs):
        self.configured.append(kwargs)

    def get_current_texture(self):
        return FakeTexture()


class Fake2DContext:
    def __init__(self):
        self.calls = []

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height, color))

    def fill_text(self, text, x, y, color):
        self.calls.append(("fill_text", text, x, y, color))


class FakeCanvas:
    """Render target; set ``gpu_context``/``raster_context`` to None to drop support."""

    def __init__(self, width=64, height=32, gpu_context="default", raster_context="default"):
        self.width = width
        self.height = height
        self.gpu_context = FakeGpuContext() if gpu_context == "default" else gpu_context
        self.raster_context = Fake2DContext() if raster_context == "default" else raster_context
        self.requests = []

    def get_context(self, kind):
        self.requests.append(kind)
        if kind == "wgpu":
            return self.gpu_context
        if kind == "2d":
            return self.raster_context
        return None


@pytest.fixture
def fake_gpu():
    """A working fake GPU."""
    return FakeGPU()


@pytest.fixture
def canvas():
    """A render target supporting both WebGPU and 2D contexts."""
    return FakeCanvas()


@pytest.fixture
def black_white():
    """Two-stop black-to-white linear gradient at 90 degrees."""
    return Gradient.from_hex_stops(
        "bw", [("black", 0.0, "#000000"), ("white", 1.0, "#ffffff")], angle=90
    )
