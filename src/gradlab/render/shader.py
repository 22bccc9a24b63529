"""
WGSL source for the gradient pipeline.

``GradientUniforms`` must stay byte-identical to ``UNIFORM_DTYPE`` in
gradlab.render.layout, and MAX_STOPS to gradlab.constants.MAX_STOPS.
``fs_main`` is mirrored by gradlab.render.kernels for CPU reference output.
"""

from gradlab.constants import MAX_STOPS, SEGMENT_EPSILON

GRADIENT_WGSL = f"""
const MAX_STOPS: u32 = {MAX_STOPS}u;
const SEGMENT_EPSILON: f32 = {SEGMENT_EPSILON!r};

struct Stop {{
    position: f32,
    r: f32,
    g: f32,
    b: f32,
}};

struct GradientUniforms {{
    angle_rad: f32,
    num_stops: u32,
    _pad0: u32,
    _pad1: u32,
    @align(16) stops: array<Stop, MAX_STOPS>,
}};

@group(0) @binding(0)
var<uniform> u: GradientUniforms;

struct VertexOutput {{
    @builtin(position) position: vec4<f32>,
    @location(0) uv: vec2<f32>,
}};

// Fullscreen triangle: vertices (0,0), (2,0), (0,2) in uv space, no vertex buffer.
@vertex
fn vs_main(@builtin(vertex_index) vertex_index: u32) -> VertexOutput {{
    let x = f32((vertex_index << 1u) & 2u);
    let y = f32(vertex_index & 2u);
    var out: VertexOutput;
    out.position = vec4<f32>(x * 2.0 - 1.0, 1.0 - y * 2.0, 0.0, 1.0);
    out.uv = vec2<f32>(x, y);
    return out;
}}

fn stop_color(i: u32) -> vec3<f32> {{
    let s = u.stops[i];
    return vec3<f32>(s.r, s.g, s.b);
}}

@fragment
fn fs_main(frag: VertexOutput) -> @location(0) vec4<f32> {{
    let n = min(u.num_stops, MAX_STOPS);
    if (n == 0u) {{
        return vec4<f32>(0.0, 0.0, 0.0, 1.0);
    }}
    if (n == 1u) {{
        return vec4<f32>(stop_color(0u), 1.0);
    }}

    let dir = vec2<f32>(cos(u.angle_rad), sin(u.angle_rad));
    let t = clamp(dot(frag.uv - vec2<f32>(0.5, 0.5), dir) + 0.5, 0.0, 1.0);

    var seg: u32 = n - 2u;
    for (var i: u32 = 0u; i < n - 1u; i = i + 1u) {{
        if (t < u.stops[i + 1u].position) {{
            seg = i;
            break;
        }}
    }}

    let p0 = u.stops[seg].position;
    let width = u.stops[seg + 1u].position - p0;
    var local_t: f32 = 0.0;
    if (width > SEGMENT_EPSILON) {{
        local_t = clamp((t - p0) / width, 0.0, 1.0);
    }}

    return vec4<f32>(mix(stop_color(seg), stop_color(seg + 1u), local_t), 1.0);
}}
"""
