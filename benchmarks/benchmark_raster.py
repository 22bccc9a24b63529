"""
Benchmark the CPU reference raster and batched color conversion.
"""

import time
from typing import Callable

import numpy as np

from gradlab import Gradient, OpponentColor, Stop, rasterize
from gradlab.color import opponent_to_linear_rgb_array


def benchmark_function(func: Callable, warmup: int = 3, iterations: int = 20) -> tuple[float, float]:
    """Benchmark a function and return average time in milliseconds."""
    # Warmup (includes numba compilation)
    for _ in range(warmup):
        func()

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        end = time.perf_counter()
        times.append((end - start) * 1000)  # Convert to ms

    return np.mean(times), np.std(times)


def benchmark_raster():
    """Benchmark rasterize() at common canvas sizes."""
    print("=" * 80)
    print("CPU Raster Benchmark")
    print("=" * 80)

    rng = np.random.default_rng(42)
    stops = [
        Stop(f"s{i}", float(p), OpponentColor(float(rng.uniform(0.2, 0.9)), 0.05, -0.05))
        for i, p in enumerate(np.linspace(0.0, 1.0, 8))
    ]
    gradient = Gradient("bench", angle=37.0, stops=stops)

    for width, height in [(256, 256), (1024, 1024), (3840, 2160)]:
        mean_time, std_time = benchmark_function(lambda: rasterize(gradient, width, height))
        throughput = (width * height / mean_time) * 1000
        print(f"  {width:5d}x{height:<5d} {mean_time:8.3f} ± {std_time:6.3f} ms")
        print(f"                  {throughput:12,.0f} pixels/sec")


def benchmark_conversion():
    """Benchmark batched opponent -> linear RGB conversion."""
    print("\n" + "=" * 80)
    print("Opponent -> Linear RGB Benchmark")
    print("=" * 80)

    for n in [1_000, 10_000, 100_000]:
        colors = [OpponentColor(0.5, 0.1, -0.1)] * n
        mean_time, std_time = benchmark_function(lambda: opponent_to_linear_rgb_array(colors))
        print(f"  {n:>8,} colors  {mean_time:8.3f} ± {std_time:6.3f} ms")


if __name__ == "__main__":
    benchmark_raster()
    benchmark_conversion()
