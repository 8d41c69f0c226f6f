"""Benchmarks for pixel linearization.

Times the batch converters on image-sized inputs and compares the lookup
table path against evaluating the transfer function directly.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchlinearize.color import gamma_lookup_table, srgb_to_srgb_linear
from torchlinearize.pixel import linearize_pixel, to_glu, to_rgbaplu


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of untimed calls before measuring. Default is 3.
    iterations : int, optional
        Number of timed calls. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        ``mean``, ``std``, ``min`` and ``max`` wall time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(name: str, times: dict[str, dict[str, float]]) -> None:
    """Print timings for several methods, marking the fastest."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_time = min(t["mean"] for t in times.values())

    for method_name, t in times.items():
        slowdown = t["mean"] / fastest_time
        suffix = f" ({slowdown:.2f}x slower)" if slowdown > 1.01 else ""
        print(
            f"  {method_name}: {format_time(t['mean'])} "
            f"+/- {format_time(t['std'])}{suffix}"
        )


def _direct(pixels: torch.Tensor, max_value: int) -> torch.Tensor:
    unit = pixels.to(torch.float64) / max_value
    linear = srgb_to_srgb_linear(unit[..., :3])
    alpha = unit[..., 3:]
    return torch.cat([linear * alpha, alpha], dim=-1)


def run(height: int = 1024, width: int = 1024) -> None:
    torch.manual_seed(0)

    rgba8 = torch.randint(0, 256, (height, width, 4), dtype=torch.uint8)
    rgba16 = torch.randint(0, 65536, (height, width, 4), dtype=torch.int32)
    gray8 = rgba8[..., 0].contiguous()

    table8 = gamma_lookup_table(8)

    print_comparison(
        f"8-bit RGBA {height}x{width}",
        {
            "to_rgbaplu": benchmark(to_rgbaplu, rgba8),
            "linearize_pixel (prebuilt table)": benchmark(
                linearize_pixel, rgba8, table8
            ),
            "direct transfer function": benchmark(_direct, rgba8, 255),
        },
    )

    print_comparison(
        f"16-bit RGBA {height}x{width}",
        {
            "to_rgbaplu": benchmark(to_rgbaplu, rgba16, bit_depth=16),
            "direct transfer function": benchmark(_direct, rgba16, 65535),
        },
    )

    print_comparison(
        f"8-bit gray {height}x{width}",
        {"to_glu": benchmark(to_glu, gray8)},
    )

    print_comparison(
        "table construction",
        {
            "8-bit": benchmark(gamma_lookup_table, 8),
            "16-bit": benchmark(gamma_lookup_table, 16),
        },
    )


if __name__ == "__main__":
    run()
