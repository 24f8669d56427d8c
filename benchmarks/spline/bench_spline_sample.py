"""Benchmarks for spline sampling.

Times scalar sampling against the number of keys (segment search is a
binary search, so the cost should grow logarithmically) and compares the
interpolation modes and batched tensor evaluation.
"""

from __future__ import annotations

import random
import time
from typing import Any, Callable

import numpy as np
import torch

from keyspline import (
    Bezier,
    CatmullRom,
    Cosine,
    Key,
    Linear,
    Spline,
    Step,
    StrokeBezier,
    spline_evaluate,
)


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
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, ts_time in times.items():
        slowdown = ts_time["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}{suffix}"
        )


def make_spline(num_keys: int, mode: Any, seed: int = 0) -> Spline:
    """Spline with unit-spaced keys and random values."""
    rng = random.Random(seed)

    return Spline(
        Key(float(i), rng.uniform(-1.0, 1.0), mode) for i in range(num_keys)
    )


def sample_all(spline: Spline, queries: list[float]) -> None:
    for x in queries:
        spline.sample(x)


class BenchSplineSample:
    """Benchmarks for scalar and batched spline sampling."""

    def __init__(
        self, warmup: int = 3, iterations: int = 10, num_queries: int = 10_000
    ):
        self.warmup = warmup
        self.iterations = iterations
        self.num_queries = num_queries

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def _queries(self, num_keys: int) -> list[float]:
        rng = random.Random(1)
        return [rng.uniform(0.0, num_keys - 1.0) for _ in range(self.num_queries)]

    def bench_key_count_scaling(self) -> None:
        times = {}
        for num_keys in [10, 100, 1_000, 10_000, 100_000]:
            s = make_spline(num_keys, Linear())
            times[f"{num_keys} keys"] = self._bench(
                sample_all, s, self._queries(num_keys)
            )
        print_comparison(
            f"Linear sampling, {self.num_queries} queries", times
        )

    def bench_modes(self, num_keys: int = 1_000) -> None:
        modes = {
            "step": Step(),
            "linear": Linear(),
            "cosine": Cosine(),
            "catmull_rom": CatmullRom(),
            "bezier": Bezier(0.5),
            "stroke_bezier": StrokeBezier(0.25, 0.75),
        }
        queries = self._queries(num_keys)
        times = {
            name: self._bench(sample_all, make_spline(num_keys, mode), queries)
            for name, mode in modes.items()
        }
        print_comparison(f"Interpolation modes, {num_keys} keys", times)

    def bench_batched(self, num_keys: int = 1_000) -> None:
        s = make_spline(num_keys, CatmullRom())
        queries = self._queries(num_keys)
        x = torch.tensor(queries, dtype=torch.float64)
        times = {
            "scalar sample": self._bench(sample_all, s, queries),
            "spline_evaluate": self._bench(spline_evaluate, s, x),
        }
        print_comparison("Scalar vs batched evaluation", times)

    def run_all(self) -> None:
        print("=" * 60)
        print("SPLINE SAMPLING BENCHMARKS")
        print("=" * 60)

        self.bench_key_count_scaling()
        self.bench_modes()
        self.bench_batched()


if __name__ == "__main__":
    bench = BenchSplineSample(warmup=3, iterations=10)
    bench.run_all()
