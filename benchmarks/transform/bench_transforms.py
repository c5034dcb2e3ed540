"""Benchmarks for transform functions.

This module benchmarks the torchistft reconstruction and compares against
torch.istft and scipy.signal.istft baselines where available.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy import signal as scipy_signal

    SCIPY_SIGNAL_AVAILABLE = True
except ImportError:
    SCIPY_SIGNAL_AVAILABLE = False

# torchistft imports
import torchistft.transform as T


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
    # Warmup
    for _ in range(warmup):
        func(*args, **kwargs)

    # Timed runs
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
    ts_time: dict[str, float],
    baselines: dict[str, dict[str, float]] | None = None,
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchistft:   {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}"
    )
    for baseline_name, baseline_time in (baselines or {}).items():
        print(
            f"  {baseline_name:<13} {format_time(baseline_time['mean'])} +/- {format_time(baseline_time['std'])}"
        )
        speedup = baseline_time["mean"] / ts_time["mean"]
        if speedup >= 1:
            print(f"  Speedup:      {speedup:.2f}x faster")
        else:
            print(f"  Speedup:      {1 / speedup:.2f}x slower")


class BenchTransforms:
    """Benchmarks for transform functions."""

    def __init__(
        self, warmup: int = 3, iterations: int = 10, device: str = "cpu"
    ):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 3.
        iterations : int, optional
            Number of timed iterations. Default is 10.
        device : str, optional
            Device to run benchmarks on. Default is "cpu".
        """
        self.warmup = warmup
        self.iterations = iterations
        self.device = device

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        """Run benchmark with configured settings."""
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_inverse_short_time_fourier_transform(
        self,
        n: int = 16384,
        frame_size: int = 512,
        frame_step: int = 128,
        batch: int = 1,
    ) -> None:
        """Benchmark inverse_short_time_fourier_transform vs torch.istft.

        Parameters
        ----------
        n : int, optional
            Signal length. Default is 16384.
        frame_size : int, optional
            Frame size. Default is 512.
        frame_step : int, optional
            Frame step. Default is 128.
        batch : int, optional
            Number of signals reconstructed together. Default is 1.
        """
        x = torch.randn(batch, n, dtype=torch.float64, device=self.device)
        window = torch.hann_window(
            frame_size, dtype=torch.float64, device=self.device
        )
        S = torch.stft(
            x,
            n_fft=frame_size,
            hop_length=frame_step,
            window=window,
            return_complex=True,
        )

        ts_time = self._bench(
            T.inverse_short_time_fourier_transform,
            S,
            window=window,
            frame_size=frame_size,
            frame_step=frame_step,
            length=n,
        )

        baselines = {
            "torch.istft:": self._bench(
                torch.istft,
                S,
                n_fft=frame_size,
                hop_length=frame_step,
                window=window,
                length=n,
            )
        }

        if SCIPY_SIGNAL_AVAILABLE and self.device == "cpu":
            S_np = S.numpy()
            window_np = window.numpy()
            baselines["scipy:"] = self._bench(
                scipy_signal.istft,
                S_np,
                window=window_np,
                nperseg=frame_size,
                noverlap=frame_size - frame_step,
            )

        print_comparison(
            f"inverse_short_time_fourier_transform "
            f"(batch={batch}, n={n}, frame_size={frame_size}, "
            f"frame_step={frame_step})",
            ts_time,
            baselines,
        )

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("TRANSFORM BENCHMARKS")
        print("=" * 60)

        self.bench_inverse_short_time_fourier_transform()
        self.bench_inverse_short_time_fourier_transform(batch=16)

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        # ISTFT scaling with signal length (frame count)
        print("\n--- ISTFT Signal Length Scaling ---")
        for n in [4096, 16384, 65536, 262144]:
            self.bench_inverse_short_time_fourier_transform(n=n)

        # ISTFT scaling with overlap
        print("\n--- ISTFT Overlap Scaling ---")
        for frame_step in [256, 128, 64, 32]:
            self.bench_inverse_short_time_fourier_transform(
                frame_step=frame_step
            )


def run_cpu_benchmarks() -> None:
    """Run CPU benchmarks."""
    bench = BenchTransforms(warmup=5, iterations=20, device="cpu")
    bench.run_all()
    print("\n")
    bench.run_scaling()


def run_cuda_benchmarks() -> None:
    """Run CUDA benchmarks if available."""
    if not torch.cuda.is_available():
        print("CUDA not available, skipping GPU benchmarks")
        return

    bench = BenchTransforms(warmup=5, iterations=20, device="cuda")
    bench.run_all()
    print("\n")
    bench.run_scaling()


if __name__ == "__main__":
    print("Running CPU benchmarks...\n")
    run_cpu_benchmarks()

    if torch.cuda.is_available():
        print("\n" + "=" * 60)
        print("Running CUDA benchmarks...\n")
        run_cuda_benchmarks()
