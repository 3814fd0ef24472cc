"""Benchmark color matrix throughput.

Compares:
- Single 3×3 filter matrix vs. a chain of four filters
- colorfx kernel vs. a plain NumPy matmul for the same 3×3 product
"""

import time

import numpy as np

from colorfx import (
    apply_matrices_to_color_components,
    grayscale_color_matrix,
    hue_rotate_color_matrix,
    saturation_color_matrix,
    sepia_color_matrix,
)


def create_test_pixels(n: int) -> np.ndarray:
    """Create synthetic RGBA pixels for benchmarking."""
    rng = np.random.default_rng(42)
    return rng.random((n, 4), dtype=np.float32)


def _time(fn, n_iterations: int) -> float:
    for _ in range(3):
        fn()
    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()
    return (time.perf_counter() - start) / n_iterations


def benchmark_color_matrix(n_pixels: int, n_iterations: int = 50):
    """Benchmark single and chained matrices."""
    print(f"\n{'='*60}")
    print(f"Color Matrix Benchmark ({n_pixels:,} pixels)")
    print(f"{'='*60}")

    pixels = create_test_pixels(n_pixels)
    sepia = sepia_color_matrix(0.8)
    chain = (
        grayscale_color_matrix(0.2),
        sepia,
        saturation_color_matrix(1.3),
        hue_rotate_color_matrix(45.0),
    )

    elapsed = _time(lambda: sepia.transformed_color_components(pixels), n_iterations)
    print("\nSingle 3×3 matrix:")
    print(f"  Time: {elapsed * 1000:.3f} ms")
    print(f"  Throughput: {n_pixels / elapsed / 1e6:.1f} M/s")

    elapsed = _time(lambda: apply_matrices_to_color_components(pixels, *chain), n_iterations)
    print("\nChain of 4 matrices:")
    print(f"  Time: {elapsed * 1000:.3f} ms")
    print(f"  Throughput: {n_pixels / elapsed / 1e6:.1f} M/s")

    matrix = sepia.to_array()

    def numpy_matmul():
        out = pixels.copy()
        out[:, :3] = pixels[:, :3] @ matrix.T
        return out

    elapsed = _time(numpy_matmul, n_iterations)
    print("\nNumPy matmul (reference):")
    print(f"  Time: {elapsed * 1000:.3f} ms")
    print(f"  Throughput: {n_pixels / elapsed / 1e6:.1f} M/s")


if __name__ == "__main__":
    for n in (100_000, 1_000_000):
        benchmark_color_matrix(n)
