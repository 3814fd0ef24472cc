"""Numba-optimized color matrix kernels.

Implements the matrix-times-components transform with the padding policy
for mismatched sizes:

- Columns beyond the component count multiply an implicit 1 (affine offset).
- Components beyond the row count pass through unchanged.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


# Not using parallel=True: callers may invoke this from several threads at once
@njit(cache=True, nogil=True)
def transform_components_numba(
    components: NDArray[np.float32],
    coefficients: NDArray[np.float32],
    columns: int,
    rows: int,
    out: NDArray[np.float32],
) -> None:
    """Apply a row-major color matrix to a batch of component vectors.

    Accumulates in float32, left to right, starting from zero.

    :param components: Input components [N, S], requires S >= rows
    :param coefficients: Row-major matrix coefficients [rows * columns]
    :param columns: Matrix column count
    :param rows: Matrix row count
    :param out: Output components [N, S]
    """
    N = components.shape[0]
    size = components.shape[1]

    for i in range(N):
        for row in range(rows):
            base = row * columns
            acc = np.float32(0.0)
            if columns <= size:
                for column in range(columns):
                    acc += coefficients[base + column] * components[i, column]
            else:
                for column in range(size):
                    acc += coefficients[base + column] * components[i, column]
                # Extra columns contribute as constant offsets
                for column in range(size, columns):
                    acc += coefficients[base + column]
            out[i, row] = acc

        for row in range(rows, size):
            out[i, row] = components[i, row]


def warmup_color_matrix_kernels() -> None:
    """Warm up Numba JIT compilation for the color matrix kernels.

    Should be called on module import to avoid first-call overhead.
    """
    components = np.zeros((4, 4), dtype=np.float32)
    out = np.empty_like(components)
    coefficients = np.zeros(9, dtype=np.float32)

    transform_components_numba(components, coefficients, 3, 3, out)

    logger.debug("Color matrix Numba kernels warmed up")


# Warmup on import
warmup_color_matrix_kernels()
