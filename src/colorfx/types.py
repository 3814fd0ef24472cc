"""Type aliases for colorfx.

Provides unified type hints for array-like parameters across all modules.
"""

from collections.abc import Sequence

import numpy as np

# General array-like type
ArrayLike = Sequence[float] | np.ndarray

# Single color (r, g, b, a) or a batch of them [..., 4]
ColorComponentsLike = tuple[float, float, float, float] | Sequence[float] | np.ndarray

# Nested rows of matrix coefficients
MatrixRows = Sequence[Sequence[float]] | np.ndarray
