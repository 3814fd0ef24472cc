"""Color-component vectors.

A color-component vector is a ``float32`` array whose last axis holds
exactly ``COLOR_COMPONENT_COUNT`` channels (R, G, B, A). A single color is
shape ``(4,)``; images and other batches are shape ``(..., 4)``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from colorfx.types import ColorComponentsLike

# Number of channels in a color-component vector (R, G, B, A)
COLOR_COMPONENT_COUNT = 4


def as_color_components(values: ColorComponentsLike) -> NDArray[np.float32]:
    """Coerce values to a contiguous float32 color-component array.

    :param values: A single color [4] or a batch [..., 4]
    :returns: float32 array with the same shape (copied only when needed)
    :raises ValueError: If the last axis does not hold 4 components
    """
    components = np.ascontiguousarray(values, dtype=np.float32)
    if components.ndim == 0 or components.shape[-1] != COLOR_COMPONENT_COUNT:
        raise ValueError(
            f"Color components must have {COLOR_COMPONENT_COUNT} values on the last axis, "
            f"got shape {components.shape}"
        )
    return components


def color_components(r: float, g: float, b: float, a: float = 1.0) -> NDArray[np.float32]:
    """Build a single color-component vector.

    :param r: Red channel
    :param g: Green channel
    :param b: Blue channel
    :param a: Alpha channel (default opaque)
    :returns: float32 array [4]
    """
    return np.array([r, g, b, a], dtype=np.float32)
