"""Apply chains of color matrices.

Matrices of different dimensions can be mixed freely; each stage only has
to fit the color-component vector (at most 4 rows).

Example:
    >>> from colorfx.matrix import grayscale_color_matrix, sepia_color_matrix
    >>> rgba = [0.8, 0.4, 0.2, 1.0]
    >>> out = apply_matrices_to_color_components(
    ...     rgba, grayscale_color_matrix(0.5), sepia_color_matrix(0.25)
    ... )
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from colorfx.components import as_color_components
from colorfx.matrix.core import ColorMatrix
from colorfx.types import ColorComponentsLike

logger = logging.getLogger(__name__)


def apply_matrices_to_color_components(
    components: ColorComponentsLike,
    matrix: ColorMatrix,
    *matrices: ColorMatrix,
) -> NDArray[np.float32]:
    """Apply one or more matrices to color components, left to right.

    ``apply(v, m1, m2, m3)`` equals
    ``m3.transformed_color_components(m2.transformed_color_components(
    m1.transformed_color_components(v)))`` bit for bit.

    All stages are checked before any arithmetic is done.

    :param components: Single color [4] or batch [..., 4]
    :param matrix: First matrix to apply
    :param matrices: Further matrices, applied in order
    :returns: New float32 array with the same shape as ``components``
    :raises TypeError: If a stage is not a ColorMatrix
    :raises ValueError: If a stage has more than 4 rows or components have the wrong size
    """
    stages = (matrix, *matrices)
    for index, stage in enumerate(stages):
        if not isinstance(stage, ColorMatrix):
            raise TypeError(f"Stage {index}: expected ColorMatrix, got {type(stage).__name__}")
        stage.check_row_count()

    result = as_color_components(components)
    logger.debug(
        "[compose] Applying %d matrices to components of shape %s", len(stages), result.shape
    )
    for stage in stages:
        result = stage.transformed_color_components(result)
    return result
