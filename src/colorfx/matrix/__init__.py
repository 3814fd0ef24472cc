"""Color matrix module - fixed-size matrices for color filter effects.

Example:
    >>> from colorfx.matrix import (
    ...     apply_matrices_to_color_components,
    ...     hue_rotate_color_matrix,
    ...     saturation_color_matrix,
    ... )
    >>> out = apply_matrices_to_color_components(
    ...     [0.8, 0.4, 0.2, 1.0], saturation_color_matrix(1.3), hue_rotate_color_matrix(30)
    ... )
"""

from colorfx.matrix.compose import apply_matrices_to_color_components
from colorfx.matrix.core import ColorMatrix, color_matrix
from colorfx.matrix.filters import (
    color_matrix_from_values,
    grayscale_color_matrix,
    hue_rotate_color_matrix,
    identity_color_matrix,
    luminance_to_alpha_color_matrix,
    saturation_color_matrix,
    sepia_color_matrix,
)

__all__ = [
    "ColorMatrix",
    "color_matrix",
    "apply_matrices_to_color_components",
    # Filter matrices
    "grayscale_color_matrix",
    "sepia_color_matrix",
    "saturation_color_matrix",
    "hue_rotate_color_matrix",
    "luminance_to_alpha_color_matrix",
    "color_matrix_from_values",
    "identity_color_matrix",
]
