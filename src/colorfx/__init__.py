"""
colorfx - Color matrices for filter effects

Fixed-size color matrices and the CSS/SVG filter-effect matrices built
on them, applied to RGBA color components with NumPy/Numba.

Features:
- ColorMatrix: immutable C×R float32 matrix with exact equality
- Padding policy for mismatched sizes: extra columns act as constant
  offsets, components beyond the row count (e.g. alpha) pass through
- Filter matrices: grayscale, sepia, saturate, hue-rotate, luminanceToAlpha,
  and raw 5×4 feColorMatrix values
- Composition of matrix chains over single colors or whole images [..., 4]

Example:
    >>> from colorfx import (
    ...     apply_matrices_to_color_components,
    ...     grayscale_color_matrix,
    ...     hue_rotate_color_matrix,
    ... )
    >>> rgba = [0.8, 0.4, 0.2, 1.0]
    >>> out = apply_matrices_to_color_components(
    ...     rgba, grayscale_color_matrix(0.5), hue_rotate_color_matrix(90)
    ... )
"""

__version__ = "0.1.0"

from colorfx.components import COLOR_COMPONENT_COUNT, as_color_components, color_components
from colorfx.config import CONFIG, FILTER_CONFIG, OperationSpec
from colorfx.matrix import (
    ColorMatrix,
    apply_matrices_to_color_components,
    color_matrix,
    color_matrix_from_values,
    grayscale_color_matrix,
    hue_rotate_color_matrix,
    identity_color_matrix,
    luminance_to_alpha_color_matrix,
    saturation_color_matrix,
    sepia_color_matrix,
)

__all__ = [
    "__version__",
    # Components
    "COLOR_COMPONENT_COUNT",
    "as_color_components",
    "color_components",
    # Configuration
    "CONFIG",
    "FILTER_CONFIG",
    "OperationSpec",
    # Matrices
    "ColorMatrix",
    "color_matrix",
    "apply_matrices_to_color_components",
    "grayscale_color_matrix",
    "sepia_color_matrix",
    "saturation_color_matrix",
    "hue_rotate_color_matrix",
    "luminance_to_alpha_color_matrix",
    "color_matrix_from_values",
    "identity_color_matrix",
]
