"""Filter-effect color matrices.

Coefficient tables from the W3C Filter Effects specification:
- grayscale: https://www.w3.org/TR/filter-effects-1/#grayscaleEquivalent
- sepia: https://www.w3.org/TR/filter-effects-1/#sepiaEquivalent
- saturate, hueRotate, luminanceToAlpha:
  https://www.w3.org/TR/filter-effects-1/#feColorMatrixElement

Each table is split into a constant part and the part scaled by the
parameter, so ``coefficients = base + scale * parameter`` evaluates in
float32 exactly like the written-out formulas.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from colorfx.config import FILTER_CONFIG
from colorfx.matrix.core import ColorMatrix
from colorfx.types import ArrayLike


def _table(*values: float) -> NDArray[np.float32]:
    table = np.array(values, dtype=np.float32)
    table.setflags(write=False)
    return table


# =============================================================================
# Coefficient Tables
# =============================================================================

# Rec. 709 luma weights
GRAYSCALE_BASE = _table(
    0.2126, 0.7152, 0.0722,
    0.2126, 0.7152, 0.0722,
    0.2126, 0.7152, 0.0722,
)  # fmt: skip
GRAYSCALE_SCALE = _table(
    0.7874, -0.7152, -0.0722,
    -0.2126, 0.2848, -0.0722,
    -0.2126, -0.7152, 0.9278,
)  # fmt: skip

SEPIA_BASE = _table(
    0.393, 0.769, 0.189,
    0.349, 0.686, 0.168,
    0.272, 0.534, 0.131,
)  # fmt: skip
SEPIA_SCALE = _table(
    0.607, -0.769, -0.189,
    -0.349, 0.314, -0.168,
    -0.272, -0.534, 0.869,
)  # fmt: skip

# Shared by saturate and hueRotate
LUMA_BASE = _table(
    0.213, 0.715, 0.072,
    0.213, 0.715, 0.072,
    0.213, 0.715, 0.072,
)  # fmt: skip
SATURATE_SCALE = _table(
    0.787, -0.715, -0.072,
    -0.213, 0.285, -0.072,
    -0.213, -0.715, 0.928,
)  # fmt: skip
HUE_ROTATE_COS = SATURATE_SCALE
HUE_ROTATE_SIN = _table(
    -0.213, -0.715, 0.928,
    0.143, 0.140, -0.283,
    -0.787, 0.715, 0.072,
)  # fmt: skip

PI_FLOAT = np.float32(np.pi)

LUMINANCE_TO_ALPHA = _table(
    0.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 0.0, 0.0,
    0.2125, 0.7154, 0.0721, 0.0, 0.0,
)  # fmt: skip


def _deg2rad(degrees: np.float32) -> np.float32:
    # degrees * float32(pi) / 180, rounded to float32 after each step
    return np.float32(np.float32(degrees * PI_FLOAT) / np.float32(180.0))


def _clamped_one_minus(amount: float) -> np.float32:
    one_minus_amount = np.float32(1.0) - np.float32(amount)
    return np.float32(min(max(one_minus_amount, np.float32(0.0)), np.float32(1.0)))


# =============================================================================
# Filter Matrices
# =============================================================================


def grayscale_color_matrix(amount: float) -> ColorMatrix:
    """Build the 3×3 grayscale matrix.

    :param amount: 0 = unchanged, 1 = fully grayscale (clamped to [0, 1])
    :returns: 3×3 ColorMatrix
    """
    k = _clamped_one_minus(FILTER_CONFIG.grayscale.coerce(amount))
    return ColorMatrix(3, 3, GRAYSCALE_BASE + GRAYSCALE_SCALE * k)


def sepia_color_matrix(amount: float) -> ColorMatrix:
    """Build the 3×3 sepia matrix.

    :param amount: 0 = unchanged, 1 = fully sepia (clamped to [0, 1])
    :returns: 3×3 ColorMatrix
    """
    k = _clamped_one_minus(FILTER_CONFIG.sepia.coerce(amount))
    return ColorMatrix(3, 3, SEPIA_BASE + SEPIA_SCALE * k)


def saturation_color_matrix(amount: float) -> ColorMatrix:
    """Build the 3×3 saturate matrix.

    The amount is not clamped; values above 1 oversaturate.

    :param amount: 0 = fully desaturated, 1 = unchanged
    :returns: 3×3 ColorMatrix
    """
    s = np.float32(FILTER_CONFIG.saturate.coerce(amount))
    return ColorMatrix(3, 3, LUMA_BASE + SATURATE_SCALE * s)


def hue_rotate_color_matrix(angle_in_degrees: float) -> ColorMatrix:
    """Build the 3×3 luminance-preserving hue rotation matrix.

    :param angle_in_degrees: Rotation angle in degrees
    :returns: 3×3 ColorMatrix
    """
    degrees = np.float32(FILTER_CONFIG.hue_rotate.coerce(angle_in_degrees))
    angle = _deg2rad(degrees)
    cos_hue = np.cos(angle)
    sin_hue = np.sin(angle)
    return ColorMatrix(3, 3, LUMA_BASE + HUE_ROTATE_COS * cos_hue + HUE_ROTATE_SIN * sin_hue)


def luminance_to_alpha_color_matrix() -> ColorMatrix:
    """Build the 5×4 luminanceToAlpha matrix.

    RGB become 0 and alpha becomes the luminance of the input color.
    """
    return ColorMatrix(5, 4, LUMINANCE_TO_ALPHA)


def color_matrix_from_values(values: ArrayLike) -> ColorMatrix:
    """Build a 5×4 matrix from ``feColorMatrix type="matrix"`` values.

    The fifth value of each row is a constant offset added to that channel.

    :param values: 20 values, row-major (R, G, B, A rows)
    :returns: 5×4 ColorMatrix
    :raises ValueError: If there are not exactly 20 values
    """
    return ColorMatrix(5, 4, values)


def identity_color_matrix(size: int = 3) -> ColorMatrix:
    """Build a size×size identity matrix.

    :param size: Number of rows and columns
    :returns: ColorMatrix with ones on the diagonal
    """
    return ColorMatrix(size, size, np.eye(size, dtype=np.float32).ravel())
