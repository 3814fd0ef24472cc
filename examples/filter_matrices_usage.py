"""
Example: CSS/SVG filter-effect color matrices.

Demonstrates how to use colorfx for:
- Building the standard filter matrices (grayscale, sepia, saturate, hue-rotate)
- Applying a single matrix to one RGBA color
- Chaining matrices of different sizes over a whole image
- Raw 5×4 feColorMatrix values with per-channel offsets
"""

import logging

import numpy as np

from colorfx import (
    FILTER_CONFIG,
    apply_matrices_to_color_components,
    color_components,
    color_matrix_from_values,
    grayscale_color_matrix,
    hue_rotate_color_matrix,
    luminance_to_alpha_color_matrix,
    saturation_color_matrix,
    sepia_color_matrix,
)

# Configure logging to see composition details
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def generate_sample_image(h: int = 64, w: int = 64) -> np.ndarray:
    """Generate a sample RGBA image in [0, 1]."""
    rng = np.random.default_rng(42)
    image = rng.random((h, w, 4)).astype(np.float32)
    image[..., 3] = 1.0
    return image


def example_1_single_color():
    """Example 1: One filter matrix on one color."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Single Color")
    print("=" * 70)

    orange = color_components(1.0, 0.5, 0.0, 0.8)
    for name, matrix in [
        ("grayscale(1)", grayscale_color_matrix(1.0)),
        ("sepia(1)", sepia_color_matrix(1.0)),
        ("saturate(0.5)", saturation_color_matrix(0.5)),
        ("hue-rotate(180)", hue_rotate_color_matrix(180.0)),
    ]:
        print(f"{name:>16}: {matrix.transformed_color_components(orange)}")


def example_2_chain_on_image():
    """Example 2: Chain several filters over an image."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Filter Chain on an Image")
    print("=" * 70)

    image = generate_sample_image()
    # Clamp user input the way a CSS parser would
    amount = FILTER_CONFIG.sepia.validate(1.7)

    result = apply_matrices_to_color_components(
        image,
        sepia_color_matrix(amount),
        saturation_color_matrix(1.5),
        hue_rotate_color_matrix(-30.0),
    )
    print(f"Input mean RGB:  {image[..., :3].mean(axis=(0, 1))}")
    print(f"Output mean RGB: {result[..., :3].mean(axis=(0, 1))}")


def example_3_fecolormatrix():
    """Example 3: feColorMatrix values with offsets, then luminanceToAlpha."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: feColorMatrix")
    print("=" * 70)

    brighten = color_matrix_from_values(
        [
            1, 0, 0, 0, 0.2,
            0, 1, 0, 0, 0.2,
            0, 0, 1, 0, 0.2,
            0, 0, 0, 1, 0.0,
        ]
    )  # fmt: skip
    color = color_components(0.3, 0.3, 0.3)
    print(f"Brightened: {brighten.transformed_color_components(color)}")
    mask = apply_matrices_to_color_components(color, brighten, luminance_to_alpha_color_matrix())
    print(f"Luminance mask: {mask}")


def main():
    print("=" * 70)
    print("COLORFX FILTER MATRIX EXAMPLES")
    print("=" * 70)

    example_1_single_color()
    example_2_chain_on_image()
    example_3_fecolormatrix()

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
