"""Tests for applying chains of color matrices."""

import logging

import numpy as np
import pytest

from colorfx import (
    ColorMatrix,
    apply_matrices_to_color_components,
    color_matrix_from_values,
    grayscale_color_matrix,
    hue_rotate_color_matrix,
    saturation_color_matrix,
    sepia_color_matrix,
)


def create_test_image(h: int = 16, w: int = 12, seed: int = 42) -> np.ndarray:
    """Create a reproducible RGBA image in [0, 1]."""
    np.random.seed(seed)
    return np.random.rand(h, w, 4).astype(np.float32)


class TestApplyMatrices:
    """Test apply_matrices_to_color_components."""

    def test_single_matrix(self):
        """Test one matrix equals a direct transform."""
        rgba = [0.8, 0.4, 0.2, 1.0]
        m = sepia_color_matrix(0.7)
        np.testing.assert_array_equal(
            apply_matrices_to_color_components(rgba, m), m.transformed_color_components(rgba)
        )

    def test_two_matrices_match_manual_chain(self):
        """Test [M1, M2] is bit-identical to M2(M1(v))."""
        rgba = np.array([0.8, 0.4, 0.2, 0.6], dtype=np.float32)
        m1 = grayscale_color_matrix(0.3)
        m2 = hue_rotate_color_matrix(75.0)

        composed = apply_matrices_to_color_components(rgba, m1, m2)
        manual = m2.transformed_color_components(m1.transformed_color_components(rgba))

        np.testing.assert_array_equal(composed, manual)

    def test_order_matters(self):
        """Test matrices are applied left to right."""
        rgba = [0.8, 0.4, 0.2, 1.0]
        a = saturation_color_matrix(2.0)
        b = ColorMatrix(3, 3, [0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0])  # channel swap

        ab = apply_matrices_to_color_components(rgba, a, b)
        ba = apply_matrices_to_color_components(rgba, b, a)
        expected_ab = b.transformed_color_components(a.transformed_color_components(rgba))

        np.testing.assert_array_equal(ab, expected_ab)
        assert not np.array_equal(ab, ba)

    def test_heterogeneous_dimensions(self):
        """Test mixing 3×3, 5×4 and 2×1 stages."""
        rgba = np.array([0.1, 0.2, 0.3, 0.4], dtype=np.float32)
        offset = color_matrix_from_values(
            [1, 0, 0, 0, 0.1,
             0, 1, 0, 0, 0.1,
             0, 0, 1, 0, 0.1,
             0, 0, 0, 1, 0.1]
        )  # fmt: skip
        stages = [grayscale_color_matrix(1.0), offset, ColorMatrix(2, 1, [0.5, 0.5])]

        result = apply_matrices_to_color_components(rgba, *stages)

        expected = rgba
        for stage in stages:
            expected = stage.transformed_color_components(expected)
        np.testing.assert_array_equal(result, expected)
        # Alpha only touched by the 5×4 stage
        assert result[3] == rgba[3] + np.float32(0.1)

    def test_image_batch(self):
        """Test a whole image goes through the chain per pixel."""
        image = create_test_image()
        m1 = sepia_color_matrix(0.5)
        m2 = saturation_color_matrix(1.4)

        result = apply_matrices_to_color_components(image, m1, m2)

        assert result.shape == image.shape
        np.testing.assert_array_equal(
            result[5, 7], apply_matrices_to_color_components(image[5, 7], m1, m2)
        )
        np.testing.assert_array_equal(result[..., 3], image[..., 3])

    def test_input_not_modified(self):
        """Test the caller's array is not mutated."""
        image = create_test_image()
        original = image.copy()
        apply_matrices_to_color_components(image, grayscale_color_matrix(1.0))
        np.testing.assert_array_equal(image, original)

    def test_requires_a_matrix(self):
        """Test at least one matrix must be given."""
        with pytest.raises(TypeError):
            apply_matrices_to_color_components([0.0, 0.0, 0.0, 1.0])

    def test_rejects_non_matrix_stage(self):
        """Test every stage must be a ColorMatrix."""
        with pytest.raises(TypeError, match="Stage 1: expected ColorMatrix"):
            apply_matrices_to_color_components(
                [0.0, 0.0, 0.0, 1.0], grayscale_color_matrix(1.0), np.eye(3)
            )

    def test_oversized_stage_checked_up_front(self, monkeypatch):
        """Test a stage with too many rows fails before any stage runs."""
        calls = []
        first = grayscale_color_matrix(1.0)
        original = ColorMatrix.transformed_color_components

        def tracking(self, components):
            calls.append(self)
            return original(self, components)

        monkeypatch.setattr(ColorMatrix, "transformed_color_components", tracking)

        with pytest.raises(ValueError, match="5 rows"):
            apply_matrices_to_color_components(
                [0.0, 0.0, 0.0, 1.0], first, ColorMatrix(1, 5, [1.0] * 5)
            )
        assert calls == []

    def test_debug_logging(self, caplog):
        """Test composition logs the number of stages at debug level."""
        with caplog.at_level(logging.DEBUG, logger="colorfx.matrix.compose"):
            apply_matrices_to_color_components(
                [0.5, 0.5, 0.5, 1.0], grayscale_color_matrix(1.0), sepia_color_matrix(1.0)
            )
        assert "[compose] Applying 2 matrices" in caplog.text
