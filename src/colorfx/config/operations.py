"""Operation specifications for filter matrix parameters.

This module defines the OperationSpec dataclass that specifies parameter
ranges, defaults, and neutral values for the filter matrix factories.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class OperationSpec:
    """Specification for a filter matrix parameter.

    Attributes:
        name: Operation name (e.g., "grayscale", "hue_rotate")
        min_value: Minimum meaningful value
        max_value: Maximum meaningful value
        default: Default value when not specified
        neutral: Value that produces an identity-like matrix
        description: Human-readable description
        period: If set, values wrap into [min_value, min_value + period) instead of clamping
    """

    name: str
    min_value: float
    max_value: float
    default: float
    neutral: float
    description: str = ""
    period: float | None = None

    def coerce(self, value: float) -> float:
        """Check that value is a number and convert it to float.

        :param value: Value to coerce
        :returns: Value as a Python float (unclamped)
        :raises TypeError: If value is not a real number
        """
        if isinstance(value, bool) or not isinstance(
            value, int | float | np.integer | np.floating
        ):
            raise TypeError(f"{self.name}: expected number, got {type(value).__name__}")
        return float(value)

    def validate(self, value: float) -> float:
        """Coerce and clamp (or wrap, for periodic specs) value to the allowed range.

        :param value: Value to validate
        :returns: Value within [min_value, max_value]
        :raises TypeError: If value is not a number
        """
        value = self.coerce(value)
        if self.period is not None:
            return (value - self.min_value) % self.period + self.min_value
        return max(self.min_value, min(self.max_value, value))

    def is_neutral(self, value: float, tolerance: float = 1e-6) -> bool:
        """Check if value is effectively neutral (no change).

        :param value: Value to check
        :param tolerance: Tolerance for floating point comparison
        :returns: True if value is within tolerance of neutral
        """
        if self.period is not None:
            value = self.validate(value)
        return abs(value - self.neutral) < tolerance

    def __repr__(self) -> str:
        return (
            f"OperationSpec({self.name}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"default={self.default}, neutral={self.neutral})"
        )
