"""Unified colorfx configuration.

This module provides a top-level configuration dataclass holding the
filter matrix parameter specifications.
"""

from __future__ import annotations

from dataclasses import dataclass

from colorfx.config.filters import ColorFilterConfig
from colorfx.config.operations import OperationSpec


@dataclass(frozen=True)
class ColorfxConfig:
    """Top-level configuration.

    Provides hierarchical access to operation specifications:
        CONFIG.filters.grayscale
        CONFIG.filters.hue_rotate

    Attributes:
        filters: Filter matrix factory parameter specifications
    """

    filters: ColorFilterConfig = ColorFilterConfig()

    def get_all_specs(self) -> dict[str, dict[str, OperationSpec]]:
        """Get all operation specs organized by group.

        :return: Nested dictionary of all specifications
        """
        return {"filters": self.filters.get_all_specs()}


# Main singleton instance
CONFIG = ColorfxConfig()

FILTER_CONFIG = CONFIG.filters
