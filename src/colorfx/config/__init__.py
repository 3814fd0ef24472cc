"""Configuration for colorfx filter matrices.

Example:
    >>> from colorfx.config import FILTER_CONFIG
    >>> FILTER_CONFIG.grayscale.validate(1.5)
    1.0
"""

from colorfx.config.config import CONFIG, FILTER_CONFIG, ColorfxConfig
from colorfx.config.filters import ColorFilterConfig
from colorfx.config.operations import OperationSpec

__all__ = [
    "CONFIG",
    "FILTER_CONFIG",
    "ColorfxConfig",
    "ColorFilterConfig",
    "OperationSpec",
]
