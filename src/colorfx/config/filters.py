"""Filter matrix configuration.

Parameter specifications for every filter matrix factory, following the
CSS Filter Effects value ranges.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from colorfx.config.operations import OperationSpec


@dataclass(frozen=True)
class ColorFilterConfig:
    """Configuration for the filter matrix factories.

    Ranges describe the meaningful domain of each parameter. The factories
    only coerce their argument; callers that want clamped input use
    ``spec.validate``. Hue angles are periodic and wrap instead of clamping.
    """

    grayscale: OperationSpec = OperationSpec(
        name="grayscale",
        min_value=0.0,
        max_value=1.0,
        default=0.0,
        neutral=0.0,
        description="Grayscale amount: 0=unchanged, 1=fully gray",
    )

    sepia: OperationSpec = OperationSpec(
        name="sepia",
        min_value=0.0,
        max_value=1.0,
        default=0.0,
        neutral=0.0,
        description="Sepia amount: 0=unchanged, 1=fully sepia",
    )

    saturate: OperationSpec = OperationSpec(
        name="saturate",
        min_value=0.0,
        max_value=float("inf"),
        default=1.0,
        neutral=1.0,
        description="Saturation: 0=desaturated, 1=unchanged, >1=oversaturated",
    )

    hue_rotate: OperationSpec = OperationSpec(
        name="hue_rotate",
        min_value=-180.0,
        max_value=180.0,
        default=0.0,
        neutral=0.0,
        description="Hue rotation angle in degrees, wraps every 360",
        period=360.0,
    )

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all operation specs keyed by name.

        :returns: Dictionary of operation name to OperationSpec
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}
