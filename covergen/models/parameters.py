"""Cover parameters: part catalog, correction constants, spacing defaults."""

from __future__ import annotations
from pydantic import BaseModel, Field, field_validator

from .geometry import Axis, AxisValues


class Catalog(BaseModel):
    """
    Available prefabricated part sizes, one list per axis.

    Lists are kept sorted ascending. The height list holds the three
    module kinds; once sorted the smallest is the base module, the middle
    one the repeatable wall module and the largest the top module.
    """
    lengths: list[float]
    widths: list[float]
    heights: list[float]

    @field_validator("lengths", "widths", "heights")
    @classmethod
    def _sorted_positive(cls, sizes: list[float]) -> list[float]:
        if not sizes:
            raise ValueError("catalog list must not be empty")
        if any(s <= 0 for s in sizes):
            raise ValueError("catalog sizes must be positive")
        return sorted(sizes)

    @field_validator("heights")
    @classmethod
    def _three_modules(cls, sizes: list[float]) -> list[float]:
        if len(sizes) != 3:
            raise ValueError(
                f"heights must list base, wall and top module sizes, got {len(sizes)} values"
            )
        return sizes

    @property
    def base_module(self) -> float:
        return self.heights[0]

    @property
    def wall_module(self) -> float:
        return self.heights[1]

    @property
    def top_module(self) -> float:
        return self.heights[2]

    def for_axis(self, axis: Axis) -> list[float]:
        return {
            Axis.LENGTH: self.lengths,
            Axis.WIDTH: self.widths,
            Axis.HEIGHT: self.heights,
        }[axis]


class CorrectionConstants(BaseModel):
    """Inner-accuracy and outer-shell corrections per axis."""
    inner: AxisValues = Field(default_factory=AxisValues)  # catalog size -> precise inner size
    outer: AxisValues = Field(default_factory=AxisValues)  # inner size -> shippable outer size


class SpacingDefaults(BaseModel):
    """Minimum clearances used when the user leaves a spacing unspecified."""
    front: float = Field(default=0.0, ge=0)
    side: float = Field(default=0.0, ge=0)
    back: float = Field(default=0.0, ge=0)
    top: float = Field(default=0.0, ge=0)


class CoverParameters(BaseModel):
    """Everything the generator needs from the configuration store."""
    catalog: Catalog
    corrections: CorrectionConstants = Field(default_factory=CorrectionConstants)
    spacing: SpacingDefaults = Field(default_factory=SpacingDefaults)
    wall_space: float = 0.0         # Parsed and reported, unused by generation
    max_wall_modules: int = Field(default=3, ge=0)

    @property
    def max_inner_height(self) -> float:
        """Tallest inner height reachable with the allowed wall modules."""
        catalog = self.catalog
        return (
            catalog.base_module
            + catalog.top_module
            + catalog.wall_module * self.max_wall_modules
            + self.corrections.inner.height
        )

    def max_inner(self, axis: Axis) -> int:
        """Upper bound for an approximate inner dimension, in whole millimeters."""
        if axis == Axis.HEIGHT:
            return int(self.max_inner_height)
        return int(self.catalog.for_axis(axis)[-1] + self.corrections.inner.get(axis))
