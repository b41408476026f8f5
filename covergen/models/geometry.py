"""Per-axis value containers used throughout the generator."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel


class Axis(str, Enum):
    LENGTH = "length"   # Left-right extent seen from the front
    WIDTH = "width"     # Front-back extent (depth)
    HEIGHT = "height"


class AxisValues(BaseModel):
    """Float triple, one value per axis (corrections, raw sums)."""
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def get(self, axis: Axis) -> float:
        return getattr(self, axis.value)


class Dimensions(BaseModel):
    """Integer millimeter size of a box along the three axes."""
    length: int
    width: int
    height: int

    def get(self, axis: Axis) -> int:
        return getattr(self, axis.value)

    def grown_by(self, extra: AxisValues) -> Dimensions:
        """Add a per-axis correction and truncate back to whole millimeters."""
        return Dimensions(
            length=int(self.length + extra.length),
            width=int(self.width + extra.width),
            height=int(self.height + extra.height),
        )

    def as_list(self) -> list[int]:
        return [self.length, self.width, self.height]


def half_floor(value: int) -> int:
    """floor(value / 2) for whole millimeters."""
    return math.floor(value / 2)


def half_ceil(value: int) -> int:
    """ceil(value / 2) for whole millimeters."""
    return math.ceil(value / 2)
