"""Generation context: accumulates state during one generation pass."""

from __future__ import annotations
from pydantic import BaseModel

from .geometry import Dimensions
from .inputs import InputMatrix
from .parameters import CoverParameters


class GenerationContext(BaseModel):
    """
    Holds all state during a single generation pass.

    The analyzer fills in the resolved matrix and approximate dimensions.
    The matcher fills in inner dimensions and module count.
    Collision rules read the finished inner and outer dimensions.
    """
    # Input
    matrix: InputMatrix
    params: CoverParameters

    # Analysis results
    approx: Dimensions | None = None

    # Output
    inner: Dimensions | None = None
    outer: Dimensions | None = None
    modules: int = 0

    @property
    def device(self):
        return self.matrix.device

    @property
    def obstacles(self):
        return self.matrix.obstacles

    @property
    def spacings(self):
        return self.matrix.spacings
