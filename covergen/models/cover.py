"""Generated cover output models."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .geometry import Dimensions
from .inputs import InputMatrix


class GenerationResult(BaseModel):
    """A cover that fits the device and clears every obstacle."""
    inner: Dimensions
    outer: Dimensions
    modules: int = Field(ge=0)  # Wall panels, always paired
    matrix: InputMatrix         # Accepted input with spacings resolved
