"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from covergen.models import GenerationResult

# Fields arrive either as numbers or as the raw text typed by the user
RawField = int | str | None


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    device: list[RawField] = Field(min_length=3, max_length=3)                       # length, width, height
    obstacles: list[RawField] = Field(default=[None] * 3, min_length=3, max_length=3)  # left, right, back
    spacings: list[RawField] = Field(default=[None] * 4, min_length=4, max_length=4)   # side, front, back, top


class GenerateResponse(GenerationResult):
    """Response from the /generate endpoint."""
    rows: list[list[int]]   # Resolved input as the 3xN matrix (-1 = not given)

    @classmethod
    def from_result(cls, result: GenerationResult) -> GenerateResponse:
        return cls(**result.model_dump(), rows=result.matrix.to_rows())


class ErrorDetail(BaseModel):
    """Body of a rejected generation or input."""
    kind: str
    message: str
    field: str | None = None


class HealthInfo(BaseModel):
    status: str
    initialized: bool
