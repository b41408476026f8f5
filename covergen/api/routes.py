"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from covergen.services.cover_service import CoverService
from covergen.errors import (
    CoverGenerationError, EngineNotInitializedError, InputValidationError,
)
from covergen.api.schemas import (
    ErrorDetail, GenerateRequest, GenerateResponse, HealthInfo,
)

router = APIRouter()


def get_service(request: Request) -> CoverService:
    return request.app.state.service


def _unavailable() -> HTTPException:
    return HTTPException(status_code=503, detail="cover parameters are not loaded")


@router.post("/generate", response_model=GenerateResponse)
async def generate_cover(
    request: GenerateRequest, service: CoverService = Depends(get_service),
) -> GenerateResponse:
    """Validate the measurements and generate a cover."""
    try:
        matrix = service.validate(request.device, request.obstacles, request.spacings)
        result = service.generate(matrix)
    except (InputValidationError, CoverGenerationError) as e:
        detail = ErrorDetail(
            kind=e.kind.value,
            message=service.error_message,
            field=getattr(e, "field", None),
        )
        raise HTTPException(status_code=422, detail=detail.model_dump()) from e
    except EngineNotInitializedError as e:
        raise _unavailable() from e

    return GenerateResponse.from_result(result)


@router.get("/result", response_model=GenerateResponse)
async def last_result(service: CoverService = Depends(get_service)) -> GenerateResponse:
    """The most recent successful generation."""
    result = service.last_result
    if result is None:
        raise HTTPException(status_code=404, detail="no cover generated yet")
    return GenerateResponse.from_result(result)


@router.get("/parameters")
async def parameters(service: CoverService = Depends(get_service)) -> dict:
    """Loaded catalog, corrections and spacing defaults."""
    try:
        return service.parameters_summary()
    except EngineNotInitializedError as e:
        raise _unavailable() from e


@router.get("/health", response_model=HealthInfo)
async def health(service: CoverService = Depends(get_service)) -> HealthInfo:
    return HealthInfo(status="ok", initialized=service.initialized)
