"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from covergen.api.routes import router
from covergen.config import configure_logging, get_settings
from covergen.services.cover_service import CoverService


def create_app(service: CoverService | None = None) -> FastAPI:
    app = FastAPI(
        title="Cover Generator",
        description="Modular enclosure sizing from a prefabricated part catalog",
        version="0.1.0",
    )

    # CORS - allow the desktop/web front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if service is None:
        settings = get_settings()
        configure_logging(settings.log_level)
        service = CoverService.from_settings(settings)
    app.state.service = service

    app.include_router(router, prefix="/api")

    return app
