"""Runtime settings: file locations and limits, overridable from the environment."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"


class CoverSettings(BaseSettings):
    """Settings for the cover generator (COVERGEN_* environment variables)."""

    parameters_path: Path = RESOURCES_DIR / "cover_parameters.txt"
    generator_messages_path: Path = RESOURCES_DIR / "generator_errors.txt"
    input_messages_path: Path = RESOURCES_DIR / "input_errors.txt"

    max_input_value: int = Field(default=2000, gt=0)   # Exclusive upper bound for raw inputs
    max_wall_modules: int = Field(default=3, ge=0)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="COVERGEN_")


def configure_logging(level: str | int = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )


_settings: CoverSettings | None = None


def get_settings() -> CoverSettings:
    """Cached settings instance (lazy)."""
    global _settings
    if _settings is None:
        _settings = CoverSettings()
    return _settings


def reload_settings() -> CoverSettings:
    global _settings
    _settings = CoverSettings()
    return _settings
