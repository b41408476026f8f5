"""Exceptions raised by the cover generator."""

from __future__ import annotations

from covergen.models.errors import GenErrorKind, InputErrorKind


class CoverGenError(Exception):
    """Base exception."""


class ConfigError(CoverGenError):
    """Parameter or message file is missing or malformed."""


class EngineNotInitializedError(CoverGenError):
    """generate() was called on an engine without loaded parameters."""

    def __init__(self, message: str = "cover parameters are not loaded") -> None:
        super().__init__(message)


class CoverGenerationError(CoverGenError):
    """No standard cover can be built for the given measurements."""

    def __init__(self, kind: GenErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class InputValidationError(CoverGenError):
    """A raw measurement could not be accepted."""

    def __init__(self, kind: InputErrorKind, field: str | None = None) -> None:
        super().__init__(f"{field}: {kind.value}" if field else kind.value)
        self.kind = kind
        self.field = field
