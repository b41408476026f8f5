"""High-level cover generation service - facade for the API layer."""

from __future__ import annotations

import logging
import threading

from covergen.config import CoverSettings, MessageTables, get_settings, load_parameters
from covergen.core.generator import CoverGenerator
from covergen.core.registry import RuleRegistry
from covergen.core.reporter import ErrorReporter
from covergen.core.validation import RawValue, parse_input
from covergen.errors import ConfigError, CoverGenerationError, InputValidationError
from covergen.models import CoverParameters, GenerationResult, InputMatrix

logger = logging.getLogger(__name__)


class CoverService:
    """Validates input, delegates to the generator, reports failures."""

    def __init__(
        self,
        params: CoverParameters | None,
        messages: MessageTables,
        registry: RuleRegistry | None = None,
        max_input_value: int = 2000,
    ) -> None:
        self.generator = CoverGenerator(params, registry)
        self.reporter = ErrorReporter(messages)
        self.max_input_value = max_input_value
        self.settings: CoverSettings | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: CoverSettings | None = None) -> CoverService:
        """
        Load parameters and message tables from the configured files.

        A broken parameter file leaves the engine uninitialized; missing
        message tables are fatal.
        """
        settings = settings or get_settings()
        messages = MessageTables.load(
            settings.generator_messages_path, settings.input_messages_path,
        )
        service = cls(None, messages, max_input_value=settings.max_input_value)
        service.settings = settings
        service.reload()
        return service

    def reload(self) -> bool:
        """Re-read the parameter file. Returns True if the engine is usable."""
        if self.settings is None:
            return self.generator.initialized

        try:
            params = load_parameters(
                self.settings.parameters_path,
                max_wall_modules=self.settings.max_wall_modules,
            )
        except ConfigError as e:
            logger.error("Cover generator unavailable: %s", e)
            params = None

        with self._lock:
            self.generator.params = params
        return params is not None

    @property
    def initialized(self) -> bool:
        return self.generator.initialized

    def validate(
        self,
        device: list[RawValue],
        obstacles: list[RawValue] | None = None,
        spacings: list[RawValue] | None = None,
    ) -> InputMatrix:
        try:
            return parse_input(device, obstacles, spacings, limit=self.max_input_value)
        except InputValidationError as e:
            with self._lock:
                self.reporter.report(e.kind)
            logger.info("Rejected input %s: %s", e.field, e.kind.value)
            raise

    def generate(self, matrix: InputMatrix) -> GenerationResult:
        with self._lock:
            try:
                result = self.generator.generate(matrix)
            except CoverGenerationError as e:
                self.reporter.report(e.kind)
                logger.info("Cover generation failed: %s", e.kind.value)
                raise
            self.reporter.clear()

        logger.info(
            "Generated cover inner=%s outer=%s modules=%d",
            result.inner.as_list(), result.outer.as_list(), result.modules,
        )
        return result

    @property
    def last_result(self) -> GenerationResult | None:
        return self.generator.last_result

    @property
    def error_message(self) -> str:
        return self.reporter.message

    def parameters_summary(self) -> dict:
        return self.generator.describe()
