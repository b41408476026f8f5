"""Main cover generator - orchestrates analysis, parts matching and collision rules."""

from __future__ import annotations

from covergen.models import (
    Axis, CoverParameters, GenerationContext, GenerationResult, InputMatrix,
)
from covergen.errors import CoverGenerationError, EngineNotInitializedError
from covergen.core.analyzer import DimensionAnalyzer
from covergen.core.matcher import PartsMatcher
from covergen.core.registry import RuleRegistry, create_default_registry


class CoverGenerator:
    """
    Cover generation engine.

    Takes an input matrix, derives the required inner size, matches it
    against the part catalog, and checks the finished cover against any
    obstacles. Holds only the loaded parameters plus a snapshot of the
    last attempt, so one instance should not be shared between threads.
    """

    def __init__(
        self,
        params: CoverParameters | None = None,
        registry: RuleRegistry | None = None,
    ) -> None:
        self.params = params
        self.registry = registry or create_default_registry()
        self.analyzer = DimensionAnalyzer()
        self.matcher = PartsMatcher()

        self.last_matrix: InputMatrix | None = None
        self.last_result: GenerationResult | None = None

    @property
    def initialized(self) -> bool:
        return self.params is not None

    def generate(self, matrix: InputMatrix) -> GenerationResult:
        """
        Generate a cover for `matrix`.

        Raises CoverGenerationError with the failing kind, or
        EngineNotInitializedError when no parameters are loaded.
        """
        if self.params is None:
            raise EngineNotInitializedError()

        self.last_result = None
        context = GenerationContext(matrix=matrix, params=self.params)

        try:
            # Analysis phase - spacings, approximate size, catalog bounds
            self.analyzer.analyze(context)

            # Parts phase - catalog match and module stacking
            self.matcher.match(context)
            context.outer = context.inner.grown_by(self.params.corrections.outer)

            # Clearance phase - obstacles on the left, right and back
            rule = self.registry.find_collision(context)
            if rule is not None:
                raise CoverGenerationError(rule.error_kind)
        finally:
            self.last_matrix = context.matrix

        self.last_result = GenerationResult(
            inner=context.inner,
            outer=context.outer,
            modules=context.modules,
            matrix=context.matrix,
        )
        return self.last_result

    def describe(self) -> dict:
        """Summary of the loaded catalog, corrections and spacing defaults."""
        if self.params is None:
            raise EngineNotInitializedError()
        summary = self.params.model_dump()
        summary["max_inner"] = {axis.value: self.params.max_inner(axis) for axis in Axis}
        return summary
