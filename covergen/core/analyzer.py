"""Dimension analysis - spacing defaults, approximate inner size, catalog bounds."""

from __future__ import annotations

from covergen.models import Axis, Dimensions, GenerationContext, GenErrorKind
from covergen.errors import CoverGenerationError

# Bound check order decides which failure is reported
BOUND_ERRORS: list[tuple[Axis, GenErrorKind]] = [
    (Axis.LENGTH, GenErrorKind.TOO_LONG),
    (Axis.WIDTH, GenErrorKind.TOO_WIDE),
    (Axis.HEIGHT, GenErrorKind.TOO_HIGH),
]


class DimensionAnalyzer:
    """Derives the approximate inner dimensions a cover must reach."""

    def analyze(self, context: GenerationContext) -> None:
        """Run all analysis passes and populate the context."""
        self._resolve_spacings(context)
        context.approx = self._approx_inner(context)
        self._check_bounds(context)

    def _resolve_spacings(self, context: GenerationContext) -> None:
        spacings = context.matrix.spacings.resolved(context.params.spacing)
        context.matrix = context.matrix.model_copy(update={"spacings": spacings})

    def _approx_inner(self, context: GenerationContext) -> Dimensions:
        device = context.device
        s = context.spacings
        return Dimensions(
            length=device.length + 2 * s.side,
            width=device.width + s.front + s.back,
            height=device.height + s.top,
        )

    def _check_bounds(self, context: GenerationContext) -> None:
        """Evaluate every axis, then report the first one out of range."""
        exceeded = [
            context.approx.get(axis) > context.params.max_inner(axis)
            for axis, _ in BOUND_ERRORS
        ]
        for too_big, (_, kind) in zip(exceeded, BOUND_ERRORS):
            if too_big:
                raise CoverGenerationError(kind)
