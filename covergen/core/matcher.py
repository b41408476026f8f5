"""Parts matching - catalog lookup for length/width and module stacking for height."""

from __future__ import annotations
from bisect import bisect_left

from covergen.models import Axis, Dimensions, GenerationContext, GenErrorKind
from covergen.errors import CoverGenerationError


def pick_right_dimension(sizes: list[float], correction: float, approx: int) -> float | None:
    """
    Smallest catalog size whose corrected value covers `approx`.

    `sizes` must be sorted ascending. Returns None when even the largest
    entry is too small.
    """
    idx = bisect_left(sizes, approx, key=lambda size: size + correction)
    if idx == len(sizes):
        return None
    return sizes[idx]


def pick_modules_quantity(
    base: float, wall: float, top: float, correction: float, approx: int,
) -> tuple[int, float]:
    """
    Stack wall modules on base + top until the height covers `approx`.

    Returns (module count, reached height). Wall modules go in pairs,
    so the count is twice the number of stacked levels.
    """
    if wall <= 0:
        raise ValueError("wall module height must be positive")

    height = base + top + correction
    levels = 0
    while height < approx:
        height += wall
        levels += 1
    return levels * 2, height


class PartsMatcher:
    """Resolves inner dimensions and module count from the catalog."""

    def match(self, context: GenerationContext) -> None:
        """Populate context.inner and context.modules, or raise NO_PART_*."""
        params = context.params
        catalog = params.catalog
        correction = params.corrections.inner
        approx = context.approx

        length = pick_right_dimension(catalog.lengths, correction.length, approx.length)
        width = pick_right_dimension(catalog.widths, correction.width, approx.width)
        if length is None:
            raise CoverGenerationError(GenErrorKind.NO_PART_LENGTH)
        if width is None:
            raise CoverGenerationError(GenErrorKind.NO_PART_WIDTH)

        modules, height = pick_modules_quantity(
            catalog.base_module, catalog.wall_module, catalog.top_module,
            correction.height, approx.height,
        )

        context.modules = modules
        context.inner = Dimensions(
            length=int(length + correction.get(Axis.LENGTH)),
            width=int(width + correction.get(Axis.WIDTH)),
            height=int(height),
        )
