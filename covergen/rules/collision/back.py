"""Back obstacle clearance along the width axis.

Front and back spacings differ, so the device is not centered in the
cover's depth. The cover's half-width is shifted by the distance between
the inner center and the device center before comparing.
"""

from __future__ import annotations

from covergen.rules.base import CollisionRule
from covergen.models import GenerationContext, GenErrorKind, half_ceil, half_floor


class BackCollisionRule(CollisionRule):
    priority = 30
    error_kind = GenErrorKind.BACK_COLLISION

    def get_id(self) -> str:
        return "collision.back"

    def get_name(self) -> str:
        return "Back Obstacle Clearance"

    def distance(self, context: GenerationContext) -> int | None:
        return context.obstacles.back

    def center_offset(self, context: GenerationContext) -> int:
        """How far the inner center sits in front of the device center."""
        return (
            half_ceil(context.inner.width)
            - half_ceil(context.device.width)
            - context.spacings.back
        )

    def collides(self, context: GenerationContext) -> bool:
        to_obstacle = half_floor(context.device.width) + self.distance(context)
        reach = half_ceil(context.outer.width) - self.center_offset(context)
        return to_obstacle <= reach
