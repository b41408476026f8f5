"""Side obstacle clearance along the length axis.

The device is centered between the left and right inner walls, so the
cover reaches half its outer length out from the device center on both
sides.
"""

from __future__ import annotations

from covergen.rules.base import CollisionRule
from covergen.models import GenerationContext, GenErrorKind, half_ceil, half_floor


class _SideCollisionRule(CollisionRule):

    side: str

    def distance(self, context: GenerationContext) -> int | None:
        return getattr(context.obstacles, self.side)

    def collides(self, context: GenerationContext) -> bool:
        to_obstacle = half_floor(context.device.length) + self.distance(context)
        return to_obstacle <= half_ceil(context.outer.length)


class LeftCollisionRule(_SideCollisionRule):
    priority = 10
    side = "left"
    error_kind = GenErrorKind.LEFT_COLLISION

    def get_id(self) -> str:
        return "collision.left"

    def get_name(self) -> str:
        return "Left Obstacle Clearance"


class RightCollisionRule(_SideCollisionRule):
    priority = 20
    side = "right"
    error_kind = GenErrorKind.RIGHT_COLLISION

    def get_id(self) -> str:
        return "collision.right"

    def get_name(self) -> str:
        return "Right Obstacle Clearance"
