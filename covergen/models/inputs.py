"""User measurements: device size, obstacle distances, minimum spacings."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .parameters import SpacingDefaults

# Marker used by the legacy 3xN integer matrix for "not given"
UNSPECIFIED = -1


class DeviceDimensions(BaseModel):
    """Extreme dimensions of the device to be covered (required)."""
    length: int = Field(ge=0)
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class ObstacleDistances(BaseModel):
    """Distances to nearby obstacles. None means no obstacle on that side."""
    left: int | None = Field(default=None, ge=0)
    right: int | None = Field(default=None, ge=0)
    back: int | None = Field(default=None, ge=0)


class MinimumSpacings(BaseModel):
    """Clearances between device and cover. None means use the default."""
    side: int | None = Field(default=None, ge=0)
    front: int | None = Field(default=None, ge=0)
    back: int | None = Field(default=None, ge=0)
    top: int | None = Field(default=None, ge=0)

    def resolved(self, defaults: SpacingDefaults) -> MinimumSpacings:
        """Copy with every unspecified spacing replaced by its default."""
        return MinimumSpacings(
            side=self.side if self.side is not None else int(defaults.side),
            front=self.front if self.front is not None else int(defaults.front),
            back=self.back if self.back is not None else int(defaults.back),
            top=self.top if self.top is not None else int(defaults.top),
        )

    @property
    def is_resolved(self) -> bool:
        return None not in (self.side, self.front, self.back, self.top)


class InputMatrix(BaseModel):
    """The three measurement groups supplied for one generation attempt."""
    device: DeviceDimensions
    obstacles: ObstacleDistances = Field(default_factory=ObstacleDistances)
    spacings: MinimumSpacings = Field(default_factory=MinimumSpacings)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> InputMatrix:
        """
        Build from the 3xN integer matrix [device, obstacles, spacings].

        Obstacle and spacing entries equal to UNSPECIFIED become None.
        Row order follows the input forms: device (length, width, height),
        obstacles (left, right, back), spacings (side, front, back, top).
        """
        if len(rows) != 3 or [len(r) for r in rows] != [3, 3, 4]:
            raise ValueError("input matrix must have rows of 3, 3 and 4 values")

        def opt(value: int) -> int | None:
            return None if value == UNSPECIFIED else value

        device, obstacles, spacings = rows
        return cls(
            device=DeviceDimensions(length=device[0], width=device[1], height=device[2]),
            obstacles=ObstacleDistances(
                left=opt(obstacles[0]), right=opt(obstacles[1]), back=opt(obstacles[2]),
            ),
            spacings=MinimumSpacings(
                side=opt(spacings[0]), front=opt(spacings[1]),
                back=opt(spacings[2]), top=opt(spacings[3]),
            ),
        )

    def to_rows(self) -> list[list[int]]:
        def raw(value: int | None) -> int:
            return UNSPECIFIED if value is None else value

        d, o, s = self.device, self.obstacles, self.spacings
        return [
            [d.length, d.width, d.height],
            [raw(o.left), raw(o.right), raw(o.back)],
            [raw(s.side), raw(s.front), raw(s.back), raw(s.top)],
        ]
