"""Error kinds reported to the user through the message tables."""

from __future__ import annotations
from enum import Enum
from typing import Union


class GenErrorKind(str, Enum):
    """Geometry and catalog failures. Member order is the message table order."""
    LEFT_COLLISION = "left_collision"
    RIGHT_COLLISION = "right_collision"
    BACK_COLLISION = "back_collision"
    TOO_LONG = "too_long"
    TOO_WIDE = "too_wide"
    TOO_HIGH = "too_high"
    NO_PART_WIDTH = "no_part_width"
    NO_PART_LENGTH = "no_part_length"

    @property
    def position(self) -> int:
        return list(type(self)).index(self)


class InputErrorKind(str, Enum):
    """Malformed raw measurements. Member order is the message table order."""
    WRONG_FORMAT = "wrong_format"       # Not a whole number
    TOO_HIGH_VALUE = "too_high_value"   # Above the accepted input limit
    WRONG_VALUE = "wrong_value"         # Negative

    @property
    def position(self) -> int:
        return list(type(self)).index(self)


ErrorKind = Union[GenErrorKind, InputErrorKind]
