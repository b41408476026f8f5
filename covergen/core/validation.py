"""Raw input validation - turns text fields into an InputMatrix."""

from __future__ import annotations

from pydantic import ValidationError

from covergen.models import (
    InputErrorKind, InputMatrix, DeviceDimensions, ObstacleDistances, MinimumSpacings,
)
from covergen.errors import InputValidationError

DEFAULT_LIMIT = 2000

RawValue = str | int | None

DEVICE_FIELDS = ("length", "width", "height")
OBSTACLE_FIELDS = ("left", "right", "back")
SPACING_FIELDS = ("side", "front", "back", "top")


def check_dimension(value: RawValue, limit: int = DEFAULT_LIMIT, field: str | None = None) -> int | None:
    """
    Validate one measurement field.

    Empty text or None means "not given" and yields None. Otherwise the
    value must be a whole, non-negative number below `limit`.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InputValidationError(InputErrorKind.WRONG_FORMAT, field)
    if isinstance(value, int):
        number = value
    else:
        text = value.strip()
        if not text:
            return None
        try:
            number = int(text)
        except ValueError:
            raise InputValidationError(InputErrorKind.WRONG_FORMAT, field) from None

    if number < 0:
        raise InputValidationError(InputErrorKind.WRONG_VALUE, field)
    if number >= limit:
        raise InputValidationError(InputErrorKind.TOO_HIGH_VALUE, field)
    return number


def _check_group(
    group: str, names: tuple[str, ...], values: list[RawValue], limit: int,
) -> dict[str, int | None]:
    if len(values) != len(names):
        raise ValueError(f"{group} expects {len(names)} values, got {len(values)}")
    return {
        name: check_dimension(value, limit, f"{group}.{name}")
        for name, value in zip(names, values)
    }


def parse_input(
    device: list[RawValue],
    obstacles: list[RawValue] | None = None,
    spacings: list[RawValue] | None = None,
    limit: int = DEFAULT_LIMIT,
) -> InputMatrix:
    """Validate the three raw groups and assemble an InputMatrix."""
    obstacles = obstacles if obstacles is not None else [None] * len(OBSTACLE_FIELDS)
    spacings = spacings if spacings is not None else [None] * len(SPACING_FIELDS)

    dev = _check_group("device", DEVICE_FIELDS, device, limit)
    for name, value in dev.items():
        # Device size is mandatory
        if value is None:
            raise InputValidationError(InputErrorKind.WRONG_FORMAT, f"device.{name}")

    try:
        return InputMatrix(
            device=DeviceDimensions(**dev),
            obstacles=ObstacleDistances(**_check_group("obstacles", OBSTACLE_FIELDS, obstacles, limit)),
            spacings=MinimumSpacings(**_check_group("spacings", SPACING_FIELDS, spacings, limit)),
        )
    except ValidationError as e:
        raise InputValidationError(InputErrorKind.WRONG_VALUE) from e
