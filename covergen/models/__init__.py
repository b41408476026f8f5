from .geometry import Axis, AxisValues, Dimensions, half_ceil, half_floor
from .parameters import Catalog, CorrectionConstants, SpacingDefaults, CoverParameters
from .inputs import (
    UNSPECIFIED, DeviceDimensions, ObstacleDistances, MinimumSpacings, InputMatrix,
)
from .cover import GenerationResult
from .errors import GenErrorKind, InputErrorKind, ErrorKind
from .context import GenerationContext

__all__ = [
    "Axis", "AxisValues", "Dimensions", "half_ceil", "half_floor",
    "Catalog", "CorrectionConstants", "SpacingDefaults", "CoverParameters",
    "UNSPECIFIED", "DeviceDimensions", "ObstacleDistances", "MinimumSpacings", "InputMatrix",
    "GenerationResult",
    "GenErrorKind", "InputErrorKind", "ErrorKind",
    "GenerationContext",
]
