"""
Cover parameter loader - reads the line-oriented ``name: value`` text.

Format:
    # comment
    lengths: 800 1000 1200
    acc_length_param: 20

List parameters take any number of space-separated values, scalar
parameters read the first value only. Unknown names are skipped, a
malformed number aborts the whole load.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from pydantic import ValidationError

from covergen.errors import ConfigError
from covergen.models import (
    Catalog, CorrectionConstants, SpacingDefaults, CoverParameters, AxisValues,
)

logger = logging.getLogger(__name__)

CATALOG_NAMES = ("lengths", "widths", "heights")

# name -> (section, field)
SCALAR_NAMES: dict[str, tuple[str, str]] = {
    "out_length_param": ("outer", "length"),
    "out_width_param": ("outer", "width"),
    "out_height_param": ("outer", "height"),
    "acc_length_param": ("inner", "length"),
    "acc_width_param": ("inner", "width"),
    "acc_height_param": ("inner", "height"),
    "front_space": ("spacing", "front"),
    "side_space": ("spacing", "side"),
    "back_space": ("spacing", "back"),
    "top_space": ("spacing", "top"),
    "wall_space": ("wall", "space"),
}


def _to_float(token: str, name: str, line_no: int) -> float:
    try:
        value = float(token)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value):
        raise ConfigError(
            f"line {line_no}: invalid number {token!r} for parameter {name!r}"
        )
    return value


def parse_parameters(text: str, max_wall_modules: int = 3) -> CoverParameters:
    """Parse parameter text into a validated CoverParameters."""
    lists: dict[str, list[float]] = {name: [] for name in CATALOG_NAMES}
    scalars: dict[str, dict[str, float]] = {
        "outer": {}, "inner": {}, "spacing": {}, "wall": {},
    }

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        name, sep, rest = line.partition(":")
        if not sep:
            raise ConfigError(f"line {line_no}: missing ':' after parameter name")
        name = name.strip()
        tokens = rest.split()

        if name in lists:
            lists[name].extend(_to_float(t, name, line_no) for t in tokens)
        elif name in SCALAR_NAMES:
            if not tokens:
                raise ConfigError(f"line {line_no}: no value given for {name!r}")
            section, field = SCALAR_NAMES[name]
            scalars[section][field] = _to_float(tokens[0], name, line_no)
        else:
            logger.debug("Ignoring unknown parameter %r on line %d", name, line_no)

    try:
        return CoverParameters(
            catalog=Catalog(**lists),
            corrections=CorrectionConstants(
                inner=AxisValues(**scalars["inner"]),
                outer=AxisValues(**scalars["outer"]),
            ),
            spacing=SpacingDefaults(**scalars["spacing"]),
            wall_space=scalars["wall"].get("space", 0.0),
            max_wall_modules=max_wall_modules,
        )
    except ValidationError as e:
        raise ConfigError(f"invalid cover parameters: {e}") from e


def load_parameters(path: str | Path, max_wall_modules: int = 3) -> CoverParameters:
    """Read and parse a parameter file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"unable to read cover parameters file {path}: {e}") from e

    params = parse_parameters(text, max_wall_modules=max_wall_modules)
    logger.info(
        "Loaded cover parameters from %s (%d lengths, %d widths, %d heights)",
        path, len(params.catalog.lengths), len(params.catalog.widths),
        len(params.catalog.heights),
    )
    return params
