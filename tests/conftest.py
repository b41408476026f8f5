"""
pytest configuration and shared fixtures.

Reference catalog used across the tests (millimeters):

    lengths 800 1000 1200, widths 500 600 700, heights 250 300 400
    inner corrections 20 / 20 / 10, outer corrections 20 / 30 / 30
    default spacings front 100, side 15, back 50, top 50

A 950 x 500 x 800 device with default spacings resolves to inner
1020 x 720 x 960, outer 1040 x 750 x 990 and 2 wall modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from covergen.config import CoverSettings, MessageTables
from covergen.core.generator import CoverGenerator
from covergen.core.reporter import ErrorReporter
from covergen.models import (
    AxisValues,
    Catalog,
    CorrectionConstants,
    CoverParameters,
    DeviceDimensions,
    InputMatrix,
    SpacingDefaults,
)
from covergen.services.cover_service import CoverService


PARAMETERS_TEXT = """\
# reference catalog
lengths: 800 1000 1200
widths: 500 600 700
heights: 250 300 400

out_length_param: 20
out_width_param: 30
out_height_param: 30
acc_length_param: 20
acc_width_param: 20
acc_height_param: 10

front_space: 100
side_space: 15
back_space: 50
top_space: 50
wall_space: 200
"""

GENERATOR_MESSAGES = [
    "Left collision",
    "Right collision",
    "Back collision",
    "Too wide",
    "Too deep",
    "Too high",
    "No part for depth",
    "No part for width",
]

INPUT_MESSAGES = [
    "Not a number",
    "Value too high",
    "Negative value",
]


# ============================================================================
# Parameter fixtures
# ============================================================================

@pytest.fixture
def params() -> CoverParameters:
    """Reference cover parameters, built in memory."""
    return CoverParameters(
        catalog=Catalog(
            lengths=[800, 1000, 1200],
            widths=[500, 600, 700],
            heights=[250, 300, 400],
        ),
        corrections=CorrectionConstants(
            inner=AxisValues(length=20, width=20, height=10),
            outer=AxisValues(length=20, width=30, height=30),
        ),
        spacing=SpacingDefaults(front=100, side=15, back=50, top=50),
        wall_space=200,
    )


@pytest.fixture
def messages() -> MessageTables:
    return MessageTables(generator=GENERATOR_MESSAGES, input=INPUT_MESSAGES)


@pytest.fixture
def reporter(messages: MessageTables) -> ErrorReporter:
    return ErrorReporter(messages)


# ============================================================================
# Engine fixtures
# ============================================================================

@pytest.fixture
def generator(params: CoverParameters) -> CoverGenerator:
    return CoverGenerator(params)


@pytest.fixture
def matrix() -> InputMatrix:
    """Reference device, no obstacles, default spacings."""
    return InputMatrix(device=DeviceDimensions(length=950, width=500, height=800))


@pytest.fixture
def service(params: CoverParameters, messages: MessageTables) -> CoverService:
    return CoverService(params, messages)


# ============================================================================
# File fixtures
# ============================================================================

@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Directory holding a parameter file and both message tables."""
    (tmp_path / "params.txt").write_text(PARAMETERS_TEXT, encoding="utf-8")
    (tmp_path / "gen.txt").write_text("\n".join(GENERATOR_MESSAGES) + "\n", encoding="utf-8")
    (tmp_path / "input.txt").write_text("\n".join(INPUT_MESSAGES) + "\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(config_dir: Path) -> CoverSettings:
    return CoverSettings(
        parameters_path=config_dir / "params.txt",
        generator_messages_path=config_dir / "gen.txt",
        input_messages_path=config_dir / "input.txt",
    )
