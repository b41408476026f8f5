"""Collision rule tests.

Reference cover (default spacings): device 950 x 500, inner width 720,
outer 1040 x 750. Half outer length is 520 and the device half length
475, so a side obstacle collides at 45 mm or less. Back spacing 50 puts
the inner center 60 mm in front of the device center, so the back
reaches 375 - 60 = 315 mm and an obstacle collides at 65 mm or less.
"""

import pytest

from covergen.core.analyzer import DimensionAnalyzer
from covergen.core.generator import CoverGenerator
from covergen.core.matcher import PartsMatcher
from covergen.core.registry import RuleRegistry, create_default_registry
from covergen.errors import CoverGenerationError
from covergen.models import (
    DeviceDimensions,
    GenerationContext,
    GenErrorKind,
    InputMatrix,
    MinimumSpacings,
    ObstacleDistances,
)
from covergen.rules.collision.back import BackCollisionRule
from covergen.rules.collision.side import LeftCollisionRule, RightCollisionRule


def _matrix(left=None, right=None, back=None, spacings=None) -> InputMatrix:
    return InputMatrix(
        device=DeviceDimensions(length=950, width=500, height=800),
        obstacles=ObstacleDistances(left=left, right=right, back=back),
        spacings=spacings or MinimumSpacings(),
    )


def _kind(generator, matrix):
    with pytest.raises(CoverGenerationError) as exc:
        generator.generate(matrix)
    return exc.value.kind


class TestSideCollision:
    """Left and right obstacles"""

    def test_far_obstacle_clear(self, generator):
        # 475 + 100 = 575 > 520
        result = generator.generate(_matrix(left=100))
        assert result.outer.length == 1040

    def test_touching_obstacle_collides(self, generator):
        # 475 + 45 = 520 <= 520
        assert _kind(generator, _matrix(left=45)) == GenErrorKind.LEFT_COLLISION

    def test_one_past_boundary_clear(self, generator):
        generator.generate(_matrix(left=46, right=46))

    def test_right_collision(self, generator):
        assert _kind(generator, _matrix(left=100, right=30)) == GenErrorKind.RIGHT_COLLISION

    def test_left_reported_before_right(self, generator):
        assert _kind(generator, _matrix(left=0, right=0, back=0)) == GenErrorKind.LEFT_COLLISION

    def test_odd_device_length_rounds_down(self, generator):
        # floor(951 / 2) = 475, same cover as the reference device
        matrix = InputMatrix(
            device=DeviceDimensions(length=951, width=500, height=800),
            obstacles=ObstacleDistances(left=45),
        )
        assert _kind(generator, matrix) == GenErrorKind.LEFT_COLLISION


class TestBackCollision:
    """Back obstacle with off-center device"""

    def test_center_offset(self, params):
        context = GenerationContext(matrix=_matrix(back=100), params=params)
        DimensionAnalyzer().analyze(context)
        PartsMatcher().match(context)
        context.outer = context.inner.grown_by(params.corrections.outer)

        rule = BackCollisionRule()
        assert rule.center_offset(context) == 360 - 250 - 50
        assert not rule.collides(context)

    def test_boundary(self, generator):
        assert _kind(generator, _matrix(back=65)) == GenErrorKind.BACK_COLLISION
        generator.generate(_matrix(back=66))

    def test_zero_back_spacing(self, generator):
        # inner width 620, outer 650, offset 310 - 250 - 0 = 60, reach 325 - 60 = 265
        spacings = MinimumSpacings(back=0)
        assert _kind(generator, _matrix(back=15, spacings=spacings)) == GenErrorKind.BACK_COLLISION
        generator.generate(_matrix(back=16, spacings=spacings))


class TestUnspecifiedObstacles:
    """No obstacle, no check"""

    def test_none_never_collides(self, generator):
        result = generator.generate(_matrix(spacings=MinimumSpacings(side=0, front=0, back=0, top=0)))
        assert result.modules == 2

    def test_sentinel_rows_never_collide(self, generator):
        matrix = InputMatrix.from_rows([[950, 500, 800], [-1, -1, -1], [0, 0, 0, 0]])
        generator.generate(matrix)

    def test_rules_skip_missing_distance(self, params):
        context = GenerationContext(matrix=_matrix(right=10), params=params)
        registry = create_default_registry()
        assert [r.get_id() for r in registry.get_applicable_rules(context)] == ["collision.right"]


class TestRuleRegistry:
    """Rule ordering and registration"""

    def test_default_order(self):
        registry = create_default_registry()
        assert [r.get_id() for r in registry.list_rules()] == [
            "collision.left", "collision.right", "collision.back",
        ]

    def test_unregister(self, params):
        registry = create_default_registry()
        registry.unregister("collision.left")
        generator = CoverGenerator(params, registry)

        assert generator.generate(_matrix(left=0)).outer.length == 1040

    def test_register_and_get(self):
        registry = RuleRegistry()
        rule = RightCollisionRule()
        registry.register(rule)
        registry.register(LeftCollisionRule())

        assert registry.get_rule("collision.right") is rule
        assert registry.get_rule("collision.back") is None
        assert [r.priority for r in registry.list_rules()] == [10, 20]
