"""Rule registry - stores collision rules and orders them for a generation pass."""

from __future__ import annotations

from covergen.models import GenerationContext
from covergen.rules.base import CollisionRule


class RuleRegistry:
    """
    Central registry for all collision rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority.
    """

    def __init__(self) -> None:
        self._rules: dict[str, CollisionRule] = {}

    def register(self, rule: CollisionRule) -> None:
        """Register a collision rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> CollisionRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[CollisionRule]:
        """Return all registered rules, in priority order."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def get_applicable_rules(self, context: GenerationContext) -> list[CollisionRule]:
        """Rules whose obstacle distance was given, sorted by priority."""
        return [r for r in self.list_rules() if r.applies(context)]

    def find_collision(self, context: GenerationContext) -> CollisionRule | None:
        """
        Evaluate every applicable rule and return the first that collides.

        All checks run before one is picked, so the result depends only
        on rule priority.
        """
        rules = self.get_applicable_rules(context)
        hits = [r.collides(context) for r in rules]
        for rule, hit in zip(rules, hits):
            if hit:
                return rule
        return None


def create_default_registry() -> RuleRegistry:
    """Create a registry with the left, right and back collision rules."""
    from covergen.rules.collision.side import LeftCollisionRule, RightCollisionRule
    from covergen.rules.collision.back import BackCollisionRule

    registry = RuleRegistry()
    registry.register(LeftCollisionRule())
    registry.register(RightCollisionRule())
    registry.register(BackCollisionRule())
    return registry
