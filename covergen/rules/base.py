"""Abstract base class for all obstacle collision rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each checks clearance on one side of the cover
- Ordered: the registry runs them by ascending priority
- Conditional: a rule only applies when its obstacle distance was given
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from covergen.models import GenerationContext, GenErrorKind


class CollisionRule(ABC):
    """
    Base class for all collision rules.

    Subclasses implement `distance()` and `collides()`.
    The generator queries the registry, filters by `applies()`,
    and reports the first colliding rule in priority order.
    """

    # Lower priority = checked (and reported) first.
    priority: int = 100

    # Reported when the rule finds a collision.
    error_kind: GenErrorKind

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'collision.left')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Left Obstacle Clearance')."""
        ...

    @abstractmethod
    def distance(self, context: GenerationContext) -> int | None:
        """Distance to this rule's obstacle, or None if there is none."""
        ...

    @abstractmethod
    def collides(self, context: GenerationContext) -> bool:
        """
        True if the finished cover reaches the obstacle.

        Only called when `applies()` is True, so `distance()` is set and
        the context carries inner and outer dimensions.
        """
        ...

    def applies(self, context: GenerationContext) -> bool:
        return self.distance(context) is not None
