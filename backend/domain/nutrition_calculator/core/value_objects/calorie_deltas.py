"""CalorieDeltas value object - per-goal offsets applied to TDEE."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalorieDeltas:
    """Signed kcal/day offsets added to TDEE for each non-maintenance goal.

    Values are applied as supplied, without clamping.

    Attributes:
        cut: Offset for the cut goal (usually negative)
        bulk: Offset for the bulk goal (usually positive)
        recomp: Offset for the recomposition goal (usually negative)
    """

    cut: float = -500.0
    bulk: float = 500.0
    recomp: float = -200.0
