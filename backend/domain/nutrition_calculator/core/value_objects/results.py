"""Results value object - everything the engine derives from a profile."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .bmr import BMRBreakdown
from .goal import GoalMode
from .macro_targets import MacroTargets


@dataclass(frozen=True)
class Results:
    """Output of one calculation.

    Attributes:
        bmr: Recommended BMR and per-formula estimates
        tdee: Total daily energy expenditure in kcal/day
        maintenance: Targets at TDEE
        cut: Targets at TDEE + cut delta
        bulk: Targets at TDEE + bulk delta
        recomp: Targets at TDEE + recomp delta
        warnings: One entry per goal whose fat target is below 50 g
    """

    bmr: BMRBreakdown
    tdee: int
    maintenance: MacroTargets
    cut: MacroTargets
    bulk: MacroTargets
    recomp: MacroTargets
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    def for_goal(self, goal: GoalMode) -> MacroTargets:
        """Get targets for a goal.

        Args:
            goal: Goal mode

        Returns:
            MacroTargets: Targets for that goal
        """
        return getattr(self, goal.value)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the results view."""
        return {
            "bmr": self.bmr.to_dict(),
            "tdee": self.tdee,
            "maintenance": self.maintenance.to_dict(),
            "cut": self.cut.to_dict(),
            "bulk": self.bulk.to_dict(),
            "recomp": self.recomp.to_dict(),
            "warnings": list(self.warnings),
        }
