"""GoalMode value object - the four calorie/macro targets produced."""

from enum import Enum


class GoalMode(str, Enum):
    """Nutritional goal determining calorie base and macro split.

    - MAINTENANCE: eat at TDEE
    - CUT: TDEE + cut delta (expected negative)
    - BULK: TDEE + bulk delta (expected positive)
    - RECOMP: TDEE + recomp delta (typically slightly negative)
    """

    MAINTENANCE = "maintenance"
    CUT = "cut"
    BULK = "bulk"
    RECOMP = "recomp"

    def fat_fraction(self) -> float:
        """Get share of calories allocated to fat.

        Returns:
            float: Fat fraction (0.0-1.0)

        Example:
            >>> GoalMode.BULK.fat_fraction()
            0.3
        """
        fractions = {
            GoalMode.MAINTENANCE: 0.25,
            GoalMode.CUT: 0.25,
            GoalMode.BULK: 0.30,
            GoalMode.RECOMP: 0.20,
        }
        return fractions[self]

    def card_title(self) -> str:
        """Human-readable card title."""
        return self.value.capitalize()
